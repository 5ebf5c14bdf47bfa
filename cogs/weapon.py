"""
Weapon commands cog for Discord bot.
"""

import discord
from discord.ext import commands
from discord import app_commands
from config import EMBED_FOOTER, WEAPON_STAT_BARS
from models import Weapon
from utils.helpers import create_weapon_stat_bar, get_rarity_color


class WeaponCog(commands.Cog):
    """Weapon lookup"""

    def __init__(self, bot, catalog):
        self.bot = bot
        self.catalog = catalog

    def weapon_embed(self, weapon: Weapon) -> discord.Embed:
        embed = discord.Embed(
            title=weapon.name,
            description=weapon.legend,
            color=get_rarity_color(weapon.rarity)
        )
        if weapon.image_id:
            embed.set_thumbnail(url=weapon.image_id)

        if weapon.special_effect:
            embed.add_field(name="Special Effect", value=weapon.special_effect, inline=True)

        # Shield-only stats
        if weapon.blocking_power and weapon.blocking_power > 0:
            embed.add_field(name="Blocking Power", value=f"{weapon.blocking_power:.2f}", inline=True)
        if weapon.defense and weapon.defense > 0:
            embed.add_field(name="Defense", value=str(weapon.defense), inline=True)
        if weapon.weight and weapon.weight > 0:
            embed.add_field(name="Weight", value=str(weapon.weight), inline=True)

        for stat in ("damage", "speed", "size"):
            minimum, maximum, emoji = WEAPON_STAT_BARS[stat]
            value = getattr(weapon, stat)
            bar = create_weapon_stat_bar(value, minimum, maximum, emoji)
            embed.add_field(name=stat.title(), value=f"{bar} {value:.3f}x", inline=False)

        embed.set_footer(text=EMBED_FOOTER)
        return embed

    async def weapon_autocomplete(self, interaction: discord.Interaction, current: str):
        return [
            app_commands.Choice(name=name, value=name)
            for name in self.catalog.autocomplete_weapons(current)
        ]

    @app_commands.command(name="weapon", description="Get information about a weapon")
    @app_commands.describe(name="Name of the weapon")
    @app_commands.autocomplete(name=weapon_autocomplete)
    async def weapon(self, interaction: discord.Interaction, name: str):
        weapon = self.catalog.find_weapon_by_name(name)
        if weapon is None:
            await interaction.response.send_message("❌ Weapon not found!", ephemeral=True)
            return

        await interaction.response.send_message(embed=self.weapon_embed(weapon))


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(WeaponCog(bot, bot.catalog))
