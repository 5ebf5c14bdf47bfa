"""
Magic commands cog for Discord bot.
"""

import discord
from discord.ext import commands
from discord import app_commands
from config import DEFAULT_COLOR, EMBED_FOOTER, MAGIC_CLASH_ICONS, STAT_EMOJIS
from models import MagicData


def clash_text(names) -> str:
    return "\n".join(MAGIC_CLASH_ICONS.get(name, name) for name in names) or "None"


class MagicCog(commands.Cog):
    """Magic lookup"""

    def __init__(self, bot, catalog):
        self.bot = bot
        self.catalog = catalog

    def magic_embed(self, magic: MagicData) -> discord.Embed:
        power = STAT_EMOJIS["power"]
        speed = STAT_EMOJIS["attack_speed"]
        size = STAT_EMOJIS["attack_size"]

        embed = discord.Embed(title=magic.name, description=magic.legend, color=DEFAULT_COLOR)
        if magic.image_id:
            embed.set_thumbnail(url=magic.image_id)

        embed.add_field(name="Special Effect", value=magic.special_effect or "None", inline=True)
        embed.add_field(
            name="Unimbued Stats",
            value=(
                f"{power} {magic.unimbued.damage}x\n"
                f"{speed} {magic.unimbued.speed}x\n"
                f"{size} {magic.unimbued.size}x"
            ),
            inline=True
        )
        embed.add_field(
            name="Imbued Stats",
            value=(
                f"{power} {magic.imbued.damage}x\n"
                f"{speed} {magic.imbued.speed}x\n"
                f"{size} [cj] {magic.imbued.size.conjurer}x\n"
                f"{size} [wl] {magic.imbued.size.warlock}x"
            ),
            inline=True
        )
        embed.add_field(name="Outclashes", value=clash_text(magic.clash.over), inline=True)
        embed.add_field(name="Neutral clashes", value=clash_text(magic.clash.neutral), inline=True)
        embed.add_field(name="Outclashed by", value=clash_text(magic.clash.under), inline=True)
        embed.set_footer(text=EMBED_FOOTER)
        return embed

    async def magic_autocomplete(self, interaction: discord.Interaction, current: str):
        return [
            app_commands.Choice(name=name, value=name)
            for name in self.catalog.autocomplete_magics(current)
        ]

    @app_commands.command(name="magic", description="Get information about a magic")
    @app_commands.describe(magic="Name of the magic")
    @app_commands.autocomplete(magic=magic_autocomplete)
    async def magic(self, interaction: discord.Interaction, magic: str):
        data = self.catalog.find_magic_by_name(magic)
        if data is None:
            await interaction.response.send_message("❌ Magic not found!", ephemeral=True)
            return

        await interaction.response.send_message(embed=self.magic_embed(data))


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(MagicCog(bot, bot.catalog))
