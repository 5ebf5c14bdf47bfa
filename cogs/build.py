"""
Build commands cog for Discord bot.
Loads a GearBuilder build URL and shows its equipment and total stats.
"""

import discord
from discord.ext import commands
from discord import app_commands
from config import DEFAULT_COLOR, EMBED_FOOTER, INVALID_URL_MSG
from models import Player
from utils.build_code import BuildCodeError, decode, extract_build_code, is_build_url
from utils.helpers import build_slot_field_text, style_icons_text
from utils.stats import aggregate_player, format_total_stats
import logging

logger = logging.getLogger(__name__)

PARSE_TIPS = (
    "💡 **Tips:**\n"
    "• Make sure the URL is complete\n"
    "• Check that the build was saved properly\n"
    "• Try generating a new build URL"
)


class BuildCog(commands.Cog):
    """GearBuilder build decoding"""

    def __init__(self, bot, catalog):
        self.bot = bot
        self.catalog = catalog

    def build_embed(self, player: Player, author: discord.abc.User) -> discord.Embed:
        """Embed for a decoded build"""
        total_stats = aggregate_player(player, self.catalog)

        embed = discord.Embed(title=f"{author.display_name}'s build", color=DEFAULT_COLOR)
        embed.add_field(name="Level", value=str(player.level), inline=True)
        embed.add_field(
            name="Stat Allocation",
            value=f"🟩 {player.vitality} 🟦 {player.magic}\n🟥 {player.strength} 🟨 {player.weapon}",
            inline=True
        )
        embed.add_field(name="Magic/Fighting Styles", value=style_icons_text(player) or "None", inline=True)

        for accessory in player.accessories:
            embed.add_field(name="Accessory", value=build_slot_field_text(accessory, self.catalog), inline=True)
        embed.add_field(name="Chestplate", value=build_slot_field_text(player.chestplate, self.catalog), inline=True)
        embed.add_field(name="Boots", value=build_slot_field_text(player.boots, self.catalog), inline=True)

        embed.add_field(name="Total Stats", value=format_total_stats(total_stats), inline=True)
        embed.set_footer(text=EMBED_FOOTER)
        return embed

    @app_commands.command(name="build", description="Loads a GearBuilder build from URL")
    @app_commands.describe(url="URL of the build")
    async def build(self, interaction: discord.Interaction, url: str):
        """Decode a GearBuilder URL and show the build"""
        await interaction.response.defer()

        if not is_build_url(url):
            await interaction.followup.send(INVALID_URL_MSG)
            return

        code = extract_build_code(url)
        if not code:
            await interaction.followup.send("Build URL appears to be empty or invalid.")
            return

        try:
            player = decode(code)
        except BuildCodeError as e:
            # Malformed codes are user input problems, not faults
            logger.debug(f"Rejected build code in section {e.section_name}: {e}")
            await interaction.followup.send(f"❌ **Failed to parse build:** {e}\n\n{PARSE_TIPS}")
            return

        await interaction.followup.send(embed=self.build_embed(player, interaction.user))


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(BuildCog(bot, bot.catalog))
