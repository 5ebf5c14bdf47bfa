"""
Sort commands cog for Discord bot.
Ranks catalog items by a stat at max level.
"""

import discord
from discord.ext import commands
from discord import app_commands
from typing import Optional
from config import AUTOCOMPLETE_LIMIT, SORT_STATS
from utils.helpers import get_type_filter
from views.sort_views import SortPaginationView


class SortCog(commands.Cog):
    """Item ranking by stat"""

    def __init__(self, bot, catalog):
        self.bot = bot
        self.catalog = catalog

    async def item_type_autocomplete(self, interaction: discord.Interaction, current: str):
        current = current.lower()
        types = [t for t in self.catalog.item_types() if current in t.lower()]
        return [app_commands.Choice(name=t, value=t) for t in types[:AUTOCOMPLETE_LIMIT]]

    @app_commands.command(name="sort", description="Sort and display items by specific stats")
    @app_commands.describe(stat="The stat to sort by", item_type="Filter by item type (optional)")
    @app_commands.choices(stat=[
        app_commands.Choice(name=display, value=key)
        for key, (display, _) in SORT_STATS.items()
    ])
    @app_commands.autocomplete(item_type=item_type_autocomplete)
    async def sort(self, interaction: discord.Interaction, stat: app_commands.Choice[str],
                   item_type: Optional[str] = None):
        ranked = self.catalog.filter_and_sort_items(stat.value, item_type)

        if not ranked:
            await interaction.response.send_message(
                f"No items found with {stat.value} stats{get_type_filter(item_type)}."
            )
            return

        view = SortPaginationView(ranked, stat.value, item_type)
        await interaction.response.send_message(embed=view.current_embed(), view=view)


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(SortCog(bot, bot.catalog))
