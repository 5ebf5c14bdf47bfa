"""
Item commands cog for Discord bot.
Opens the interactive item editor for a catalog item.
"""

import discord
from discord.ext import commands
from discord import app_commands
from config import EMPTY_ENCHANTMENT_ID, EMPTY_MODIFIER_ID, ITEM_NOT_FOUND_MSG, MAX_LEVEL
from models import Slot
from views.item_views import ItemEditorView


class ItemCog(commands.Cog):
    """Item lookup and configuration"""

    def __init__(self, bot, catalog):
        self.bot = bot
        self.catalog = catalog

    async def item_autocomplete(self, interaction: discord.Interaction, current: str):
        return [
            app_commands.Choice(name=name, value=name)
            for name in self.catalog.autocomplete_items(current)
        ]

    @app_commands.command(name="item", description="Get information about an item with interactive editor")
    @app_commands.describe(name="Name of the item")
    @app_commands.autocomplete(name=item_autocomplete)
    async def item(self, interaction: discord.Interaction, name: str):
        item = self.catalog.find_item_by_name(name)
        if item is None:
            await interaction.response.send_message(ITEM_NOT_FOUND_MSG, ephemeral=True)
            return

        slot = Slot(item=item.id, enchant=EMPTY_ENCHANTMENT_ID, modifier=EMPTY_MODIFIER_ID, gems=[], level=MAX_LEVEL)
        view = ItemEditorView(slot, self.catalog, interaction.user.id)

        await interaction.response.send_message(embed=view.build_embed(), view=view)
        view.message = await interaction.original_response()


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(ItemCog(bot, bot.catalog))
