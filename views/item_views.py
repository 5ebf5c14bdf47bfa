"""
Interactive item editor view.
The view owns a working copy of the Slot; every change re-renders the embed.
"""

import discord
from discord import ui
from config import (
    EMBED_FOOTER,
    EMPTY_ENCHANTMENT_ID,
    EMPTY_MODIFIER_ID,
    MAX_GEM_SELECTS,
    MAX_LEVEL,
    MIN_ITEM_LEVEL,
    SUCCESS_COLOR,
    VIEW_TIMEOUT,
)
from models import Slot
from utils.helpers import (
    enchant_choices,
    enchant_emoji,
    gem_choices,
    gems_field_text,
    get_rarity_color,
    item_to_stats,
    max_slot_level,
    modifier_choices,
    modifier_emoji,
    set_slot_enchant,
    set_slot_gem,
    set_slot_modifier,
    shift_slot_level,
)
from utils.stats import aggregate_slot, format_total_stats
import logging

logger = logging.getLogger(__name__)

MAIN, ENCHANT, MODIFIER, GEMS = "main", "enchant", "modifier", "gems"


class ItemEditorView(ui.View):
    """Enchant / modifier / gem / level editor for a single item"""

    def __init__(self, slot: Slot, catalog, author_id: int):
        super().__init__(timeout=VIEW_TIMEOUT)
        self.slot = slot
        self.catalog = catalog
        self.author_id = author_id
        self.item = catalog.find_item_by_id(slot.item)
        self.mode = MAIN
        self.message = None
        self._build_components()

    # ==================== RENDERING ====================

    def build_embed(self) -> discord.Embed:
        item = self.item
        slot = self.slot

        embed = discord.Embed(title=item.name, description=item.legend, color=get_rarity_color(item.rarity))
        if item.image_id:
            embed.set_thumbnail(url=item.image_id)
        embed.add_field(name="Type", value=item.main_type or "Unknown", inline=True)
        embed.add_field(name="Rarity", value=item.rarity or "Unknown", inline=True)
        embed.add_field(name="Level", value=str(slot.level), inline=True)

        if slot.enchant and slot.enchant != EMPTY_ENCHANTMENT_ID:
            enchant = self.catalog.find_item_by_id(slot.enchant)
            if enchant.name != "None":
                embed.add_field(name="Enchantment", value=f"{enchant_emoji(enchant) or ''} {enchant.name}".strip(), inline=True)

        if slot.modifier and slot.modifier != EMPTY_MODIFIER_ID:
            modifier = self.catalog.find_item_by_id(slot.modifier)
            if modifier.name != "None":
                embed.add_field(name="Modifier", value=f"{modifier_emoji(modifier) or ''} {modifier.name}".strip(), inline=True)

        if item.gem_no and item.gem_no > 0:
            embed.add_field(name="Gems", value=gems_field_text(slot, item, self.catalog), inline=True)

        embed.add_field(
            name="Total Stats",
            value=format_total_stats(aggregate_slot(slot, self.catalog)),
            inline=False
        )
        embed.set_footer(text=EMBED_FOOTER)
        return embed

    def completion_embed(self) -> discord.Embed:
        embed = discord.Embed(
            title="Item Configuration Complete",
            description=f"Final configuration for: **{self.item.name}**",
            color=SUCCESS_COLOR
        )
        embed.add_field(name="Final Stats", value=f"```\n{item_to_stats(self.slot, self.catalog)}\n```", inline=False)
        embed.set_footer(text=EMBED_FOOTER)
        return embed

    def _button(self, label: str, style: discord.ButtonStyle, callback, row: int, disabled: bool = False):
        button = ui.Button(label=label, style=style, row=row, disabled=disabled)
        button.callback = callback
        self.add_item(button)

    def _select(self, placeholder: str, choices, callback, row: int):
        select = ui.Select(
            placeholder=placeholder,
            options=[discord.SelectOption(label=label, value=value) for label, value in choices],
            row=row
        )
        select.callback = lambda interaction: callback(interaction, select)
        self.add_item(select)

    def _build_components(self):
        self.clear_items()
        item = self.item

        if self.mode == MAIN:
            self._button("Set Enchantment", discord.ButtonStyle.primary, self._open_enchant, row=0)
            if item.valid_modifiers:
                self._button("Set Modifier", discord.ButtonStyle.primary, self._open_modifier, row=0)
            if item.gem_no and item.gem_no > 0:
                self._button("Set Gems", discord.ButtonStyle.primary, self._open_gems, row=0)

            min_level = item.min_level or MIN_ITEM_LEVEL
            self._button("-10", discord.ButtonStyle.secondary, self._level_down, row=1,
                         disabled=self.slot.level <= min_level)
            self._button("+10", discord.ButtonStyle.secondary, self._level_up, row=1,
                         disabled=self.slot.level >= MAX_LEVEL)
            self._button("Max Level", discord.ButtonStyle.secondary, self._level_max, row=1,
                         disabled=self.slot.level >= MAX_LEVEL)
            self._button("Finish", discord.ButtonStyle.success, self._finish, row=2)
            return

        if self.mode == ENCHANT:
            self._select("Select an enchantment", enchant_choices(self.catalog), self._on_enchant, row=0)
        elif self.mode == MODIFIER:
            self._select("Select a modifier", modifier_choices(item, self.catalog), self._on_modifier, row=0)
        elif self.mode == GEMS:
            choices = gem_choices(self.catalog)
            for index in range(min(item.gem_no or 0, MAX_GEM_SELECTS)):
                self._select(
                    f"Select gem for slot {index + 1}", choices,
                    lambda interaction, select, index=index: self._on_gem(interaction, select, index),
                    row=index
                )

        self._button("Done", discord.ButtonStyle.success, self._back_to_main, row=4)

    async def _render(self, interaction: discord.Interaction):
        self._build_components()
        await interaction.response.edit_message(embed=self.build_embed(), view=self)

    # ==================== CALLBACKS ====================

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id != self.author_id:
            await interaction.response.send_message("❌ Only the person who opened this editor can use it.", ephemeral=True)
            return False
        return True

    async def _open_enchant(self, interaction: discord.Interaction):
        self.mode = ENCHANT
        await self._render(interaction)

    async def _open_modifier(self, interaction: discord.Interaction):
        self.mode = MODIFIER
        await self._render(interaction)

    async def _open_gems(self, interaction: discord.Interaction):
        self.mode = GEMS
        await self._render(interaction)

    async def _back_to_main(self, interaction: discord.Interaction):
        self.mode = MAIN
        await self._render(interaction)

    async def _level_down(self, interaction: discord.Interaction):
        self.slot = shift_slot_level(self.slot, self.item, -10)
        await self._render(interaction)

    async def _level_up(self, interaction: discord.Interaction):
        self.slot = shift_slot_level(self.slot, self.item, 10)
        await self._render(interaction)

    async def _level_max(self, interaction: discord.Interaction):
        self.slot = max_slot_level(self.slot)
        await self._render(interaction)

    async def _on_enchant(self, interaction: discord.Interaction, select: ui.Select):
        self.slot = set_slot_enchant(self.slot, select.values[0])
        await self._render(interaction)

    async def _on_modifier(self, interaction: discord.Interaction, select: ui.Select):
        self.slot = set_slot_modifier(self.slot, select.values[0])
        await self._render(interaction)

    async def _on_gem(self, interaction: discord.Interaction, select: ui.Select, index: int):
        self.slot = set_slot_gem(self.slot, index, select.values[0])
        await self._render(interaction)

    async def _finish(self, interaction: discord.Interaction):
        self.stop()
        await interaction.response.edit_message(embed=self.completion_embed(), view=None)

    async def on_timeout(self):
        if self.message is None:
            return
        try:
            await self.message.edit(view=None)
        except discord.HTTPException as e:
            logger.debug(f"Could not clear expired item editor: {e}")
