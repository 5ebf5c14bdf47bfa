"""
Pagination view for /sort results.
"""

import discord
from discord import ui
from typing import List, Optional, Tuple
from config import DEFAULT_COLOR, EMBED_FOOTER, ITEMS_PER_PAGE, MAX_LEVEL, VIEW_TIMEOUT
from models import Item
from utils.helpers import get_stat_display_name, get_type_filter, page_slice, total_pages


def build_sort_embed(ranked: List[Tuple[Item, int]], stat: str, item_type: Optional[str],
                     page: int) -> discord.Embed:
    """Embed for one zero-based page of sorted items"""
    pages = total_pages(len(ranked), ITEMS_PER_PAGE)
    stat_display = get_stat_display_name(stat)
    start = page * ITEMS_PER_PAGE

    lines = [f"Items sorted by {stat_display} at level {MAX_LEVEL}{get_type_filter(item_type)}", ""]
    for rank, (item, value) in enumerate(page_slice(ranked, page, ITEMS_PER_PAGE), start=start + 1):
        details = f"   {stat_display}: **{value}** | {item.rarity}"
        if item.sub_type:
            details += f" | {item.sub_type}"
        lines.append(f"**{rank}.** {item.name}")
        lines.append(details)
        lines.append("")

    embed = discord.Embed(
        title=f"Top Items by {stat_display}",
        description="\n".join(lines),
        color=DEFAULT_COLOR,
        timestamp=discord.utils.utcnow()
    )
    embed.set_footer(text=f"Page {page + 1}/{pages} • {EMBED_FOOTER}")
    return embed


class SortPaginationView(ui.View):
    """Prev / Page i/n / Next buttons over a ranked item list"""

    def __init__(self, ranked: List[Tuple[Item, int]], stat: str, item_type: Optional[str]):
        super().__init__(timeout=VIEW_TIMEOUT)
        self.ranked = ranked
        self.stat = stat
        self.item_type = item_type
        self.page = 0
        self.pages = total_pages(len(ranked), ITEMS_PER_PAGE)
        self._refresh_buttons()

    def _refresh_buttons(self):
        self.prev_button.disabled = self.page <= 0
        self.next_button.disabled = self.page >= self.pages - 1
        self.page_indicator.label = f"Page {self.page + 1}/{self.pages}"

    def current_embed(self) -> discord.Embed:
        return build_sort_embed(self.ranked, self.stat, self.item_type, self.page)

    async def _show_page(self, interaction: discord.Interaction, page: int):
        self.page = min(max(page, 0), self.pages - 1)
        self._refresh_buttons()
        await interaction.response.edit_message(embed=self.current_embed(), view=self)

    @ui.button(label="◀ Prev", style=discord.ButtonStyle.secondary)
    async def prev_button(self, interaction: discord.Interaction, button: ui.Button):
        await self._show_page(interaction, self.page - 1)

    @ui.button(label="Page 1/1", style=discord.ButtonStyle.secondary, disabled=True)
    async def page_indicator(self, interaction: discord.Interaction, button: ui.Button):
        await interaction.response.defer()

    @ui.button(label="Next ▶", style=discord.ButtonStyle.secondary)
    async def next_button(self, interaction: discord.Interaction, button: ui.Button):
        await self._show_page(interaction, self.page + 1)
