"""
Game data catalog.
Loads the items, weapons and magics datasets (local JSON cache first, then
HTTP) and serves the lookups used by the commands and the stat aggregator.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import aiohttp

from bot_config import DATA_DIR, ITEMS_URL, MAGICS_URL, WEAPONS_URL
from config import (
    AUTOCOMPLETE_LIMIT,
    EMPTY_ENCHANTMENT_ID,
    EMPTY_GEM_ID,
    EMPTY_MODIFIER_ID,
    MAX_LEVEL,
    SORT_STATS,
)
from models import Item, MagicData, Weapon

logger = logging.getLogger(__name__)

MAGIC_AUTOCOMPLETE_LIMIT = 20


class GameData:
    """In-memory catalog shared by every cog.

    The catalog is replaced wholesale by the ``load_*`` methods and is
    otherwise read-only.
    """

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)
        self.items: List[Item] = []
        self.weapons: List[Weapon] = []
        self.magics: List[MagicData] = []

        self._items_by_id: Dict[str, Item] = {}
        self._items_by_name: Dict[str, Item] = {}
        self._weapons_by_name: Dict[str, Weapon] = {}
        self._magics_by_name: Dict[str, MagicData] = {}

        self.gem_ids: List[str] = []
        self.enchant_ids: List[str] = []
        self.modifier_ids: List[str] = []

    # ==================== LOADING ====================

    def load_items(self, items: List[dict]):
        """Replace the item list and rebuild the id/name caches"""
        self.items = [Item.from_dict(raw) for raw in items]
        self._items_by_id = {}
        self._items_by_name = {}
        self.gem_ids = []
        self.enchant_ids = []
        self.modifier_ids = []

        sentinels = {
            "Gem": (EMPTY_GEM_ID, self.gem_ids),
            "Enchant": (EMPTY_ENCHANTMENT_ID, self.enchant_ids),
            "Modifier": (EMPTY_MODIFIER_ID, self.modifier_ids),
        }

        for item in self.items:
            self._items_by_id[item.id] = item
            self._items_by_name[item.name.lower()] = item

            if item.main_type in sentinels:
                empty_id, ids = sentinels[item.main_type]
                if item.id != empty_id:
                    ids.append(item.id)

        logger.info(f"📦 Item cache initialized with {len(self._items_by_id)} items")

    def load_weapons(self, weapons: List[dict]):
        self.weapons = [Weapon.from_dict(raw) for raw in weapons]
        self._weapons_by_name = {weapon.name.lower(): weapon for weapon in self.weapons}
        logger.info(f"⚔️ Weapon cache initialized with {len(self._weapons_by_name)} weapons")

    def load_magics(self, magics: List[dict]):
        self.magics = [MagicData.from_dict(raw) for raw in magics]
        self._magics_by_name = {magic.name.lower(): magic for magic in self.magics}
        logger.info(f"✨ Magic cache initialized with {len(self._magics_by_name)} magics")

    async def _fetch_dataset(self, session: aiohttp.ClientSession, name: str, url: str) -> list:
        """Read ``<data_dir>/<name>.json``, falling back to ``url`` and caching the result"""
        path = self.data_dir / f"{name}.json"

        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                logger.info(f"📁 {path.name} found, decoded {len(data)} entries")
                return data
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"⚠️ Failed to decode {path.name}: {e}, falling back to API...")
        else:
            logger.warning(f"⚠️ {path.name} doesn't exist, fetching from API...")

        async with session.get(url) as response:
            response.raise_for_status()
            # raw.githubusercontent.com serves text/plain
            data = await response.json(content_type=None)

        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ Fetched and saved {path.name}")

        return data

    async def load_all(self, session: aiohttp.ClientSession):
        """Load every dataset; an HTTP failure propagates and aborts startup"""
        self.load_items(await self._fetch_dataset(session, "items", ITEMS_URL))
        self.load_weapons(await self._fetch_dataset(session, "weapons", WEAPONS_URL))
        self.load_magics(await self._fetch_dataset(session, "magics", MAGICS_URL))

    # ==================== LOOKUPS ====================

    def find_item_by_id(self, item_id: str) -> Item:
        item = self._items_by_id.get(item_id)
        return item if item is not None else Item.unknown(item_id)

    def find_item_by_name(self, name: str, case_insensitive: bool = True) -> Optional[Item]:
        if case_insensitive:
            return self._items_by_name.get(name.lower())
        return next((item for item in self.items if item.name == name), None)

    def find_weapon_by_name(self, name: str) -> Optional[Weapon]:
        return self._weapons_by_name.get(name.lower())

    def find_magic_by_name(self, name: str) -> Optional[MagicData]:
        return self._magics_by_name.get(name.lower())

    # ==================== AUTOCOMPLETE ====================

    def autocomplete_items(self, partial: str, limit: int = AUTOCOMPLETE_LIMIT) -> List[str]:
        partial = partial.lower()
        matches = [
            item.name for item in self.items
            if item.name != "None" and partial in item.name.lower()
        ]
        return matches[:limit]

    def autocomplete_weapons(self, partial: str, limit: int = AUTOCOMPLETE_LIMIT) -> List[str]:
        partial = partial.lower()
        return [w.name for w in self.weapons if partial in w.name.lower()][:limit]

    def autocomplete_magics(self, partial: str, limit: int = MAGIC_AUTOCOMPLETE_LIMIT) -> List[str]:
        partial = partial.lower()
        return [m.name for m in self.magics if partial in m.name.lower()][:limit]

    # ==================== SORTING ====================

    def item_types(self) -> List[str]:
        return sorted({
            item.main_type for item in self.items
            if not item.deleted and item.name != "None" and item.main_type
        })

    def filter_and_sort_items(self, stat: str, item_type: Optional[str] = None) -> List[tuple]:
        """
        Rank items by a stat's value at MAX_LEVEL.

        Args:
            stat: One of the SORT_STATS keys (e.g. "attackspeed", "armorpiercing")
            item_type: Optional main_type filter; empty means no filter

        Returns:
            List of (Item, value) pairs, highest value first
        """
        if stat not in SORT_STATS:
            return []
        attribute = SORT_STATS[stat][1]

        ranked = []
        for item in self.items:
            if item.deleted or item.name == "None" or item.stats_per_level is None:
                continue
            if item_type and item.main_type != item_type:
                continue

            row = next((r for r in item.stats_per_level if r.level == MAX_LEVEL), None)
            if row is None:
                continue

            value = getattr(row, attribute)
            if value is not None and value > 0:
                ranked.append((item, value))

        ranked.sort(key=lambda pair: pair[1], reverse=True)
        return ranked
