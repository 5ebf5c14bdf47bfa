"""Tests for embed builders that do not need a running client."""

from cogs.ping import ping_content
from views.damagecalc_views import (
    AdditionalModal,
    AffinityModal,
    AttackerModal,
    DefenderModal,
    is_stale_submission,
)
from views.sort_views import build_sort_embed


def test_ping_content():
    assert ping_content(1, 2) == "<@1> has pinged <@&2>!"
    assert ping_content(1, 2, "boss is up") == "<@1> has pinged <@&2>! - boss is up"


def test_sort_embed_first_page(catalog):
    ranked = catalog.filter_and_sort_items("defense", "Accessory")
    embed = build_sort_embed(ranked, "defense", "Accessory", 0)

    assert embed.title == "Top Items by Defense"
    assert embed.description.startswith("Items sorted by Defense at level 140 for accessory items")
    assert "**1.** Test Amulet" in embed.description
    assert "Defense: **50** | Rare | Amulet" in embed.description
    assert embed.footer.text.startswith("Page 1/1")


def test_sort_embed_ranks_continue_across_pages(catalog):
    item = catalog.find_item_by_id("ACC")
    ranked = [(item, 100 - i) for i in range(12)]
    embed = build_sort_embed(ranked, "power", None, 1)

    assert "**11.** Test Amulet" in embed.description
    assert "**12.** Test Amulet" in embed.description
    assert "**1.**" not in embed.description
    assert embed.footer.text.startswith("Page 2/2")


def test_damage_calc_accepts_the_modal_for_the_current_step():
    assert not is_stale_submission(0, AttackerModal)
    assert not is_stale_submission(1, DefenderModal)
    assert not is_stale_submission(2, AffinityModal)
    assert not is_stale_submission(3, AdditionalModal)


def test_damage_calc_ignores_a_repeated_submit():
    # Defender subclasses Attacker, so the match must be exact
    assert is_stale_submission(1, AttackerModal)
    assert is_stale_submission(3, AffinityModal)
    assert is_stale_submission(0, DefenderModal)
    assert is_stale_submission(4, AdditionalModal)
