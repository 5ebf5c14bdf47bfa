"""
Configuration and constants for the Discord bot.
Contains colors, sentinel item IDs, emoji tables and other static configuration.
"""

VERSION = "v1.0.1"
EMBED_FOOTER = "Odysseus - Made with ❤️"

# Embed colors
DEFAULT_COLOR = 0x93b1e3
SUCCESS_COLOR = 0x00ff00
ERROR_COLOR = 0xff0000

RARITY_COLORS = {
    "Common": 0xffffff,
    "Uncommon": 0x7f734c,
    "Rare": 0x6765e4,
    "Exotic": 0xea3323,
}

MAX_LEVEL = 140
MIN_ITEM_LEVEL = 10

# Reserved catalog IDs meaning "nothing equipped"
EMPTY_ACCESSORY_ID = "AAA"
EMPTY_CHESTPLATE_ID = "AAB"
EMPTY_BOOTS_ID = "AAC"
EMPTY_ENCHANTMENT_ID = "AAD"
EMPTY_MODIFIER_ID = "AAE"
EMPTY_GEM_ID = "AAF"

EMPTY_ITEM_IDS = (EMPTY_ACCESSORY_ID, EMPTY_CHESTPLATE_ID, EMPTY_BOOTS_ID)

ATLANTEAN_ESSENCE = "Atlantean Essence"

# GearBuilder URLs
BUILD_URL_PREFIXES = (
    "https://tools.arcaneodyssey.net/gearBuilder#",
    "https://aotools.woodyloody.com/gearBuilder#",
)
BUILD_URL_SEPARATOR = "/gearBuilder#"

INVALID_URL_MSG = "Invalid URL! Please provide a valid GearBuilder build URL."
ITEM_NOT_FOUND_MSG = "❌ Item not found!"

WIKI_BASE_URL = "https://roblox-arcane-odyssey.fandom.com"

# Pagination / Discord limits
ITEMS_PER_PAGE = 10
AUTOCOMPLETE_LIMIT = 25
SELECT_OPTION_LIMIT = 25
MAX_GEM_SELECTS = 4
VIEW_TIMEOUT = 600  # 10 minutes for interactive views

# Stat emojis, in the order stats are displayed
STAT_EMOJIS = {
    "power": "<:power:1392363667059904632>",
    "defense": "<:defense:1392364201262977054>",
    "agility": "<:agility:1392364894573297746>",
    "attack_speed": "<:attackspeed:1392364933722804274>",
    "attack_size": "<:attacksize:1392364917616807956>",
    "intensity": "<:intensity:1392365008049934377>",
    "regeneration": "<:regeneration:1392365064010469396>",
    "piercing": "<:piercing:1392365031705808986>",
    "resistance": "<:resistance:1393458741009186907>",
    "drawback": "<:drawback:1392364965905563698>",
    "warding": "<:warding:1392366478560596039>",
    "insanity": "<:insanity:1392364984658301031>",
}

# /sort stat choices -> (display name, StatsPerLevel attribute)
SORT_STATS = {
    "power": ("Power", "power"),
    "agility": ("Agility", "agility"),
    "attackspeed": ("Attack Speed", "attack_speed"),
    "defense": ("Defense", "defense"),
    "attacksize": ("Attack Size", "attack_size"),
    "intensity": ("Intensity", "intensity"),
    "regeneration": ("Regeneration", "regeneration"),
    "resistance": ("Resistance", "resistance"),
    "armorpiercing": ("Armor Piercing", "piercing"),
}

# Magic / Fighting style icons used in build embeds
MAGIC_ICONS = {
    "Acid": "<:acid:1393706537419145378>",
    "Ash": "<:ash:1393706539273162842>",
    "Crystal": "<:crystal:1393706540850090064>",
    "Earth": "<:earth:1393706543157088307>",
    "Explosion": "<:explosion:1393706544926949516>",
    "Fire": "<:fire:1393706546453544980>",
    "Glass": "<:glass:1393706547950915666>",
    "Ice": "<:ice:1393706549716717628>",
    "Light": "<:light:1393706551495233629>",
    "Lightning": "<:lightning:1393706553650974831>",
    "Magma": "<:magma:1393706555572224030>",
    "Metal": "<:metal:1393706594142916808>",
    "Plasma": "<:plasma:1393706559401365674>",
    "Poison": "<:poison:1393706598400135238>",
    "Sand": "<:sand:1393706514249810062>",
    "Shadow": "<:shadow:1393706515747180596>",
    "Snow": "<:snow:1393706517718372402>",
    "Water": "<:water:1393706519442489446>",
    "Wind": "<:wind:1393706520889397360>",
    "Wood": "<:wood:1393706523032682619>",
}

FIGHTING_STYLE_ICONS = {
    "BasicCombat": "<:basiccombat:1393706037227556864>",
    "Boxing": "<:boxing:1393706038892560626>",
    "IronLeg": "<:ironleg:1393706043057504378>",
    "CannonFist": "<:cannonfist:1393706041124061386>",
    "SailorStyle": "<:sailorstyle:1393706011428393031>",
    "ThermoFist": "<:thermofist:1393706015010324572>",
}

# Icons used by /magic clash tables
MAGIC_CLASH_ICONS = {
    "Acid": "<:acid:1443732219628617880>",
    "Ash": "<:ash:1443732218043170887>",
    "Crystal": "<:crystal:1443732216432820377>",
    "Earth": "<:earth:1443732214515765279>",
    "Explosion": "<:explosion:1443732212855078942>",
    "Fire": "<:fire:1443732211500187788>",
    "Glass": "<:glass:1443732209927196834>",
    "Ice": "<:ice:1443732208308191302>",
    "Light": "<:light:1443732206752370698>",
    "Lightning": "<:lightning:1443732205024182304>",
    "Magma": "<:magma:1443732203639935158>",
    "Metal": "<:metal:1443732202402611320>",
    "Plasma": "<:plasma:1443732201131741224>",
    "Poison": "<:poison:1443732199705936083>",
    "Sand": "<:sand:1443732197914972271>",
    "Shadow": "<:shadow:1443732196232790117>",
    "Snow": "<:snow:1443732194697806116>",
    "Water": "<:water:1443732192277692467>",
    "Wind": "<:wind:1443732191036047494>",
    "Wood": "<:wood:1443732189601599599>",
}

ENCHANT_ICONS = {
    "Strong": "<:strong:1393732208673685615>",
    "Hard": "<:hard:1393732146514100334>",
    "Nimble": "<:nimble:1393732189136359656>",
    "Amplified": "<:amplified:1393732134249828422>",
    "Bursting": "<:bursting:1393732138754375801>",
    "Swift": "<:swift:1393732211379011624>",
    "Powerful": "<:powerful:1393732190595973180>",
    "Armored": "<:armored:1393732135604584489>",
    "Agile": "<:agile:1393732132588752946>",
    "Enhanced": "<:enhanced:1393732142772781076>",
    "Explosive": "<:explosive:1393732144869806151>",
    "Brisk": "<:brisk:1393732137315733564>",
    "Charged": "<:charged:1393732140533026846>",
    "Virtuous": "<:virtuous:1393732213480099940>",
    "Hasty": "<:hasty:1393732148699332718>",
    "Healing": "<:healing:1393732150288711690>",
    "Resilience": "<:resilience:1393732207155216404>",
    "Piercing": "<:piercing:1393732154491408507>",
}

MODIFIER_ICONS = {
    "Abyssal": "<:abyssal:1393733751279718591>",
    "Archaic": "<:archaic:1393733752877744178>",
    "Atlantean Essence": "<:atlantean:1393733755088404665>",
    "Blasted": "<:blasted:1393733757537882144>",
    "Crystalline": "<:crystalline:1393733759114936443>",
    "Drowned": "<:drowned:1393733760670896128>",
    "Frozen": "<:frozen:1393733762541682870>",
    "Superheated": "<:superheated:1393733766517887006>",
    "Sandy": "<:sandy:1393733763938386000>",
}

GEM_ICONS = {
    "Defense Gem": "<:defensegem:1393733031927349268>",
    "Power Gem": "<:powergem:1393733189289115710>",
    "Attack Speed Gem": "<:attackspeedgem:1393733075699105943>",
    "Attack Size Gem": "<:attacksizegem:1393733045210845336>",
    "Agility Gem": "<:agilitygem:1393733033659469926>",
    "Intensity Gem": "<:intensitygem:1393733041079324734>",
    "Lapiz Lazuli": "<:lapislazuli:1393733050508251177>",
    "Larimar": "<:larimar:1393733187091435520>",
    "Agate": "<:agate:1393733030019076177>",
    "Malachite": "<:malachite:1393733054895231077>",
    "Candelaria": "<:candelaria:1393733039049408657>",
    "Morenci": "<:morenci:1393733059039465562>",
    "Painite": "<:painite:1393733069969817762>",
    "Kyanite": "<:kyanite:1393733049115611136>",
    "Variscite": "<:variscite:1393733193798123560>",
    "Perfect Azurite": "<:azurite:1393733037447184394>",
    "Perfect Aventurine": "<:aventurine:1393733035450699910>",
    "Perfect Fire Opal": "<:fireopal:1393733046792093837>",
}

# Weapon stat bar ranges: (min, max, emoji)
WEAPON_STAT_BARS = {
    "damage": (0.9, 1.15, "🟧"),
    "speed": (0.7, 1.2, "🟦"),
    "size": (0.75, 1.3, "🟩"),
}
