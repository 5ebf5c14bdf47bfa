"""
Bot configuration settings.
Contains runtime configuration for data sources, HTTP, storage and hosting.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord token
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Storage (database.py reads DATABASE_URL itself to select PostgreSQL)
DATA_DIR = Path(os.getenv("DATA_DIR", "data"))
DB_FILE = Path(os.getenv("DB_FILE", str(DATA_DIR / "bot_data.db")))

# Game datasets
ITEMS_URL = os.getenv(
    "ITEMS_URL", "https://raw.githubusercontent.com/hozhai/odysseus/refs/heads/main/items.json"
)
WEAPONS_URL = os.getenv(
    "WEAPONS_URL", "https://raw.githubusercontent.com/hozhai/odysseus/refs/heads/main/weapons.json"
)
MAGICS_URL = os.getenv(
    "MAGICS_URL", "https://raw.githubusercontent.com/hozhai/odysseus/refs/heads/main/magics.json"
)

# HTTP client timeout (in seconds)
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))

# Web server
WEB_SERVER_PORT = int(os.getenv("PORT", "8080"))
