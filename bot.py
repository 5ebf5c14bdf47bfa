"""
Main bot entry point for Discord bot.
Loads the game data and all cogs, then starts the bot.
"""

import discord
from discord.ext import commands
from aiohttp import web
import aiohttp
import logging
import asyncio
from database import Database
from utils.catalog import GameData
from bot_config import (
    DATA_DIR,
    DB_FILE,
    DISCORD_TOKEN,
    HTTP_TIMEOUT,
    LOG_LEVEL,
    WEB_SERVER_PORT,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Bot intents (slash commands only, no privileged intents needed)
intents = discord.Intents.default()

# Create bot instance
bot = commands.Bot(command_prefix="!", intents=intents)

# Database initialization
DATA_DIR.mkdir(parents=True, exist_ok=True)
DB_FILE.parent.mkdir(parents=True, exist_ok=True)

db = Database(str(DB_FILE))
catalog = GameData(DATA_DIR)


# ==================== ERROR HANDLERS ====================

@bot.tree.error
async def on_app_command_error(interaction: discord.Interaction, error: discord.app_commands.AppCommandError):
    """Global error handler for application commands"""
    logger.error(f"Command error in {interaction.command.name if interaction.command else 'unknown'}: {error}", exc_info=error)

    # Send user-friendly error message
    error_message = "❌ Something went wrong while processing your command. Please try again later."

    # Customize message for specific errors
    if isinstance(error, discord.app_commands.CommandOnCooldown):
        error_message = f"⏳ This command is on cooldown. Try again in {error.retry_after:.1f} seconds."
    elif isinstance(error, discord.app_commands.MissingPermissions):
        error_message = "❌ You don't have permission to use this command."
    elif isinstance(error, discord.app_commands.BotMissingPermissions):
        error_message = "❌ I don't have the necessary permissions to execute this command."
    elif isinstance(error, discord.app_commands.NoPrivateMessage):
        error_message = "❌ This command can only be used in a server."
    elif isinstance(error, discord.app_commands.CheckFailure):
        error_message = "❌ You don't have permission to use this command."

    try:
        if interaction.response.is_done():
            await interaction.followup.send(error_message, ephemeral=True)
        else:
            await interaction.response.send_message(error_message, ephemeral=True)
    except Exception as e:
        logger.error(f"Failed to send error message: {e}")


# ==================== BOT EVENTS ====================

@bot.event
async def on_ready():
    """Bot ready event"""
    logger.info(f"✅ Logged in as {bot.user} (ID: {bot.user.id})")
    logger.info(f"✅ Connected to {len(bot.guilds)} guilds")

    await bot.change_presence(activity=discord.Game(name="Arcane Odyssey"))

    # Sync commands
    try:
        synced = await bot.tree.sync()
        logger.info(f"✅ Synced {len(synced)} command(s)")
    except Exception as e:
        logger.error(f"❌ Failed to sync commands: {e}")

    # Start web server for health checks
    asyncio.create_task(start_web_server())

    logger.info("✅ Bot is ready!")


@bot.event
async def on_guild_join(guild):
    """Handle bot joining a new guild"""
    logger.info(f"✅ Joined new guild: {guild.name} (ID: {guild.id})")
    db.ensure_guild_exists(guild.id)


@bot.event
async def on_guild_remove(guild):
    """Handle bot leaving a guild"""
    logger.info(f"❌ Left guild: {guild.name} (ID: {guild.id})")


# ==================== WEB SERVER FOR HEALTH CHECKS ====================

async def health_check(request):
    """Health check endpoint"""
    return web.Response(text="OK", status=200)


async def start_web_server():
    """Start web server for health checks (for hosting platforms)"""
    app = web.Application()
    app.router.add_get("/", health_check)
    app.router.add_get("/health", health_check)

    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, "0.0.0.0", WEB_SERVER_PORT)

    try:
        await site.start()
        logger.info(f"✅ Web server started on port {WEB_SERVER_PORT}")
    except Exception as e:
        logger.error(f"❌ Failed to start web server: {e}")


# ==================== LOAD COGS ====================

async def load_cogs():
    """Load all cog modules"""
    cogs = [
        "cogs.general",
        "cogs.build",
        "cogs.item",
        "cogs.weapon",
        "cogs.magic",
        "cogs.sort",
        "cogs.wiki",
        "cogs.damagecalc",
        "cogs.ping",
    ]

    for cog in cogs:
        try:
            await bot.load_extension(cog)
            logger.info(f"✅ Loaded {cog}")
        except Exception as e:
            logger.error(f"❌ Failed to load {cog}: {e}")


# ==================== MAIN ENTRY POINT ====================

async def main():
    """Main entry point"""
    if not DISCORD_TOKEN:
        logger.error("❌ DISCORD_TOKEN not found in environment variables!")
        return

    timeout = aiohttp.ClientTimeout(total=HTTP_TIMEOUT)
    async with aiohttp.ClientSession(timeout=timeout) as session, bot:
        # Game data must be loaded before any command can answer
        await catalog.load_all(session)

        # Shared state read by the cogs in their setup()
        bot.db = db
        bot.catalog = catalog
        bot.http_session = session

        await load_cogs()

        await bot.start(DISCORD_TOKEN)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Bot stopped by user")
    except Exception as e:
        logger.error(f"❌ Fatal error: {e}")
