"""
Wiki commands cog for Discord bot.
"""

import discord
from discord.ext import commands
from discord import app_commands
import asyncio
import aiohttp
from config import DEFAULT_COLOR, EMBED_FOOTER
from utils.wiki import build_search_url, search_wiki, truncate_description
import logging

logger = logging.getLogger(__name__)

MAX_RESULTS = 5


class WikiCog(commands.Cog):
    """Fandom wiki search"""

    def __init__(self, bot, session: aiohttp.ClientSession):
        self.bot = bot
        self.session = session

    @app_commands.command(name="wiki", description="Searches the wiki")
    @app_commands.describe(query="What to search for on the wiki")
    async def wiki(self, interaction: discord.Interaction, query: str):
        await interaction.response.defer()

        try:
            results = await search_wiki(self.session, query)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error searching wiki: {e}")
            await interaction.followup.send("Failed to search the wiki. Please try again later.")
            return

        if not results:
            await interaction.followup.send("No results found for your search query.")
            return

        embed = discord.Embed(
            title=f"Wiki Search Results for: '{query}'",
            url=build_search_url(query),
            color=DEFAULT_COLOR
        )
        for index, result in enumerate(results[:MAX_RESULTS], start=1):
            embed.add_field(
                name=f"{index}. {result.title}",
                value=f"{truncate_description(result.description)}\n[Read more]({result.url})",
                inline=False
            )
        embed.set_footer(text=EMBED_FOOTER)

        await interaction.followup.send(embed=embed)


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(WikiCog(bot, bot.http_session))
