"""
General commands cog for Discord bot.
Handles help, about and latency.
"""

import time
import discord
from discord.ext import commands
from discord import app_commands
from config import DEFAULT_COLOR, EMBED_FOOTER, VERSION

HELP_COMMANDS = [
    ("/help", "Shows this help menu"),
    ("/latency", "Returns the API latency"),
    ("/about", "About Odysseus"),
    ("/wiki <query>", "Searches the wiki"),
    ("/build <url>", "Loads a GearBuilder build from URL"),
    ("/item <name>", "Get information about an item"),
    ("/weapon <name>", "Get information about a weapon"),
    ("/magic <name>", "Get information about a magic"),
    ("/damagecalc", "Calculate your damage given certain stats"),
    ("/sort <stat> [type]", "Sort and display items by specific stats"),
    ("/ping <type> [message]", "Send a ping using configured ping types"),
    ("/pingset", "Manage ping configurations (requires Manage Roles)"),
]


class GeneralCog(commands.Cog):
    """Informational commands about the bot itself"""

    def __init__(self, bot):
        self.bot = bot

    @app_commands.command(name="help", description="Displays the help menu")
    async def help_command(self, interaction: discord.Interaction):
        embed = discord.Embed(
            title="Odysseus Help",
            description="Here are all available commands:",
            color=DEFAULT_COLOR
        )
        for name, description in HELP_COMMANDS:
            embed.add_field(name=name, value=description, inline=False)
        embed.set_footer(text=EMBED_FOOTER)

        await interaction.response.send_message(embed=embed)

    @app_commands.command(name="about", description="About Odysseus")
    async def about(self, interaction: discord.Interaction):
        embed = discord.Embed(
            title="About Odysseus",
            description="A Discord bot for Arcane Odyssey",
            color=DEFAULT_COLOR
        )
        embed.add_field(name="Version", value=VERSION, inline=True)
        embed.add_field(name="Author", value="hozhai", inline=True)
        embed.add_field(name="Language", value="Python", inline=True)
        embed.add_field(name="Framework", value=f"discord.py {discord.__version__}", inline=True)
        embed.set_footer(text=EMBED_FOOTER)

        await interaction.response.send_message(embed=embed)

    @app_commands.command(name="latency", description="Returns the API latency")
    async def latency(self, interaction: discord.Interaction):
        """Measure the round trip of sending a message"""
        start = time.perf_counter()
        await interaction.response.send_message("Pinging...")
        elapsed_ms = (time.perf_counter() - start) * 1000

        embed = discord.Embed(title="🏓 Pong!", color=DEFAULT_COLOR)
        embed.add_field(name="API Latency", value=f"{elapsed_ms:.0f}ms", inline=False)
        embed.add_field(name="Websocket Latency", value=f"{self.bot.latency * 1000:.0f}ms", inline=False)
        embed.set_footer(text=EMBED_FOOTER)

        await interaction.edit_original_response(content="", embed=embed)


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(GeneralCog(bot))
