"""
Ping commands cog for Discord bot.
Handles configured role pings and their per-guild configuration.
"""

import discord
from discord.ext import commands
from discord import app_commands
from typing import Optional
from config import AUTOCOMPLETE_LIMIT, DEFAULT_COLOR, EMBED_FOOTER
from utils.helpers import validate_ping_name
import logging

logger = logging.getLogger(__name__)

LIST_LIMIT = 10


def ping_content(user_id: int, target_role_id: int, message: Optional[str] = None) -> str:
    content = f"<@{user_id}> has pinged <@&{target_role_id}>!"
    if message:
        content += f" - {message}"
    return content


class PingCog(commands.Cog):
    """Configured role pings"""

    pingset = app_commands.Group(
        name="pingset",
        description="Manage ping configurations. Requires Manage Roles permission.",
        guild_only=True
    )

    def __init__(self, bot, db):
        self.bot = bot
        self.db = db

    async def ping_name_autocomplete(self, interaction: discord.Interaction, current: str):
        if interaction.guild_id is None:
            return []
        current = current.lower()
        names = [
            config['name'] for config in self.db.get_ping_configs(interaction.guild_id)
            if current in config['name'].lower()
        ]
        return [app_commands.Choice(name=name, value=name) for name in names[:AUTOCOMPLETE_LIMIT]]

    # ==================== PING ====================

    @app_commands.command(name="ping", description="Send a ping using configured ping types")
    @app_commands.describe(ping_type="Type of ping to send", message="Optional message to include with the ping")
    @app_commands.autocomplete(ping_type=ping_name_autocomplete)
    @app_commands.guild_only()
    async def ping(self, interaction: discord.Interaction, ping_type: str, message: Optional[str] = None):
        config = self.db.get_ping_config(interaction.guild_id, ping_type)
        if not config:
            await interaction.response.send_message(
                f"❌ Ping configuration '{ping_type}' not found!", ephemeral=True
            )
            return

        required_role_id = config.get('required_role_id')
        if required_role_id:
            member = interaction.user
            if not isinstance(member, discord.Member):
                await interaction.response.send_message("❌ Could not verify your permissions.", ephemeral=True)
                return
            if not any(role.id == required_role_id for role in member.roles):
                await interaction.response.send_message(
                    "❌ You don't have permission to use this ping!", ephemeral=True
                )
                return

        target_role_id = config['target_role_id']
        logger.info(f"📣 {interaction.user} used ping '{ping_type}' in guild {interaction.guild_id}")

        await interaction.response.send_message(
            ping_content(interaction.user.id, target_role_id, message),
            allowed_mentions=discord.AllowedMentions(
                everyone=False, users=False, roles=[discord.Object(id=target_role_id)]
            )
        )

    # ==================== PINGSET ====================

    @pingset.command(name="add", description="Add a new ping configuration")
    @app_commands.describe(
        name="Name for this ping type",
        target="Role to ping",
        required="Role required to use this ping (optional)",
        description="Description of this ping type"
    )
    @app_commands.checks.has_permissions(manage_roles=True)
    async def pingset_add(self, interaction: discord.Interaction, name: str, target: discord.Role,
                          required: Optional[discord.Role] = None, description: Optional[str] = None):
        error = validate_ping_name(name)
        if error:
            await interaction.response.send_message(error, ephemeral=True)
            return

        guild_id = interaction.guild_id
        self.db.ensure_guild_exists(guild_id)

        if self.db.get_ping_config(guild_id, name):
            await interaction.response.send_message(
                f"❌ A ping configuration named '{name}' already exists!", ephemeral=True
            )
            return

        success = self.db.add_ping_config(
            guild_id, name, description, required.id if required else None, target.id
        )
        if not success:
            await interaction.response.send_message(
                "❌ Failed to save the ping configuration. Please try again later.", ephemeral=True
            )
            return

        lines = [
            f"✅ Successfully created ping configuration **{name}**!",
            "",
            f"**Target Role:** {target.mention}",
            f"**Required Role:** {required.mention}" if required else "**Required Role:** None (anyone can use)",
        ]
        if description:
            lines.append(f"**Description:** {description}")

        await interaction.response.send_message(
            "\n".join(lines), allowed_mentions=discord.AllowedMentions.none()
        )

    @pingset.command(name="remove", description="Remove a ping configuration")
    @app_commands.describe(name="Name of ping type to remove")
    @app_commands.autocomplete(name=ping_name_autocomplete)
    @app_commands.checks.has_permissions(manage_roles=True)
    async def pingset_remove(self, interaction: discord.Interaction, name: str):
        if self.db.remove_ping_config(interaction.guild_id, name):
            await interaction.response.send_message(f"✅ Successfully removed ping configuration **{name}**!")
        else:
            await interaction.response.send_message(f"❌ Ping configuration '{name}' not found!", ephemeral=True)

    @pingset.command(name="list", description="List all ping configurations")
    async def pingset_list(self, interaction: discord.Interaction):
        configs = self.db.get_ping_configs(interaction.guild_id)

        if not configs:
            await interaction.response.send_message(
                "📝 No ping configurations found for this server.\n\n"
                "Use `/pingset add` to create your first ping configuration!"
            )
            return

        embed = discord.Embed(
            title="📋 Ping Configurations",
            description=f"Found {len(configs)} ping configurations for this server:",
            color=DEFAULT_COLOR
        )
        for config in configs[:LIST_LIMIT]:
            value = f"**Target:** <@&{config['target_role_id']}>\n"
            if config.get('required_role_id'):
                value += f"**Required Role:** <@&{config['required_role_id']}>\n"
            else:
                value += "**Required Role:** None (anyone can use)\n"
            if config.get('description'):
                value += f"**Description:** {config['description']}"
            embed.add_field(name=config['name'], value=value, inline=True)
        embed.set_footer(text=EMBED_FOOTER)

        warning = None
        if len(configs) > LIST_LIMIT:
            warning = f"⚠️ Showing first {LIST_LIMIT} of {len(configs)} configurations."

        await interaction.response.send_message(content=warning, embed=embed)


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(PingCog(bot, bot.db))
