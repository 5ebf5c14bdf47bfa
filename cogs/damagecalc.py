"""
Damage calculator cog for Discord bot.
"""

import discord
from discord.ext import commands
from discord import app_commands
from views.damagecalc_views import DamageCalcView


class DamageCalcCog(commands.Cog):
    """Step-by-step damage calculation"""

    def __init__(self, bot):
        self.bot = bot

    @app_commands.command(name="damagecalc", description="Calculate your damage given certain stats")
    async def damagecalc(self, interaction: discord.Interaction):
        view = DamageCalcView(interaction.user)
        await interaction.response.send_message(embed=view.embed, view=view)


async def setup(bot):
    """Setup function to add cog to bot"""
    await bot.add_cog(DamageCalcCog(bot))
