"""
Views and modals for the multi-step damage calculator.
"""

import discord
from discord import ui
from config import DEFAULT_COLOR, EMBED_FOOTER, VIEW_TIMEOUT
from utils.damage import DamageInputs, calculate_damage, validate_float_field, validate_int_field
import logging

logger = logging.getLogger(__name__)

# (button label, style) for each step; the last step calculates
STEPS = [
    ("Set Attacker Raw Stats", discord.ButtonStyle.primary),
    ("Set Defender Raw Stats", discord.ButtonStyle.primary),
    ("Set Affinity Multipliers", discord.ButtonStyle.primary),
    ("Set Additional Multipliers", discord.ButtonStyle.primary),
    ("Calculate Damage", discord.ButtonStyle.success),
]


class DamageCalcModal(ui.Modal):
    """Base modal: collects text inputs and hands parsed values back to the view"""

    # (attribute, label, placeholder) per input
    fields_spec = []
    embed_field = ""

    def __init__(self, view: "DamageCalcView"):
        super().__init__(title=self.embed_field)
        self.calc_view = view
        self.inputs = {}
        for attribute, label, placeholder in self.fields_spec:
            text_input = ui.TextInput(label=label, placeholder=placeholder, required=True, max_length=10)
            self.inputs[attribute] = text_input
            self.add_item(text_input)

    def parse(self) -> dict:
        raise NotImplementedError

    async def on_submit(self, interaction: discord.Interaction):
        try:
            values = self.parse()
        except ValueError as e:
            await interaction.response.send_message(f"❌ {e}", ephemeral=True)
            return

        await self.calc_view.advance(interaction, self, values)


class AttackerModal(DamageCalcModal):
    embed_field = "Attacker Raw Stats"
    fields_spec = [
        ("level", "Level", "e.g., 140"),
        ("power", "Power", "e.g., 70"),
        ("vitality", "Vitality", "e.g., 100"),
    ]

    def parse(self) -> dict:
        return {
            attr: validate_int_field(self.inputs[attr].value, label)
            for attr, label, _ in self.fields_spec
        }


class DefenderModal(AttackerModal):
    embed_field = "Defender Raw Stats"
    fields_spec = [
        ("def_level", "Level", "e.g., 140"),
        ("defense", "Defense", "e.g., 500"),
        ("resistance", "Resistance", "e.g., 20"),
    ]


class AffinityModal(DamageCalcModal):
    embed_field = "Affinity Multipliers"
    fields_spec = [
        ("base_affinity", "Base Affinity", "e.g., 1.0"),
        ("power_affinity", "Power Affinity", "e.g., 1.0"),
        ("damage_affinity", "Damage Affinity", "e.g., 1.0"),
    ]

    def parse(self) -> dict:
        return {
            attr: validate_float_field(self.inputs[attr].value, label)
            for attr, label, _ in self.fields_spec
        }


class AdditionalModal(AffinityModal):
    embed_field = "Additional Multipliers"
    fields_spec = [
        ("customization", "Customization", "e.g., 1.0"),
        ("synergy", "Synergy", "e.g., 1.0"),
        ("shape", "Shape/Embodiment", "e.g., 1.0"),
        ("charging", "Charging", "e.g., 1.0"),
    ]


MODALS = [AttackerModal, DefenderModal, AffinityModal, AdditionalModal]


def is_stale_submission(step: int, modal_cls) -> bool:
    """True when a modal no longer matches the step the view is waiting on"""
    return step >= len(MODALS) or modal_cls is not MODALS[step]


def format_values(modal: DamageCalcModal, values: dict) -> str:
    lines = []
    for attribute, label, _ in modal.fields_spec:
        value = values[attribute]
        lines.append(f"{label}: {value:.2f}" if isinstance(value, float) else f"{label}: {value}")
    return "\n".join(lines)


class DamageCalcView(ui.View):
    """Single button that walks through the four modals, then calculates"""

    def __init__(self, author: discord.abc.User):
        super().__init__(timeout=VIEW_TIMEOUT)
        self.author_id = author.id
        self.author_name = author.display_name
        self.inputs = DamageInputs()
        self.defender = {}
        self.step = 0
        self.embed = discord.Embed(
            title="Damage Calculator",
            description="Click the button below and fill out the fields to start calculating!",
            color=DEFAULT_COLOR
        )
        self.embed.set_author(name=author.display_name, icon_url=author.display_avatar.url)
        self.embed.set_footer(text=EMBED_FOOTER)
        self._refresh_button()

    def _refresh_button(self):
        label, style = STEPS[self.step]
        self.step_button.label = label
        self.step_button.style = style

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id != self.author_id:
            await interaction.response.send_message("❌ This calculator belongs to someone else.", ephemeral=True)
            return False
        return True

    async def advance(self, interaction: discord.Interaction, modal: DamageCalcModal, values: dict):
        """Store a submitted modal's values and move to the next step"""
        if is_stale_submission(self.step, type(modal)):
            # A second copy of an already submitted modal
            logger.debug(f"Ignoring stale {type(modal).__name__} at step {self.step}")
            await interaction.response.send_message("❌ This step was already submitted.", ephemeral=True)
            return

        for attribute, value in values.items():
            if hasattr(self.inputs, attribute):
                setattr(self.inputs, attribute, value)
            else:
                self.defender[attribute] = value

        self.embed.add_field(name=modal.embed_field, value=format_values(modal, values), inline=False)
        self.step += 1
        self._refresh_button()
        await interaction.response.edit_message(embed=self.embed, view=self)

    def result_embed(self) -> discord.Embed:
        result = calculate_damage(self.inputs)
        embed = discord.Embed(title="🎯 Damage Calculation Results", color=DEFAULT_COLOR)
        embed.set_author(name=self.author_name)
        embed.add_field(name="Base Ability Damage", value=str(result.base_ability_damage), inline=True)
        embed.add_field(name="Power Ability Damage", value=str(result.power_ability_damage), inline=True)
        embed.add_field(name="Pre-Multiplier Damage", value=str(result.pre_multiplier_damage), inline=True)
        embed.add_field(name="Damage", value=f"{result.damage:.2f}", inline=True)
        embed.add_field(name="Raw Simple Damage", value=f"{result.raw_simple_damage:.2f}", inline=True)
        embed.add_field(name="Final Damage", value=f"{result.final_damage:.2f}", inline=True)
        embed.set_footer(text=EMBED_FOOTER)
        return embed

    @ui.button(label="Set Attacker Raw Stats", style=discord.ButtonStyle.primary)
    async def step_button(self, interaction: discord.Interaction, button: ui.Button):
        if self.step < len(MODALS):
            await interaction.response.send_modal(MODALS[self.step](self))
            return

        logger.debug(f"Calculating damage for {self.inputs}")
        self.stop()
        await interaction.response.edit_message(embed=self.result_embed(), view=None)
