"""
MLB Stats Discord Bot
Browse MLB schedules, standings, team stats and rosters with message buttons.
"""

import logging
import os
import sys

import discord
from discord.ext import commands

from config import BOT_TOKEN_ENV, LOG_LEVEL, VIEW_TIMEOUT_SECONDS
from keyboards import Layout
from messages import UPSTREAM_ERROR_TEXT, format_players
from mlb_api import MLBStatsAPI, MLBStatsAPIError
from router import Router

logger = logging.getLogger(__name__)

# MLB API instance
mlb_api = MLBStatsAPI()


class MLBStatsBot(commands.Bot):
    async def close(self):
        await mlb_api.close()
        await super().close()


# Bot setup
intents = discord.Intents.default()
bot = MLBStatsBot(command_prefix=commands.when_mentioned, intents=intents)


def build_view(layout: Layout) -> discord.ui.View:
    """Turn a button layout into a view; each button's custom_id is its navigation token."""
    view = discord.ui.View(timeout=VIEW_TIMEOUT_SECONDS)
    for row, buttons in enumerate(layout):
        for button in buttons:
            view.add_item(discord.ui.Button(
                label=button.label,
                custom_id=button.token,
                style=discord.ButtonStyle.secondary if button.token.startswith("back:") else discord.ButtonStyle.primary,
                row=row,
            ))
    return view


class InteractionRenderer:
    """Edits the message a button press came from."""

    async def render(self, context: discord.Interaction, text: str, buttons: Layout) -> None:
        await context.edit_original_response(content=text, view=build_view(buttons))


router = Router(mlb_api, InteractionRenderer())


@bot.event
async def on_ready():
    """Bot startup event."""
    logger.info("%s has connected to Discord!", bot.user)
    logger.info("Bot is in %d server(s)", len(bot.guilds))

    # Sync slash commands
    try:
        synced = await bot.tree.sync()
        logger.info("Synced %d command(s)", len(synced))
    except discord.HTTPException:
        logger.exception("Failed to sync commands")


@bot.event
async def on_interaction(interaction: discord.Interaction):
    """Route button presses by custom_id."""
    if interaction.type != discord.InteractionType.component:
        return

    custom_id = (interaction.data or {}).get("custom_id")
    if not custom_id:
        return

    # Acknowledge first; fetching can take longer than Discord's response window
    await interaction.response.defer()
    await router.dispatch(custom_id, interaction)


@bot.tree.command(name="start", description="Open the MLB stats menu")
async def start(interaction: discord.Interaction):
    """Send the start menu."""
    text, layout = router.start_screen()
    await interaction.response.send_message(text, view=build_view(layout))


@bot.tree.command(name="player", description="Look up MLB players by name")
async def player(interaction: discord.Interaction, player_name: str):
    """Search this season's players by name."""
    await interaction.response.defer()

    try:
        players = await mlb_api.search_players(player_name)
    except MLBStatsAPIError:
        logger.exception("Player search failed for %r", player_name)
        await interaction.followup.send(UPSTREAM_ERROR_TEXT)
        return

    await interaction.followup.send(format_players(player_name, players))


def main():
    """Main entry point."""
    discord.utils.setup_logging(level=LOG_LEVEL, root=True)

    token = os.getenv(BOT_TOKEN_ENV)

    if not token:
        logger.error("%s not found in environment variables.", BOT_TOKEN_ENV)
        logger.error("Please set up your .env file with the bot token.")
        sys.exit(1)

    bot.run(token, log_handler=None)


if __name__ == "__main__":
    main()
