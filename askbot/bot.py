import asyncio
import logging
import sys
from typing import Optional

import discord
from discord import app_commands

from . import ai
from .config import build_intents, configure_logging, get_settings
from .errors import ConfigError
from .handlers.commands import COMMANDS, ask_command, dispatch_prefix, image_command
from .invocation import SlashInvocation
from .prompts import SLASH_COMMAND_ERROR

log = logging.getLogger(__name__)


def register_slash_commands(tree: app_commands.CommandTree):
    @tree.command(name="ask", description=COMMANDS["ask"].description)
    @app_commands.describe(prompt="The question you reluctantly need an answer for.")
    async def ask(interaction: discord.Interaction, prompt: str):
        await ask_command(SlashInvocation(interaction), prompt)

    @tree.command(name="image", description=COMMANDS["image"].description)
    @app_commands.describe(
        prompt="A description of the image you want to generate.",
        quality="The quality of the image. Defaults to standard.",
        style="The style of the image. Defaults to vivid.",
    )
    @app_commands.choices(
        quality=[
            app_commands.Choice(name="Standard", value="standard"),
            app_commands.Choice(name="HD", value="hd"),
        ],
        style=[
            app_commands.Choice(name="Vivid", value="vivid"),
            app_commands.Choice(name="Natural", value="natural"),
        ],
    )
    async def image(
        interaction: discord.Interaction,
        prompt: str,
        quality: Optional[app_commands.Choice[str]] = None,
        style: Optional[app_commands.Choice[str]] = None,
    ):
        await image_command(
            SlashInvocation(interaction),
            prompt,
            quality=quality.value if quality else "standard",
            style=style.value if style else "vivid",
        )

    @tree.error
    async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
        log.error("Slash command %s failed", interaction.command.name if interaction.command else "?", exc_info=error)
        try:
            await SlashInvocation(interaction).reply_error(SLASH_COMMAND_ERROR)
        except discord.HTTPException as e:
            log.error("Could not deliver error reply: %s", e)

    return tree


class AskBotClient(discord.Client):
    def __init__(self, settings):
        super().__init__(intents=build_intents())
        self.settings = settings
        self.tree = register_slash_commands(app_commands.CommandTree(self))

    async def setup_hook(self):
        synced = await self.tree.sync()
        log.info("Synced %d slash commands", len(synced))

    async def on_ready(self):
        log.info("Ready! Logged in as %s (ID: %s)", self.user, self.user.id)

    async def on_message(self, message):
        await dispatch_prefix(message, self.settings.command_prefix)


class BotRuntime:
    """
    Process-wide bot state.

    start() logs in exactly once; calling it again is a no-op. run() starts,
    holds the gateway connection until it drops, then close() releases the
    Discord session and the shared OpenAI client.
    """

    def __init__(self, settings, client=None):
        self.settings = settings
        self.client = client or AskBotClient(settings)
        self._started = False

    @property
    def started(self):
        return self._started

    async def start(self):
        if self._started:
            return
        if not self.settings.discord_token:
            raise ConfigError("DISCORD_TOKEN not set.")
        await self.client.login(self.settings.discord_token)
        self._started = True

    async def run(self):
        try:
            await self.start()
            await self.client.connect()
        finally:
            await self.close()

    async def close(self):
        if not self.client.is_closed():
            await self.client.close()
        await ai.close_client()
        self._started = False


def main():
    try:
        settings = get_settings()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings)
    if not settings.discord_token:
        log.error("DISCORD_TOKEN not set.")
        sys.exit(1)

    runtime = BotRuntime(settings)
    try:
        asyncio.run(runtime.run())
    except KeyboardInterrupt:
        log.info("Shutting down")


if __name__ == "__main__":
    main()
