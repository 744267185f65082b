import io
import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, List

import discord

from .. import ai
from ..errors import AskBotError
from ..invocation import Invocation, PrefixInvocation
from ..prompts import (
    ASK_EMPTY,
    ASK_FAILED,
    ASK_NOTICE,
    IMAGE_EMPTY,
    IMAGE_FAILED,
    IMAGE_NOTICE,
    PREFIX_COMMAND_ERROR,
)
from .text import send_long

log = logging.getLogger(__name__)

IMAGE_FILENAME = "dalle-image.png"


async def ask_command(invocation: Invocation, prompt):
    await invocation.acknowledge(ASK_NOTICE)
    if not prompt or not prompt.strip():
        await invocation.reply(ASK_EMPTY)
        return
    try:
        answer = await ai.ask(prompt)
        await send_long(invocation, answer)
    except (AskBotError, discord.HTTPException) as e:
        log.error("ask failed: %s", e)
        await _safe_error_reply(invocation, ASK_FAILED.format(error=e))


async def image_command(invocation: Invocation, prompt, quality="standard", style="vivid"):
    await invocation.acknowledge(IMAGE_NOTICE)
    if not prompt or not prompt.strip():
        await invocation.reply(IMAGE_EMPTY)
        return
    try:
        data = await ai.generate_image(prompt, quality=quality, style=style)
        await invocation.reply(file=discord.File(io.BytesIO(data), filename=IMAGE_FILENAME))
    except (AskBotError, discord.HTTPException) as e:
        log.error("image generation failed: %s", e)
        await _safe_error_reply(invocation, IMAGE_FAILED)


async def _safe_error_reply(invocation, content):
    try:
        await invocation.reply_error(content)
    except discord.HTTPException as e:
        log.error("Could not deliver error reply: %s", e)


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    # prefix entry point: (invocation, args) -> None
    execute: Callable[[PrefixInvocation, List[str]], Awaitable[None]]


async def _ask_from_args(invocation, args):
    await ask_command(invocation, " ".join(args))


async def _image_from_args(invocation, args):
    await image_command(invocation, " ".join(args))


COMMANDS = {
    "ask": Command("ask", "Asks a question to the snarky, all-knowing AI.", _ask_from_args),
    "image": Command("image", "Generates an image using DALL-E 3.", _image_from_args),
}


def parse_prefix(content, prefix):
    """Return (command name, args) for a prefixed message, or None."""
    if not content or not content.startswith(prefix):
        return None
    args = [a for a in re.split(r" +", content[len(prefix):].strip()) if a]
    if not args:
        return None
    return args[0].lower(), args[1:]


async def dispatch_prefix(message, prefix):
    # Ignore messages from bots
    if message.author.bot:
        return
    parsed = parse_prefix(message.content, prefix)
    if parsed is None:
        return
    name, args = parsed
    command = COMMANDS.get(name)
    if command is None:
        return

    try:
        await command.execute(PrefixInvocation(message), args)
    except Exception:
        log.exception("Error executing prefix command %s", name)
        try:
            await message.reply(PREFIX_COMMAND_ERROR)
        except discord.HTTPException as e:
            log.error("Could not deliver error reply: %s", e)
