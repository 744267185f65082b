"""
The two ways a command can arrive: a slash-command interaction or a
prefixed text message.

Both expose the same reply surface so command bodies never need to know
which one they were given.
"""
from typing import Optional, Union

import discord


class SlashInvocation:
    def __init__(self, interaction: discord.Interaction):
        self.interaction = interaction

    async def acknowledge(self, notice):
        # Slash commands show Discord's own "thinking..." state instead
        if not self.interaction.response.is_done():
            await self.interaction.response.defer()

    async def reply(self, content=None, *, file: Optional[discord.File] = None):
        if self.interaction.response.is_done():
            kwargs = {"content": content}
            if file is not None:
                kwargs["attachments"] = [file]
            await self.interaction.edit_original_response(**kwargs)
        elif file is not None:
            await self.interaction.response.send_message(content, file=file)
        else:
            await self.interaction.response.send_message(content)

    async def follow_up(self, content):
        await self.interaction.followup.send(content)

    async def reply_error(self, content):
        if self.interaction.response.is_done():
            await self.interaction.followup.send(content, ephemeral=True)
        else:
            await self.interaction.response.send_message(content, ephemeral=True)


class PrefixInvocation:
    def __init__(self, message: discord.Message):
        self.message = message

    async def acknowledge(self, notice):
        await self.message.channel.send(notice)

    async def reply(self, content=None, *, file: Optional[discord.File] = None):
        if file is not None:
            await self.message.reply(content, file=file)
        else:
            await self.message.reply(content)

    async def follow_up(self, content):
        await self.message.channel.send(content)

    async def reply_error(self, content):
        await self.message.reply(content)


Invocation = Union[SlashInvocation, PrefixInvocation]
