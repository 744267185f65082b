import asyncio
import io
from types import SimpleNamespace

import discord

from askbot.invocation import PrefixInvocation, SlashInvocation


class FakeResponse:
    def __init__(self, done=False):
        self.done = done
        self.calls = []

    def is_done(self):
        return self.done

    async def defer(self):
        self.calls.append(("defer",))
        self.done = True

    async def send_message(self, content=None, **kwargs):
        self.calls.append(("send_message", content, kwargs))
        self.done = True


class FakeFollowup:
    def __init__(self):
        self.calls = []

    async def send(self, content=None, **kwargs):
        self.calls.append((content, kwargs))


class FakeInteraction:
    def __init__(self, done=False):
        self.response = FakeResponse(done)
        self.followup = FakeFollowup()
        self.edits = []

    async def edit_original_response(self, **kwargs):
        self.edits.append(kwargs)


def test_slash_defers_then_edits_then_follows_up():
    interaction = FakeInteraction()
    inv = SlashInvocation(interaction)

    async def flow():
        await inv.acknowledge("ignored notice")
        await inv.reply("part one")
        await inv.follow_up("part two")

    asyncio.run(flow())
    assert interaction.response.calls == [("defer",)]
    assert interaction.edits == [{"content": "part one"}]
    assert interaction.followup.calls == [("part two", {})]


def test_slash_reply_with_file_uses_attachments():
    interaction = FakeInteraction(done=True)
    file = discord.File(io.BytesIO(b"png"), filename="dalle-image.png")
    asyncio.run(SlashInvocation(interaction).reply(file=file))
    assert interaction.edits == [{"content": None, "attachments": [file]}]


def test_slash_reply_without_defer_sends_initial_response():
    interaction = FakeInteraction()
    asyncio.run(SlashInvocation(interaction).reply("hi"))
    assert interaction.response.calls == [("send_message", "hi", {})]
    assert interaction.edits == []


def test_slash_error_is_ephemeral():
    fresh = FakeInteraction()
    asyncio.run(SlashInvocation(fresh).reply_error("oops"))
    assert fresh.response.calls == [("send_message", "oops", {"ephemeral": True})]

    deferred = FakeInteraction(done=True)
    asyncio.run(SlashInvocation(deferred).reply_error("oops"))
    assert deferred.followup.calls == [("oops", {"ephemeral": True})]


def test_prefix_invocation_routes_to_message_and_channel():
    sent, replies = [], []

    async def send(content=None, **kwargs):
        sent.append(content)

    async def reply(content=None, **kwargs):
        replies.append((content, kwargs))

    message = SimpleNamespace(channel=SimpleNamespace(send=send), reply=reply)
    inv = PrefixInvocation(message)

    async def flow():
        await inv.acknowledge("working on it")
        await inv.reply("first")
        await inv.follow_up("second")
        await inv.reply_error("bad")

    asyncio.run(flow())
    assert sent == ["working on it", "second"]
    assert replies == [("first", {}), ("bad", {})]
