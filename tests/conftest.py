import pytest

from askbot import ai
from askbot.config import get_settings


@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "discord-test-token")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    for name in (
        "ASKBOT_CHAT_MODEL",
        "ASKBOT_IMAGE_MODEL",
        "ASKBOT_IMAGE_SIZE",
        "ASKBOT_PREFIX",
        "ASKBOT_MESSAGE_LIMIT",
        "ASKBOT_CHUNK_LIMIT",
        "ASKBOT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    ai._client = None
    yield
    get_settings.cache_clear()
    ai._client = None


class FakeInvocation:
    """Records every call made through the invocation interface."""

    def __init__(self):
        self.calls = []

    async def acknowledge(self, notice):
        self.calls.append(("acknowledge", notice))

    async def reply(self, content=None, *, file=None):
        self.calls.append(("reply", content if file is None else file))

    async def follow_up(self, content):
        self.calls.append(("follow_up", content))

    async def reply_error(self, content):
        self.calls.append(("reply_error", content))


@pytest.fixture
def invocation():
    return FakeInvocation()
