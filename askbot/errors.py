class AskBotError(Exception):
    """Base class for errors the bot turns into user-facing replies."""


class InvalidArgument(AskBotError, ValueError):
    pass


class ConfigError(AskBotError):
    pass


class AIServiceError(AskBotError):
    """The OpenAI call itself failed (transport or error status)."""


class AIResponseError(AskBotError):
    """The OpenAI call succeeded but no usable answer came back."""
