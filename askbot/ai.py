import base64
import logging

import openai
from openai import AsyncOpenAI

from .config import get_settings
from .errors import AIResponseError, AIServiceError, ConfigError, InvalidArgument
from .prompts import API_EMPTY_ANSWER, API_STATUS_ERROR, ASK_USER, PERSONALITY

log = logging.getLogger(__name__)

QUALITIES = ("standard", "hd")
STYLES = ("vivid", "natural")

_client = None


def get_client() -> AsyncOpenAI:
    """Return the shared OpenAI client, creating it on first use."""
    global _client
    if _client is None:
        api_key = get_settings().openai_api_key
        if not api_key:
            raise ConfigError("OPENAI_API_KEY not set.")
        _client = AsyncOpenAI(api_key=api_key)
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.close()
        _client = None


def build_prompt(user_prompt):
    return ASK_USER.format(personality=PERSONALITY, prompt=user_prompt)


def _field(obj, name):
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_answer(response):
    """
    Pull the answer text out of a Responses API payload.

    With web search enabled the output list also carries tool-call items, so
    look for the first "message" item and its first "output_text" part.
    """
    message = next(
        (item for item in _field(response, "output") or [] if _field(item, "type") == "message"),
        None,
    )
    parts = _field(message, "content") or []
    answer = next(
        (_field(part, "text") for part in parts if _field(part, "type") == "output_text"),
        None,
    )
    if not answer:
        log.error("Failed to parse response: %r", response)
        raise AIResponseError(API_EMPTY_ANSWER)
    return answer


async def ask(user_prompt, *, client=None):
    settings = get_settings()
    client = client or get_client()
    try:
        response = await client.responses.create(
            model=settings.chat_model,
            tools=[{"type": "web_search_preview"}],
            tool_choice="auto",
            input=build_prompt(user_prompt),
        )
    except openai.APIStatusError as e:
        log.error("OpenAI API error %s: %s", e.status_code, e.body)
        raise AIServiceError(API_STATUS_ERROR.format(status=e.status_code)) from e
    except openai.OpenAIError as e:
        log.error("OpenAI request failed: %s", e)
        raise AIServiceError(str(e)) from e
    return extract_answer(response)


async def generate_image(prompt, *, quality="standard", style="vivid", client=None):
    """Generate one image and return its PNG bytes."""
    if quality not in QUALITIES:
        raise InvalidArgument(f"quality must be one of {', '.join(QUALITIES)}")
    if style not in STYLES:
        raise InvalidArgument(f"style must be one of {', '.join(STYLES)}")

    settings = get_settings()
    client = client or get_client()
    try:
        response = await client.images.generate(
            model=settings.image_model,
            prompt=prompt,
            n=1,
            quality=quality,
            style=style,
            size=settings.image_size,
            response_format="b64_json",
        )
    except openai.OpenAIError as e:
        log.error("Image generation failed: %s", e)
        raise AIServiceError(str(e)) from e

    data = response.data[0].b64_json if response.data else None
    if not data:
        raise AIResponseError("The image API returned no image data.")
    return base64.b64decode(data)
