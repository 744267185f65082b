import logging

from ..chunking import split_text
from ..config import get_settings
from ..invocation import Invocation

log = logging.getLogger(__name__)


async def send_long(invocation: Invocation, text: str, *, limit=None, chunk_limit=None):
    """
    Send text through an invocation without tripping Discord's message limit.

    Short text goes out as a single reply. Longer text is split and the
    chunks are sent one after another: the first as the reply, the rest as
    follow-ups. Each send finishes before the next starts so the answer
    reads in order.
    """
    if not text:
        return
    settings = get_settings()
    if limit is None:
        limit = settings.message_limit
    if chunk_limit is None:
        chunk_limit = settings.chunk_limit

    if len(text) <= limit:
        await invocation.reply(text)
        return

    chunks = split_text(text, chunk_limit)
    if not chunks:
        return
    log.debug("Sending %d-char answer as %d chunks", len(text), len(chunks))
    first, rest = chunks[0], chunks[1:]
    await invocation.reply(first)
    for chunk in rest:
        await invocation.follow_up(chunk)
