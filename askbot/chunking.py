from .errors import InvalidArgument


def split_text(text, max_length):
    """
    Split text into chunks no longer than max_length, breaking on newlines.

    Whole lines are packed greedily. A line longer than max_length gets its
    own fixed-width slices, after flushing whatever was being packed.
    Empty text gives no chunks at all.
    """
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
        raise InvalidArgument(f"max_length must be a positive integer, got {max_length!r}")

    chunks = []
    # None means no chunk in progress; "" is a chunk holding one blank line
    current = None

    def flush():
        # Discord rejects a message made only of blank lines
        if current and current.strip("\n"):
            chunks.append(current)

    if not text:
        return chunks

    for line in text.split("\n"):
        if len(line) > max_length:
            flush()
            current = None
            for i in range(0, len(line), max_length):
                chunks.append(line[i:i + max_length])
            continue

        if current is None:
            current = line
        elif len(current) + 1 + len(line) > max_length:
            flush()
            current = line
        else:
            current += "\n" + line

    flush()
    return chunks
