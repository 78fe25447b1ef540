"""Checkpoint context key formatting.

Several streams can share one checkpoint context, so every key a reader
writes is prefixed with its stream name: ``"<stream_name>.<suffix>"``.
"""

READ_COUNT = "read.count"


def context_key(stream_name: str | None, suffix: str) -> str:
    """Build a namespaced context key.

    Args:
        stream_name: Name of the stream owning the key.
        suffix: Key within the stream's namespace, e.g. "read.count".

    Returns:
        "<stream_name>.<suffix>"

    Raises:
        ValueError: If stream_name is None, empty or whitespace-only.
    """
    if stream_name is None or not stream_name.strip():
        raise ValueError("stream_name must be set to build a context key")
    return f"{stream_name}.{suffix}"


def read_count_key(stream_name: str | None) -> str:
    """Key under which a stream's item count is stored."""
    return context_key(stream_name, READ_COUNT)
