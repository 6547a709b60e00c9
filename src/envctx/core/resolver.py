"""
${NAME} interpolation against the context store.
"""

from envctx.core.store import ContextStore

OPEN_MARKER = "${"
CLOSE_MARKER = "}"
MAX_NAME_LENGTH = 255


def resolve(value: str, store: ContextStore) -> str:
    """
    Replace ``${NAME}`` placeholders with values already in the store.

    One left-to-right pass, no recursion: a substituted value is copied
    verbatim even if it contains placeholders of its own. Names longer than
    MAX_NAME_LENGTH are truncated before lookup; names the store does not
    know resolve to an empty string. An opening marker without a closing
    brace ends the scan and the rest of the input is dropped.

    Args:
        value: Trimmed value text from the env file
        store: Store to look names up in, as it stands right now

    Returns:
        A new string with every placeholder replaced
    """
    parts: list[str] = []
    pos = 0
    length = len(value)

    while pos < length:
        start = value.find(OPEN_MARKER, pos)
        if start == -1:
            parts.append(value[pos:])
            break

        parts.append(value[pos:start])
        end = value.find(CLOSE_MARKER, start + len(OPEN_MARKER))
        if end == -1:
            break

        name = value[start + len(OPEN_MARKER) : end][:MAX_NAME_LENGTH]
        found = store.get(name)
        if found is not None:
            parts.append(found)
        pos = end + 1

    return "".join(parts)


def placeholders(value: str) -> list[str]:
    """Names referenced by the value, in order, using the same scanning rules as resolve()."""
    names: list[str] = []
    pos = 0
    while True:
        start = value.find(OPEN_MARKER, pos)
        if start == -1:
            return names
        end = value.find(CLOSE_MARKER, start + len(OPEN_MARKER))
        if end == -1:
            return names
        names.append(value[start + len(OPEN_MARKER) : end][:MAX_NAME_LENGTH])
        pos = end + 1


def find_unterminated(value: str) -> int:
    """Position of an opening marker that has no closing brace, or -1."""
    pos = 0
    while True:
        start = value.find(OPEN_MARKER, pos)
        if start == -1:
            return -1
        end = value.find(CLOSE_MARKER, start + len(OPEN_MARKER))
        if end == -1:
            return start
        pos = end + 1
