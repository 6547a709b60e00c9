"""
Env file loading.

Reads an env file line by line, preprocesses each line, resolves
placeholders against what has been loaded so far and appends the result
to a context store.
"""

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any, NamedTuple

from envctx.core.parsing import parse_line
from envctx.core.resolver import resolve
from envctx.core.store import ContextStore, Entry
from envctx.exceptions import AllocationError, FileOpenError, MalformedLineError
from envctx.utils.logging import get_logger

logger = get_logger("envctx.loader")

# Longest line, terminator included, that is read as a single unit.
MAX_LINE_LENGTH = 1024


class Fragment(NamedTuple):
    """One read from an env file."""

    line_number: int
    text: str
    # cut by the read size, more of the same physical line follows
    continued: bool


def create_store(settings: Any | None = None) -> ContextStore:
    """Build an empty store sized from settings (defaults when None)."""
    if settings is None:
        return ContextStore()
    return ContextStore(initial_capacity=settings.initial_capacity, max_capacity=settings.max_capacity)


def iter_lines(path: str | Path, max_line_length: int = MAX_LINE_LENGTH) -> Iterator[Fragment]:
    """
    Yield a Fragment for every read from the file.

    Each read returns at most ``max_line_length - 1`` characters, so a line
    longer than that comes back as several fragments sharing one line number;
    all but the last of them have ``continued`` set. Terminators are
    returned untranslated.

    Raises:
        FileOpenError: The file cannot be opened for reading
    """
    if max_line_length < 2:
        raise ValueError(f"max_line_length must be at least 2, got {max_line_length}")

    path = Path(path)
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        logger.error(f"Failed to open env file {path}: {e}")
        raise FileOpenError(
            str(path),
            f"Cannot open env file: {path}\n"
            f"  Error: {e.strerror or e}\n"
            f"  Suggestion: Check that the file exists and is readable",
            cause=e,
        ) from e

    line_number = 1
    with handle:
        current = handle.readline(max_line_length - 1)
        while current:
            following = handle.readline(max_line_length - 1)
            ends_line = current.endswith("\n")
            # a following read holding only the terminator does not split the line
            continued = not ends_line and following.rstrip("\r\n") != ""
            yield Fragment(line_number, current, continued)
            if ends_line:
                line_number += 1
            current = following


def load_line(
    fragment: str,
    store: ContextStore,
    before_append: Callable[[str, str], None] | None = None,
) -> Entry | None:
    """
    Parse, resolve and append one fragment.

    Args:
        fragment: Text of one read, terminator included
        store: Store to resolve against and append to
        before_append: Called with the key and the unresolved value before
            resolution, while the store does not yet hold this entry

    Returns:
        The appended Entry, or None for blank and comment lines

    Raises:
        MalformedLineError: The line is neither blank nor a valid assignment
        AllocationError: The store could not grow or memory ran out
    """
    try:
        parsed = parse_line(fragment)
        if parsed is None:
            return None
        key, value = parsed
        if before_append is not None:
            before_append(key, value)
        resolved = resolve(value, store)
        store.append(key, resolved)
    except MemoryError as e:
        raise AllocationError("Out of memory while processing a line", capacity=store.capacity) from e
    return Entry(key, resolved)


def load(path: str | Path, store: ContextStore, settings: Any | None = None) -> int:
    """
    Load an env file into the store.

    Entries are appended after whatever the store already holds; since
    lookups are first-wins, keys loaded earlier keep their values. Call
    ``store.clear()`` first to let a reload override them.

    Args:
        path: Env file to read
        store: Store to append to; initialized here if needed
        settings: Optional Settings providing max_line_length

    Returns:
        Number of entries appended by this call

    Raises:
        FileOpenError: The file cannot be opened; the store is unchanged
        AllocationError: The store could not grow, or memory ran out while
            processing a line; entries appended before the failure remain
    """
    max_line_length = settings.max_line_length if settings is not None else MAX_LINE_LENGTH

    store.init()

    appended = 0
    skipped = 0
    for line_number, fragment, _ in iter_lines(path, max_line_length):
        try:
            entry = load_line(fragment, store)
        except MalformedLineError as e:
            skipped += 1
            logger.debug(f"{path}:{line_number}: skipping line ({e.reason})")
            continue
        except AllocationError:
            logger.error(f"{path}:{line_number}: cannot store entry after {appended} entries, load aborted")
            raise
        if entry is not None:
            appended += 1

    logger.info(f"Loaded {appended} entries from {path}")
    if skipped:
        logger.debug(f"Skipped {skipped} malformed lines in {path}")
    return appended


def load_many(paths: Iterable[str | Path], store: ContextStore, settings: Any | None = None) -> int:
    """Load several files in order; earlier files win on duplicate keys."""
    total = 0
    for path in paths:
        total += load(path, store, settings)
    return total
