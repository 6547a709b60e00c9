"""
Parsing and resolution engine: store, line preprocessing, interpolation, loading.
"""

from envctx.core.environ import apply_to_environ
from envctx.core.loader import MAX_LINE_LENGTH, Fragment, create_store, iter_lines, load, load_line, load_many
from envctx.core.parsing import parse_line, strip_comment, trim
from envctx.core.resolver import MAX_NAME_LENGTH, find_unterminated, placeholders, resolve
from envctx.core.store import ContextStore, Entry

__all__ = [
    "ContextStore",
    "Entry",
    "load",
    "load_many",
    "iter_lines",
    "load_line",
    "Fragment",
    "create_store",
    "resolve",
    "placeholders",
    "find_unterminated",
    "parse_line",
    "strip_comment",
    "trim",
    "apply_to_environ",
    "MAX_LINE_LENGTH",
    "MAX_NAME_LENGTH",
]
