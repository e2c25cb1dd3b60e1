import dataclasses
import re
import sys
from typing import List, Optional, Union

from nestac.errors import MalformedIndexTokenError, PathSyntaxError

DEFAULT_SEPARATOR = "."

# \d would also accept non-ASCII digits
_INDEX_TOKEN = re.compile(r"\[([0-9]+)\]")


@dataclasses.dataclass(frozen=True)
class Key:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Index:
    position: int

    def __str__(self) -> str:
        return f"[{self.position}]"


Token = Union[Key, Index]


def tokenize(path: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """
    Split `path` on every occurrence of `separator`.

    There is no escaping: a key can never contain the separator. Consecutive
    separators produce empty-string tokens, which are ordinary keys.
    """
    if not separator:
        raise PathSyntaxError("Separator must be a non-empty string.")
    return path.split(separator)


def classify(token: str) -> Token:
    """
    Classify a raw token as an Index (exactly `[<digits>]`) or a Key.
    Anything that is not an exact index token is kept verbatim as a key,
    brackets included.
    """
    match = _INDEX_TOKEN.fullmatch(token)
    if match is None:
        return Key(token)

    digits = match.group(1)
    try:
        position = int(digits)
    except ValueError as exc:
        # Only reachable past the interpreter's int string length limit
        raise MalformedIndexTokenError(
            f"Index token '{token[:32]}...' has too many digits"
        ) from exc
    if position > sys.maxsize:
        raise MalformedIndexTokenError(
            f"Index {position} in token '{token}' exceeds the maximum index {sys.maxsize}"
        )
    return Index(position)


def parse_path(
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    *,
    root_label: Optional[str] = None,
) -> List[Token]:
    """
    Tokenize and classify `path`.

    If `path` is `root_label` itself, or starts with `root_label` followed by
    the separator, that prefix names the document and is dropped, so paths
    produced by a rooted enumeration resolve the same way as unrooted ones.
    The label may itself contain the separator.
    """
    raw = tokenize(path, separator)
    if root_label is not None:
        if path == root_label:
            return []
        prefix = root_label + separator
        if path.startswith(prefix):
            raw = tokenize(path[len(prefix):], separator)
    return [classify(t) for t in raw]


def format_token(token: Union[Token, str, int]) -> str:
    """Render a token (or a bare key/position) the way `classify` reads it back."""
    if isinstance(token, (Key, Index)):
        return str(token)
    if isinstance(token, int) and not isinstance(token, bool):
        return str(Index(token))
    return str(token)


def join_path(
    base: Optional[str],
    token: Union[Token, str, int],
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Append `token` to `base` using `separator`.
    `base=None` means there is no prefix yet (an unrooted top-level child).
    """
    if base is None:
        return format_token(token)
    return base + separator + format_token(token)
