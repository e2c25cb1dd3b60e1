import logging
from typing import Any, Iterable, Optional

from nestac.tokens import DEFAULT_SEPARATOR, Token, format_token, parse_path
from nestac.tree import MISSING, TreeValue, get_child, replace_child

logger = logging.getLogger(__name__)


def navigate(root: TreeValue, tokens: Iterable[Token]) -> TreeValue:
    """
    Walk `tokens` from `root` and return the node reached.
    Returns MISSING as soon as a step has no such child.
    """
    current = root
    for tok in tokens:
        if current is MISSING:
            return MISSING
        current = get_child(current, tok)
    return current


def read(
    path: str,
    document: TreeValue,
    separator: str = DEFAULT_SEPARATOR,
    *,
    root_label: Optional[str] = None,
    default: Any = None,
) -> TreeValue:
    """
    Return the node of `document` at `path`, or `default` if the path does
    not resolve. The node is returned as is, not copied.

    Pass `default=MISSING` to tell a stored None apart from an absent slot.
    """
    found = navigate(document, parse_path(path, separator, root_label=root_label))
    if found is MISSING:
        return default
    return found


def update(
    document: TreeValue,
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    new_value: TreeValue = None,
    *,
    root_label: Optional[str] = None,
    default: Any = None,
) -> TreeValue:
    """
    Replace the value at `path` with `new_value` in place and return the
    displaced value.

    Returns `default` without touching `document` when the parent of the
    final token does not exist, and returns `default` after inserting when
    the final token is a new mapping key.

    Raises:
    - ShapeMismatchError when the parent cannot hold the final token
      (index on a mapping, key on a sequence, scalar or read-only parent).
    - IndexOutOfRangeError when the final index is past the end of the
      sequence; sequences are never extended.
    - PathSyntaxError / MalformedIndexTokenError for unusable paths.
    """
    tokens = parse_path(path, separator, root_label=root_label)
    if not tokens:
        return default

    *parent_tokens, last = tokens
    parent = navigate(document, parent_tokens)
    if parent is MISSING:
        logger.debug("Parent of '%s' not found, nothing updated", path)
        return default

    previous = replace_child(parent, last, new_value)
    logger.debug("Replaced %s under '%s'", format_token(last), path)
    if previous is MISSING:
        return default
    return previous
