"""
Path access for JSON documents.

A JSON document may be any tree value, including a bare scalar or list at
the top. Paths here are rooted at `$`: `get_paths` emits `$`, `$.foo`,
`$.foo.[0]`..., and `read`/`update` accept those paths as well as the same
paths without the leading `$`.
"""

from typing import Any, List, Optional

from nestac import paths, traverse
from nestac.tokens import DEFAULT_SEPARATOR
from nestac.tree import TreeValue


def read(
    path: str,
    data: TreeValue,
    separator: str = DEFAULT_SEPARATOR,
    *,
    symbol: Optional[str] = paths.ROOT_SYMBOL,
    default: Any = None,
) -> TreeValue:
    return traverse.read(path, data, separator, root_label=symbol, default=default)


def update(
    data: TreeValue,
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    new_value: TreeValue = None,
    *,
    symbol: Optional[str] = paths.ROOT_SYMBOL,
    default: Any = None,
) -> TreeValue:
    return traverse.update(
        data, path, separator, new_value, root_label=symbol, default=default
    )


def get_paths(
    data: TreeValue,
    symbol: Optional[str] = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """
    Return every path in `data`, rooted at `symbol` (`$` when not given).
    """
    return paths.enumerate_paths(
        data, paths.ROOT_SYMBOL if symbol is None else symbol, separator=separator
    )
