"""
Path access for TOML documents.

A TOML document is always a table, so the root has no path of its own:
every path starts with a top-level key (`foo`, `foo.bar`, `foo.bar.[0]`).
Tables from `tomllib`, `tomlkit` or plain dicts are all accepted.
"""

from collections.abc import Mapping
from typing import Any, List

from nestac import paths, traverse
from nestac.errors import ShapeMismatchError
from nestac.tokens import DEFAULT_SEPARATOR
from nestac.tree import TreeValue


def _check_table(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise ShapeMismatchError(
            f"Expected a TOML table at the document root, found {type(data).__name__}"
        )


def read(
    path: str,
    data: Mapping,
    separator: str = DEFAULT_SEPARATOR,
    *,
    default: Any = None,
) -> TreeValue:
    _check_table(data)
    return traverse.read(path, data, separator, default=default)


def update(
    data: Mapping,
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    new_value: TreeValue = None,
    *,
    default: Any = None,
) -> TreeValue:
    """
    Replace the value at `path` and return the displaced one.
    A single-token path sets a top-level key of the document.
    """
    _check_table(data)
    return traverse.update(data, path, separator, new_value, default=default)


def get_paths(data: Mapping, *, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    _check_table(data)
    return paths.enumerate_paths(data, separator=separator)
