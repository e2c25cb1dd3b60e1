"""Read, update and list values in nested documents with path strings."""

from nestac.errors import (
    IndexOutOfRangeError,
    MalformedIndexTokenError,
    NestacError,
    PathSyntaxError,
    ShapeMismatchError,
)
from nestac.traverse import navigate, read, update
from nestac.paths import (
    ROOT_SYMBOL,
    enumerate_paths,
    iter_paths,
    path_value_map,
    paths_with_values,
)
from nestac.tokens import (
    DEFAULT_SEPARATOR,
    Index,
    Key,
    classify,
    join_path,
    parse_path,
    tokenize,
)
from nestac.tree import MISSING

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_SEPARATOR",
    "MISSING",
    "ROOT_SYMBOL",
    "Index",
    "IndexOutOfRangeError",
    "Key",
    "MalformedIndexTokenError",
    "NestacError",
    "PathSyntaxError",
    "ShapeMismatchError",
    "classify",
    "enumerate_paths",
    "iter_paths",
    "join_path",
    "navigate",
    "parse_path",
    "path_value_map",
    "paths_with_values",
    "read",
    "tokenize",
    "update",
]
