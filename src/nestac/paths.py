from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from nestac.errors import PathSyntaxError
from nestac.tokens import DEFAULT_SEPARATOR, join_path
from nestac.tree import TreeValue, is_container, iter_children

ROOT_SYMBOL = "$"


def iter_paths(
    document: TreeValue,
    root_label: Optional[str] = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
    include_values: bool = False,
    sort_keys: bool = False,
    max_depth: Optional[int] = None,
) -> Iterator[Union[str, Tuple[str, Any]]]:
    """
    Depth-first, pre-order traversal yielding the path of every node in
    `document`. Each container yields its own path before its children;
    scalars yield a path and stop.

    Args:
    document: Any tree value; mappings and sequences are traversed, strings
    and other objects are leaves.
    root_label: None for unrooted paths (the root yields nothing and its
    children start the paths: `foo`, `foo.[0]`). A string makes the paths
    rooted: the root yields the label and prefixes every descendant (`$`,
    `$.foo`).
    separator: Joins tokens; use the same one when reading the paths back.
    include_values: If True, yield (path, node) tuples instead of paths.
    sort_keys: If True, visit mapping keys in sorted(str(key)) order instead of
    insertion order.
    max_depth: Optional cap on the depth of yielded nodes (root has depth=0).
    None = unlimited.

    Index children are written as `[n]` so that every yielded path resolves
    through `read` with the same separator and root_label. Keys are written
    verbatim; a key containing the separator, or shaped like `[n]`, yields a
    path that does not read back. Non-string mapping keys are written as
    `str(key)` and do not read back either, since lookups match string keys.
    """
    if not separator:
        raise PathSyntaxError("Separator must be a non-empty string.")

    def yield_item(path: str, value: Any):
        if include_values:
            return (path, value)
        return path

    # explicit stack; children are pushed in reverse to keep pre-order
    stack: List[Tuple[Any, Optional[str], int]] = [(document, root_label, 0)]
    while stack:
        current, path, depth = stack.pop()
        if path is not None:
            yield yield_item(path, current)
        if not is_container(current):
            continue
        if max_depth is not None and depth >= max_depth:
            continue
        children = list(iter_children(current, sort_keys=sort_keys))
        for tok, child in reversed(children):
            stack.append((child, join_path(path, tok, separator), depth + 1))


def enumerate_paths(
    document: TreeValue,
    root_label: Optional[str] = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
    sort_keys: bool = False,
    max_depth: Optional[int] = None,
) -> List[str]:
    """
    Return every path of `document` in depth-first, insertion order.
    See `iter_paths` for the rooted/unrooted policies.
    """
    return list(
        iter_paths(
            document,
            root_label,
            separator=separator,
            include_values=False,
            sort_keys=sort_keys,
            max_depth=max_depth,
        )
    )


def paths_with_values(
    document: TreeValue,
    root_label: Optional[str] = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
    sort_keys: bool = False,
    max_depth: Optional[int] = None,
    leaves_only: bool = False,
) -> List[Tuple[str, Any]]:
    """
    Return (path, node) pairs. Set `leaves_only=True` to drop mappings and
    sequences and keep only scalars.
    """
    pairs = iter_paths(
        document,
        root_label,
        separator=separator,
        include_values=True,
        sort_keys=sort_keys,
        max_depth=max_depth,
    )
    if leaves_only:
        return [(p, v) for p, v in pairs if not is_container(v)]
    return list(pairs)


def path_value_map(
    document: TreeValue,
    root_label: Optional[str] = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
    sort_keys: bool = False,
    max_depth: Optional[int] = None,
    leaves_only: bool = False,
) -> Dict[str, Any]:
    """
    Return a dict mapping path -> node.
    """
    pairs = paths_with_values(
        document,
        root_label,
        separator=separator,
        sort_keys=sort_keys,
        max_depth=max_depth,
        leaves_only=leaves_only,
    )
    return {p: v for p, v in pairs}
