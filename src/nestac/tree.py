"""Child access on tree values: mappings, sequences and scalars."""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Iterator, Tuple

from nestac.errors import IndexOutOfRangeError, ShapeMismatchError
from nestac.tokens import Index, Key, Token

TreeValue = Any

# Strings are sequences to Python but leaves to a document.
_SCALAR_SEQUENCES = (str, bytes, bytearray)


class _Missing:
    """Sentinel for slots that do not exist."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_mapping(node: TreeValue) -> bool:
    return isinstance(node, Mapping)


def is_sequence(node: TreeValue) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, _SCALAR_SEQUENCES)


def is_container(node: TreeValue) -> bool:
    return is_mapping(node) or is_sequence(node)


def get_child(node: TreeValue, token: Token) -> TreeValue:
    """
    Return the child of `node` addressed by `token`, or MISSING.

    A key is only looked up in a mapping and an index only in a sequence;
    any other pairing, and any access on a scalar, has no such child.
    """
    if isinstance(token, Key):
        if is_mapping(node) and token.name in node:
            return node[token.name]
        return MISSING
    if is_sequence(node) and token.position < len(node):
        return node[token.position]
    return MISSING


def replace_child(node: TreeValue, token: Token, value: TreeValue) -> TreeValue:
    """
    Store `value` in the slot of `node` addressed by `token` and return what
    was there before (MISSING when a mapping key is created).

    Raises:
    - ShapeMismatchError when the token kind does not match the container,
      when `node` is a scalar, or when the container is read-only.
    - IndexOutOfRangeError for an index past the end of the sequence.
    """
    if isinstance(token, Key):
        if not is_mapping(node):
            raise ShapeMismatchError(
                f"Expected a mapping for key '{token.name}', found {type(node).__name__}"
            )
        if not isinstance(node, MutableMapping):
            raise ShapeMismatchError(
                f"Cannot set key '{token.name}' on read-only {type(node).__name__}"
            )
        previous = node[token.name] if token.name in node else MISSING
        node[token.name] = value
        return previous

    index = token.position
    if not is_sequence(node):
        raise ShapeMismatchError(
            f"Expected a sequence for index [{index}], found {type(node).__name__}"
        )
    if not isinstance(node, MutableSequence):
        raise ShapeMismatchError(
            f"Cannot set index [{index}] on read-only {type(node).__name__}"
        )
    if index >= len(node):
        raise IndexOutOfRangeError(
            f"Index {index} out of range for sequence of length {len(node)}"
        )
    previous = node[index]
    node[index] = value
    return previous


def iter_children(node: TreeValue, *, sort_keys: bool = False) -> Iterator[Tuple[Token, TreeValue]]:
    """Yield `(token, child)` pairs; scalars have no children."""
    if is_mapping(node):
        keys = list(node.keys())
        if sort_keys:
            keys = sorted(keys, key=str)
        for k in keys:
            yield Key(k if isinstance(k, str) else str(k)), node[k]
    elif is_sequence(node):
        for idx, v in enumerate(node):
            yield Index(idx), v
