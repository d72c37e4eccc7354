"""
Sequence operations.

Every function accepts any traversable: a list-like sequence, a mapping, or a
one-shot iterable. Mappings are iterated by value. Functions that keep keys
return a list when the input is list-classified (see ``is_list``) and a dict
carrying the original keys otherwise.

Several names here shadow builtins (``all``, ``map``, ``sorted``, ...).
"""

from __future__ import annotations

import builtins
import collections
import functools
import itertools
import operator
from collections.abc import Mapping, Sequence, Sized
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from .core import args
from .core.errors import EmptySequenceError, InvalidArgumentError
from .core.traversable import Container, is_list, items_of, materialize, rebuild, values_of
from .core.types import Comparator, KeyFunc, Predicate, Transform, Traversable
from .utils.functional import compare, compose, identity, on_key

_MISSING = object()


# Predicate queries

def all(sequence: Traversable, predicate: Optional[Predicate] = None) -> bool:
    """Returns True if every element satisfies the predicate (or is truthy when
    no predicate is given). An empty sequence gives True.
    """
    args.expects(args.traversable, sequence)
    args.expects_optional(args.callable_, predicate, 2)

    test = identity if predicate is None else predicate
    for value in values_of(sequence):
        if not test(value):
            return False
    return True


def any(sequence: Traversable, predicate: Optional[Predicate] = None) -> bool:
    """Returns True if some element satisfies the predicate (or is truthy when
    no predicate is given). An empty sequence gives False.
    """
    args.expects(args.traversable, sequence)
    args.expects_optional(args.callable_, predicate, 2)

    test = identity if predicate is None else predicate
    for value in values_of(sequence):
        if test(value):
            return True
    return False


# Mapping, folding and filtering

def map(function: Any, sequence: Traversable) -> List[Any]:
    """Applies a function of one argument to each value. Keys are dropped."""
    args.expects(args.callable_, function)
    args.expects(args.traversable, sequence, 2)
    return [function(value) for value in values_of(sequence)]


def reduce(function: Any, sequence: Traversable, initial: Any = 0) -> Any:
    """Folds the values from left to right with ``function(accumulator, value)``."""
    args.expects(args.callable_, function)
    args.expects(args.traversable, sequence, 2)
    return functools.reduce(function, values_of(sequence), initial)


def filter(predicate: Predicate, sequence: Traversable) -> Container:
    """Returns the elements that satisfy the predicate."""
    args.expects(args.callable_, predicate)
    args.expects(args.traversable, sequence, 2)

    container = materialize(sequence)
    kept = [(key, value) for key, value in items_of(container) if predicate(value)]
    return rebuild(kept, is_list(container))


# Splitting

def partition(predicate: Predicate, sequence: Traversable) -> Tuple[Container, Container]:
    """Splits the elements into those that satisfy the predicate and the rest."""
    args.expects(args.callable_, predicate)
    args.expects(args.traversable, sequence, 2)

    container = materialize(sequence)
    matching, rest = [], []
    for item in items_of(container):
        (matching if predicate(item[1]) else rest).append(item)

    as_list = is_list(container)
    return rebuild(matching, as_list), rebuild(rest, as_list)


def span(predicate: Predicate, sequence: Traversable) -> Tuple[Container, Container]:
    """Splits off the longest prefix whose elements satisfy the predicate.

    Once the predicate fails, that element and everything after it go to the
    second result without being tested.
    """
    args.expects(args.callable_, predicate)
    args.expects(args.traversable, sequence, 2)

    container = materialize(sequence)
    matching, rest = [], []
    in_prefix = True
    for item in items_of(container):
        if in_prefix and not predicate(item[1]):
            in_prefix = False
        (matching if in_prefix else rest).append(item)

    as_list = is_list(container)
    return rebuild(matching, as_list), rebuild(rest, as_list)


# Lookup

def _lookup(container: Any, key: Hashable) -> Any:
    if isinstance(container, Mapping):
        return container[key] if key in container else _MISSING
    if isinstance(container, Sequence) and args.is_int(key):
        return container[key] if 0 <= key < len(container) else _MISSING
    return _MISSING


def get_by_key(array: Union[Mapping, Sequence], key: Hashable, default: Any = None) -> Any:
    """Returns the value stored under ``key``, or ``default`` when the key is
    absent. A key explicitly holding None counts as present.
    """
    args.expects(args.array_access, array)
    args.expects(args.array_key, key, 2)

    value = _lookup(array, key)
    return default if value is _MISSING else value


# Combination

def extend(sequence1: Traversable, sequence2: Traversable) -> Container:
    """Returns the elements of ``sequence1`` followed by those of ``sequence2``.

    Two lists are concatenated. If either side is associative the result is a
    key-preserving union in which ``sequence2`` wins on key collisions.
    """
    args.expects(args.traversable, sequence1)
    args.expects(args.traversable, sequence2, 2)

    first_container = materialize(sequence1)
    second_container = materialize(sequence2)
    if is_list(first_container) and is_list(second_container):
        return list(values_of(first_container)) + list(values_of(second_container))

    merged: Dict[Hashable, Any] = dict(items_of(first_container))
    merged.update(items_of(second_container))
    return list(merged.values()) if is_list(merged) else merged


def zip(sequence1: Traversable, sequence2: Traversable, *sequences: Traversable) -> List[Tuple[Any, ...]]:
    """Zips two or more sequences by position, stopping at the shortest one.

    Mapping inputs are re-indexed to their values first.
    """
    inputs = (sequence1, sequence2) + sequences
    for position, sequence in enumerate(inputs, 1):
        args.expects(args.traversable, sequence, position)

    lists = [list(values_of(materialize(sequence))) for sequence in inputs]
    length = min(len(values) for values in lists)
    return [tuple(values[i] for values in lists) for i in range(length)]


# Flattening

def _flatten(values: Any, depth: Optional[int]) -> List[Any]:
    result: List[Any] = []
    for value in values:
        if args.is_traversable(value) and (depth is None or depth > 0):
            result.extend(_flatten(values_of(value), None if depth is None else depth - 1))
        else:
            result.append(value)
    return result


def flatten(sequence: Traversable, depth: Optional[int] = None) -> List[Any]:
    """Flattens nested traversables into one list.

    With ``depth=None`` every level is unwrapped, otherwise at most ``depth``
    levels are. Strings are never unwrapped.
    """
    args.expects(args.traversable, sequence)
    args.expects_optional(args.natural, depth, 2)
    return _flatten(values_of(materialize(sequence)), depth)


def pairs(sequence: Traversable, value_key: bool = False) -> List[Tuple[Any, Any]]:
    """Returns a list of (key, value) pairs, or (value, key) pairs if ``value_key``."""
    args.expects(args.traversable, sequence)
    args.expects(args.bool_, value_key, 2)

    if isinstance(sequence, Sized) and not len(sequence):
        return []

    return [
        (value, key) if value_key else (key, value)
        for key, value in items_of(sequence)
    ]


# Ordering

def sorted(
    array: Traversable,
    reversed: Union[bool, KeyFunc] = False,
    key: Optional[KeyFunc] = None,
    cmp: Optional[Comparator] = None,
) -> Container:
    """Returns the values of ``array`` in sorted order.

    Args:
        array: list or mapping to sort; mapping keys travel with their values
        reversed: True for descending order. A callable passed here is used as
            ``key`` when ``key`` is not given, and the order stays ascending.
        key: function of one argument extracting the comparison key
        cmp: function of two arguments returning a negative number, zero or a
            positive number. Defaults to the natural ordering.

    The sort is stable in both directions.
    """
    args.expects(args.traversable, array)
    args.expects([args.bool_, args.callable_], reversed, 2)
    args.expects_optional(args.callable_, key, 3)
    args.expects_optional(args.callable_, cmp, 4)

    natural_order = cmp is None
    if cmp is None:
        cmp = compare

    if not isinstance(reversed, bool):
        if key is None:
            key = reversed
        reversed = False

    if key is not None:
        natural_order = False
        cmp = on_key(cmp, key)

    if reversed:
        cmp = compose(operator.neg, cmp)

    container = materialize(array)
    by_value = functools.cmp_to_key(lambda a, b: cmp(a[1], b[1]))
    try:
        items = builtins.sorted(items_of(container), key=by_value)
    except TypeError as e:
        if not natural_order:
            raise
        raise InvalidArgumentError(
            f"Values of the given {args.get_type(array)} can not be compared: {e}"
        ) from e
    return rebuild(items, is_list(container))


def key_sorted(array: Traversable, reversed: bool = False) -> Container:
    """Returns the entries of ``array`` ordered by key.

    The result is a list only if it is still list-classified after sorting, so
    a reversed list comes back as a dict keyed ``n-1 .. 0``.
    """
    args.expects(args.traversable, array)
    args.expects(args.bool_, reversed, 2)

    container = materialize(array)
    try:
        items = builtins.sorted(items_of(container), key=operator.itemgetter(0), reverse=reversed)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Keys of the given {args.get_type(array)} can not be compared: {e}"
        ) from e

    result = dict(items)
    return list(result.values()) if is_list(result) else result


# Indexing

def _field(item: Any, by: Hashable) -> Any:
    value = _lookup(item, by)
    if value is not _MISSING or not isinstance(by, str) or isinstance(item, Mapping):
        return value
    if isinstance(item, Sequence):
        # namedtuple rows expose their fields, other sequences have none
        fields = getattr(type(item), "_fields", ())
        return getattr(item, by) if by in fields else _MISSING
    return getattr(item, by, _MISSING)


def indexed(
    sequence: Traversable,
    by: Union[Hashable, KeyFunc],
    keep_last: bool = True,
    transform: Optional[Transform] = None,
) -> Dict[Hashable, Any]:
    """Indexes a sequence of records by a field or a key function.

    Args:
        sequence: mappings, sequences or objects
        by: a field name (mapping key, list position or attribute name) or a
            function computing the index from an item. Items lacking the
            field are skipped.
        keep_last: if True only the last item per index is kept, otherwise
            each index maps to the list of its items in order
        transform: applied to each item before it is stored
    """
    args.expects(args.traversable, sequence)
    args.expects([args.callable_, args.array_key], by, 2)
    args.expects(args.bool_, keep_last, 3)
    args.expects_optional(args.callable_, transform, 4)

    index_is_callable = callable(by)
    result: Dict[Hashable, Any] = {}
    for item in values_of(sequence):
        index = by(item) if index_is_callable else _field(item, by)
        if index is _MISSING:
            continue

        value = item if transform is None else transform(item)
        if keep_last:
            result[index] = value
        else:
            result.setdefault(index, []).append(value)

    return result


# Slicing and access

def take(sequence: Traversable, n: int, step: int = 1) -> List[Any]:
    """Returns up to ``n`` values, taking every ``step``-th one."""
    args.expects(args.traversable, sequence)
    args.expects(args.natural, n, 2)
    args.expects(args.positive, step, 3)
    return list(itertools.islice(values_of(sequence), 0, n * step, step))


def drop(sequence: Traversable, n: int) -> Container:
    """Drops the first ``n`` elements."""
    args.expects(args.traversable, sequence)
    args.expects(args.natural, n, 2)

    container = materialize(sequence)
    survivors = list(itertools.islice(items_of(container), n, None))
    return rebuild(survivors, is_list(container))


def first(sequence: Traversable) -> Any:
    """Returns the first value. Raises EmptySequenceError if there is none."""
    args.expects(args.traversable, sequence)

    for value in values_of(sequence):
        return value
    raise EmptySequenceError("Can not return the first item of an empty sequence")


def last(sequence: Traversable) -> Any:
    """Returns the last value. Raises EmptySequenceError if there is none."""
    args.expects(args.traversable, sequence)

    if isinstance(sequence, Sequence):
        if not sequence:
            raise EmptySequenceError("Can not return the last item of an empty sequence")
        return sequence[-1]

    tail = collections.deque(values_of(sequence), maxlen=1)
    if not tail:
        raise EmptySequenceError("Can not return the last item of an empty sequence")
    return tail[0]


def reorder(sequence: Union[List[Any], Mapping], from_index: int, to_index: int) -> List[Any]:
    """Moves the element at ``from_index`` to ``to_index``.

    Returns a new list; the input is left untouched.

    Raises:
        InvalidArgumentError: if the input is not a list or an index is out of range
    """
    args.expects(args.int_, from_index, 2)
    args.expects(args.int_, to_index, 3)

    if not is_list(sequence):
        raise InvalidArgumentError("First argument should be a list")

    result = list(values_of(sequence))
    size = len(result)
    if not (0 <= from_index < size and 0 <= to_index < size):
        raise InvalidArgumentError("From and to should be valid list keys")

    if from_index == to_index:
        return result

    result.insert(to_index, result.pop(from_index))
    return result


__all__ = [
    'all', 'any', 'map', 'reduce', 'filter', 'partition', 'span',
    'get_by_key', 'extend', 'zip', 'flatten', 'pairs', 'sorted', 'key_sorted',
    'indexed', 'take', 'drop', 'first', 'last', 'reorder',
    'is_list', 'materialize',
]
