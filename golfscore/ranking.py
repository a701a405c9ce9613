"""Positional ranking with tie handling.

Tied items share a position and the next distinct item takes its own
1-based index, so [100, 100, 80] ranks as 1, 1, 3.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Hashable, TypeVar

T = TypeVar('T')


def assign_positions_with_ties(
    items: list[T],
    key: Callable[[T], Hashable],
    set_position: Callable[[T, int], None],
) -> list[T]:
    """
    Assign positions to a pre-sorted list.

    Args:
        items: List already sorted by the ranking criteria
        key: Comparison value for tie detection (use a tuple for several criteria)
        set_position: Callback storing the position on an item

    Returns:
        The same list, with positions set

    Example:
        assign_positions_with_ties(
            standings,
            lambda s: (s['points'], s['played']),
            lambda s, pos: s.update(position=pos),
        )
    """
    if not items:
        return items

    current_position = 1
    previous_value = key(items[0])
    set_position(items[0], current_position)

    for index in range(1, len(items)):
        current_value = key(items[index])
        if current_value != previous_value:
            current_position = index + 1
        set_position(items[index], current_position)
        previous_value = current_value

    return items


def sort_and_rank(
    items: list[T],
    sort_key: Callable[[T], Any],
    key: Callable[[T], Hashable],
    set_position: Callable[[T, int], None],
    reverse: bool = False,
) -> list[T]:
    """Sort a copy of items and assign positions; the input order is left alone."""
    ranked = sorted(items, key=sort_key, reverse=reverse)
    return assign_positions_with_ties(ranked, key, set_position)


def _with_position(item: Any, position: int) -> Any:
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.replace(item, position=position)
    if isinstance(item, Mapping):
        return {**item, 'position': position}
    raise TypeError(f'Cannot attach a position to {type(item).__name__}')


def assign_positions_map(items: list[T], key: Callable[[T], Hashable]) -> list[T]:
    """
    Return new items with positions attached, leaving the inputs untouched.

    Mappings get a 'position' key; dataclasses must declare a 'position' field.
    """
    if not items:
        return []

    ranked = []
    current_position = 1
    previous_value = key(items[0])

    for index, item in enumerate(items):
        current_value = key(item)
        if index > 0 and current_value != previous_value:
            current_position = index + 1
        previous_value = current_value
        ranked.append(_with_position(item, current_position))

    return ranked
