import itertools
from typing import Callable, Iterable, TypeVar

T = TypeVar('T')

_missing = object()

def iter_equal(xs: Iterable[T], ys: Iterable[T]) -> bool:
    """
    Test whether two iterables yield the same elements, walking both in lock-step.
    Stops at the first difference, so neither iterable needs to be exhausted.
    """
    return all(x == y for (x, y) in itertools.zip_longest(xs, ys, fillvalue = _missing))

def iter_map_if(condition: bool, f: Callable[[T], T], it: Iterable[T]) -> Iterable[T]:
    """Apply f to each element, but only if the condition holds."""
    return map(f, it) if condition else it
