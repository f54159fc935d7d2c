"""Streams of shrunk values and helpers to build and combine them."""

from __future__ import annotations

from itertools import chain
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

_EXHAUSTED = object()
_VARARGS_FLAG = 0x04


def _positional_arity(func: Any) -> Optional[Tuple[int, int, Optional[int]]]:
    """Return (declared, minimum, maximum) positional arguments, if knowable."""
    target = func
    offset = 0
    if getattr(func, "__self__", None) is not None and hasattr(func, "__func__"):
        target = func.__func__
        offset = 1
    code = getattr(target, "__code__", None)
    if code is None:
        return None
    declared = max(code.co_argcount - offset, 0)
    defaults = len(getattr(target, "__defaults__", None) or ())
    minimum = max(declared - defaults, 0)
    maximum = None if code.co_flags & _VARARGS_FLAG else declared
    return declared, minimum, maximum


class Shrink:
    """A finite, single-pass stream of shrunk-down values.

    Implementors should keep the stream finite and make sure that changes to
    a yielded value do not affect the state of the stream.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: Iterator[Any] = iter(values)

    def __iter__(self) -> "Shrink":
        return self

    def __next__(self) -> Any:
        return next(self._values)

    def filter(self, condition: Optional[Callable[[Any], bool]]) -> "Shrink":
        """Keep only the values that satisfy ``condition``; ``None`` keeps all."""
        if condition is None:
            return self
        return Shrink(value for value in self if condition(value))

    def map(self, func: Callable[[Any], Any]) -> "Shrink":
        """Apply ``func`` to every value of the stream."""
        if not callable(func):
            raise TypeError(
                f"Param of Map has to be a func, but is {type(func).__name__}"
            )
        arity = _positional_arity(func)
        if arity is not None:
            declared, minimum, maximum = arity
            if minimum > 1 or (maximum is not None and maximum < 1):
                raise TypeError(
                    "Param of Map has to be a func with one param, "
                    f"but is {declared}"
                )
        return Shrink(func(value) for value in self)

    def interleave(self, other: "Shrink") -> "Shrink":
        """Alternate between this stream and ``other`` until both are exhausted."""
        return Shrink(_interleave(self, other))

    def all(self) -> List[Any]:
        """Collect every remaining value into a list."""
        return list(self)


def _interleave(first: Iterator[Any], second: Iterator[Any]) -> Iterator[Any]:
    first_done = False
    second_done = False
    take_first = False
    while not (first_done and second_done):
        take_first = not take_first
        if take_first and not first_done:
            value = next(first, _EXHAUSTED)
            if value is _EXHAUSTED:
                first_done = True
            else:
                yield value
        elif not take_first and not second_done:
            value = next(second, _EXHAUSTED)
            if value is _EXHAUSTED:
                second_done = True
            else:
                yield value


Shrinker = Callable[[Any], Shrink]


def concat_shrinks(*shrinks: Iterable[Any]) -> Shrink:
    """Chain several shrinks into a single one."""
    return Shrink(chain.from_iterable(shrinks))


def _replace_each(original: List[Any], index: int, element_shrink: Shrink) -> Iterator[List[Any]]:
    for element in element_shrink:
        shrunk = list(original)
        shrunk[index] = element
        yield shrunk


def combine_shrinker(*shrinkers: Shrinker) -> Shrinker:
    """Build a shrinker for lists whose items are shrunk by the matching shrinker."""

    def shrinker(values: Any) -> Shrink:
        original = list(values)
        parts = [
            _replace_each(original, index, element_shrinker(value))
            for index, (value, element_shrinker) in enumerate(zip(original, shrinkers))
        ]
        return concat_shrinks(*parts)

    return shrinker


def no_shrink() -> Shrink:
    """An empty shrink."""
    return Shrink()


def no_shrinker(value: Any) -> Shrink:
    """A shrinker that never shrinks anything."""
    return no_shrink()