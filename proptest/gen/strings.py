"""Generators for characters and strings.

Characters are represented as one-character strings.
"""

from __future__ import annotations

import unicodedata
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from proptest.gen.basic import (
    Gen,
    combine_gens,
    fail,
    frequency,
    map_gen,
    such_that,
    with_shrinker,
)
from proptest.gen.collection_shrink import string_shrinker
from proptest.gen.collections import slice_of
from proptest.gen.numbers import int64_range
from proptest.gen_parameters import GenParameters
from proptest.gen_result import GenResult, new_gen_result
from proptest.shrink import no_shrinker

MAX_RUNE = 0x10FFFF

CodePoint = Union[int, str]
Range = Tuple[int, int, int]


def _code(value: CodePoint) -> int:
    return ord(value) if isinstance(value, str) else int(value)


def _valid_rune(ch: Any) -> bool:
    if not isinstance(ch, str) or len(ch) != 1:
        return False
    cp = ord(ch)
    return 0 <= cp <= MAX_RUNE and not 0xD800 <= cp <= 0xDFFF


def _to_char(value: int) -> Optional[str]:
    if 0 <= value <= MAX_RUNE:
        return chr(value)
    return None


def _gen_rune(int_gen: Gen) -> Gen:
    return such_that(map_gen(int_gen, _to_char), _valid_rune)


def rune_range(min_value: CodePoint, max_value: CodePoint) -> Gen:
    """Generate characters whose code points lie in ``[min_value, max_value]``."""
    return _gen_rune(int64_range(_code(min_value), _code(max_value)))


def rune() -> Gen:
    """Generate an arbitrary valid character."""
    return _gen_rune(
        frequency(
            {
                0xD800: int64_range(0, 0xD800),
                MAX_RUNE - 0xDFFF: int64_range(0xDFFF, MAX_RUNE),
            }
        )
    )


def rune_no_control() -> Gen:
    """Generate an arbitrary valid character that is not an ASCII control character."""
    return _gen_rune(
        frequency(
            {
                0xD800: int64_range(32, 0xD800),
                MAX_RUNE - 0xDFFF: int64_range(0xDFFF, MAX_RUNE),
            }
        )
    )


def num_char() -> Gen:
    """Generate a decimal digit character."""
    return rune_range("0", "9")


def alpha_upper_char() -> Gen:
    """Generate an ASCII uppercase letter."""
    return rune_range("A", "Z")


def alpha_lower_char() -> Gen:
    """Generate an ASCII lowercase letter."""
    return rune_range("a", "z")


def alpha_char() -> Gen:
    """Generate an ASCII letter, mostly lowercase."""
    return frequency({0: alpha_upper_char(), 9: alpha_lower_char()})


def alpha_num_char() -> Gen:
    """Generate an ASCII letter or digit, mostly letters."""
    return frequency({0: num_char(), 9: alpha_char()})


def _normalize_table(table: Optional[Iterable[Tuple[Any, ...]]]) -> Tuple[Range, ...]:
    if table is None:
        return ()
    ranges = []
    for entry in table:
        if len(entry) == 2:
            lo, hi = entry
            stride = 1
        else:
            lo, hi, stride = entry
        ranges.append((_code(lo), _code(hi), int(stride)))
    return tuple(ranges)


def _in_table(ranges: Tuple[Range, ...]) -> Callable[[Any], bool]:
    def contains(ch: Any) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        cp = ord(ch)
        return any(lo <= cp <= hi and (cp - lo) % stride == 0 for lo, hi, stride in ranges)

    return contains


def unicode_char(table: Optional[Iterable[Tuple[Any, ...]]]) -> Gen:
    """Generate characters from a table of ``(lo, hi[, stride])`` code point ranges."""
    ranges = _normalize_table(table)
    if not ranges:
        return fail(str)
    contains = _in_table(ranges)

    def generate(params: GenParameters) -> GenResult:
        lo, hi, stride = ranges[params.rng.randrange(len(ranges))]
        offset = params.rng.randrange((hi - lo + 1) // stride) * stride
        result = new_gen_result(chr(lo + offset), no_shrinker)
        result.sieve = contains
        return result

    return generate


def _gen_string(char_gen: Gen, char_sieve: Callable[[str], bool]) -> Gen:
    return with_shrinker(
        such_that(
            map_gen(slice_of(char_gen), "".join),
            lambda text: all(char_sieve(ch) for ch in text),
        ),
        string_shrinker,
    )


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _is_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def any_string() -> Gen:
    """Generate an arbitrary string of valid characters."""
    return _gen_string(rune(), _valid_rune)


def alpha_string() -> Gen:
    """Generate a string of letters."""
    return _gen_string(alpha_char(), _is_letter)


def num_string() -> Gen:
    """Generate a string of digits."""
    return _gen_string(num_char(), _is_digit)


def _join_identifier(values: list) -> str:
    first, tail = values
    return "".join([first, *tail])


def _is_identifier(text: str) -> bool:
    if len(text) < 1 or unicodedata.category(text[0]) != "Ll":
        return False
    return all(_is_letter(ch) or _is_digit(ch) for ch in text)


def identifier() -> Gen:
    """Generate an identifier: a lowercase letter followed by letters and digits."""
    return with_shrinker(
        such_that(
            map_gen(combine_gens(alpha_lower_char(), slice_of(alpha_num_char())), _join_identifier),
            _is_identifier,
        ),
        string_shrinker,
    )


def unicode_string(table: Optional[Iterable[Tuple[Any, ...]]]) -> Gen:
    """Generate a string of characters from a table of code point ranges."""
    ranges = _normalize_table(table)
    return _gen_string(unicode_char(ranges), _in_table(ranges))