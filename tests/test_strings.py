import unicodedata

from proptest.gen.strings import (
    alpha_char,
    alpha_lower_char,
    alpha_num_char,
    alpha_string,
    alpha_upper_char,
    any_string,
    identifier,
    num_char,
    num_string,
    rune,
    rune_no_control,
    rune_range,
    unicode_char,
    unicode_string,
)
from proptest.gen_parameters import default_gen_parameters


def _valid(ch):
    cp = ord(ch)
    return 0 <= cp <= 0x10FFFF and not 0xD800 <= cp <= 0xDFFF


def _is_letter(ch):
    return unicodedata.category(ch).startswith("L")


def _check_gen(gen, check, count=100):
    params = default_gen_parameters().clone_with_seed(4321)
    produced = 0
    for _ in range(count):
        result = gen(params)
        value, ok = result.retrieve()
        if not ok:
            continue
        produced += 1
        assert check(value), value
        shrunk = next(result.shrinker(value).filter(result.sieve), None)
        if shrunk is not None:
            assert check(shrunk), shrunk
    assert produced >= count * 9 // 10


def test_rune():
    _check_gen(rune(), lambda v: isinstance(v, str) and len(v) == 1 and _valid(v))


def test_rune_no_control():
    _check_gen(rune_no_control(), lambda v: _valid(v) and ord(v) >= 32)


def test_rune_range():
    _check_gen(rune_range("a", "c"), lambda v: v in {"a", "b", "c"})


def test_num_char():
    _check_gen(num_char(), lambda v: v.isdigit())


def test_alpha_upper():
    _check_gen(alpha_upper_char(), lambda v: v.isupper() and v.isalpha())


def test_alpha_lower():
    _check_gen(alpha_lower_char(), lambda v: v.islower() and v.isalpha())


def test_alpha_char():
    _check_gen(alpha_char(), lambda v: v.isalpha())


def test_alpha_num_char():
    _check_gen(alpha_num_char(), lambda v: v.isalnum())


def test_any_string():
    _check_gen(any_string(), lambda v: isinstance(v, str) and all(_valid(ch) for ch in v))


def test_alpha_string():
    gen = alpha_string()
    _check_gen(gen, lambda v: all(_valid(ch) and _is_letter(ch) for ch in v))
    sieve = gen(default_gen_parameters()).sieve
    assert sieve("abcdABCD")
    assert not sieve("abc12")


def test_num_string():
    gen = num_string()
    _check_gen(gen, lambda v: all(ch.isdigit() for ch in v))
    sieve = gen(default_gen_parameters()).sieve
    assert sieve("123456789")
    assert not sieve("123abcd")


def test_identifier():
    gen = identifier()
    _check_gen(
        gen,
        lambda v: len(v) > 0 and _is_letter(v[0]) and all(_is_letter(ch) or ch.isdigit() for ch in v),
    )
    sieve = gen(default_gen_parameters()).sieve
    assert sieve("abc123")
    assert not sieve("123abc")
    assert not sieve("abcd123-")


def test_string_shrinker_attached():
    result = any_string()(default_gen_parameters())
    assert result.shrinker("abcd").all()[0] == "cd"


def test_unicode_char_without_table_fails():
    assert unicode_char(None)(default_gen_parameters()).retrieve() == (None, False)
    assert unicode_char([])(default_gen_parameters()).retrieve() == (None, False)


def test_unicode_string_greek():
    _check_gen(unicode_string([(0x0391, 0x03A9, 1)]), lambda v: all(0x0391 <= ord(ch) <= 0x03A9 for ch in v))


def test_unicode_char_with_stride():
    _check_gen(unicode_char([("A", "Z", 2)]), lambda v: (ord(v) - ord("A")) % 2 == 0 and "A" <= v <= "Z")


def test_unicode_char_sieve():
    result = unicode_char([(0x41, 0x5A, 2)])(default_gen_parameters())
    assert result.sieve("C")
    assert not result.sieve("B")
    assert not result.sieve("a")