"""Shrinkers for lists, dictionaries, optional values and strings."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from proptest.shrink import Shrink, Shrinker, concat_shrinks, no_shrink, no_shrinker

_EXHAUSTED = object()


def _as_list(value: Any) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{value!r} is not a slice")
    return list(value)


def _as_dict(value: Any) -> Dict[Any, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{value!r} is not a map")
    return value


def _replace_at(original: List[Any], index: int, element_shrink: Shrink) -> Iterator[List[Any]]:
    for element in element_shrink:
        shrunk = list(original)
        shrunk[index] = element
        yield shrunk


def _element_shrinks(original: List[Any], element_shrinker: Shrinker) -> List[Iterator[List[Any]]]:
    return [
        _replace_at(original, index, element_shrinker(item))
        for index, item in enumerate(original)
    ]


def _chunk_removals(original: List[Any]) -> Iterator[List[Any]]:
    """Remove ever smaller chunks: halves first, then quarters and so on."""
    length = len(original)
    chunk = length >> 1
    offset = 0
    while chunk:
        value = original[:offset]
        offset += chunk
        if offset < length:
            value = value + original[offset:]
        else:
            offset = 0
            chunk >>= 1
        yield value


def slice_shrinker_one(element_shrinker: Shrinker) -> Shrinker:
    """Shrink each element of a list in turn, keeping its length."""

    def shrinker(value: Any) -> Shrink:
        original = _as_list(value)
        return concat_shrinks(*_element_shrinks(original, element_shrinker))

    return shrinker


def slice_shrinker(element_shrinker: Shrinker) -> Shrinker:
    """Shrink a list by dropping chunks, then by shrinking each element."""

    def shrinker(value: Any) -> Shrink:
        original = _as_list(value)
        return concat_shrinks(
            _chunk_removals(original), *_element_shrinks(original, element_shrinker)
        )

    return shrinker


def _map_shrink_one(
    original: Dict[Any, Any], key: Any, key_shrink: Shrink, element_shrink: Shrink
) -> Iterator[Dict[Any, Any]]:
    last_key = key
    last_element = original[key]
    take_key = False
    while True:
        take_key = not take_key
        source = key_shrink if take_key else element_shrink
        value = next(source, _EXHAUSTED)
        if value is _EXHAUSTED:
            return
        if take_key:
            last_key = value
        else:
            last_element = value
        result = {k: v for k, v in original.items() if k != key}
        result[last_key] = last_element
        yield result


def _entry_shrinks(
    original: Dict[Any, Any], key_shrinker: Shrinker, element_shrinker: Shrinker
) -> List[Iterator[Dict[Any, Any]]]:
    return [
        _map_shrink_one(original, key, key_shrinker(key), element_shrinker(element))
        for key, element in original.items()
    ]


def _key_chunk_removals(original: Dict[Any, Any]) -> Iterator[Dict[Any, Any]]:
    for keys in _chunk_removals(list(original)):
        yield {key: original[key] for key in keys}


def map_shrinker_one(key_shrinker: Shrinker, element_shrinker: Shrinker) -> Shrinker:
    """Shrink each key/value pair of a dictionary in turn, keeping its size."""

    def shrinker(value: Any) -> Shrink:
        original = _as_dict(value)
        return concat_shrinks(*_entry_shrinks(original, key_shrinker, element_shrinker))

    return shrinker


def map_shrinker(key_shrinker: Shrinker, element_shrinker: Shrinker) -> Shrinker:
    """Shrink a dictionary by dropping entries, then by shrinking each pair."""

    def shrinker(value: Any) -> Shrink:
        original = _as_dict(value)
        return concat_shrinks(
            _key_chunk_removals(original),
            *_entry_shrinks(original, key_shrinker, element_shrinker),
        )

    return shrinker


def ptr_shrinker(element_shrinker: Shrinker) -> Shrinker:
    """Shrink an optional value: first to ``None``, then the value itself."""

    def shrinker(value: Any) -> Shrink:
        if value is None:
            return no_shrink()
        return concat_shrinks([None], element_shrinker(value))

    return shrinker


_char_list_shrinker = slice_shrinker(no_shrinker)


def string_shrinker(value: Any) -> Shrink:
    """Shrink a string by dropping characters; characters are not shrunk."""
    if not isinstance(value, str):
        raise TypeError(f"{value!r} is not a string")
    return _char_list_shrinker(list(value)).map(lambda chars: "".join(chars))