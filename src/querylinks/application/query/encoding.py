"""Application query – bracket-style query string encoding.

Wire shape::

    page=2
    order_by[]=name&order_by[]=age
    filters[0][field]=name&filters[0][op]=%3D~&filters[0][value]=Mag

Brackets stay literal; names and values are form-encoded.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping
from urllib.parse import parse_qsl, quote_plus

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def _scalar(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode(value: Any) -> str:
    return quote_plus(_scalar(value), safe="")


def _pairs(name: str, value: Any) -> Iterator[tuple[str, str]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _pairs(f"{name}[{_encode(key)}]", item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (Mapping, list, tuple)):
                yield from _pairs(f"{name}[]", item)
            else:
                yield f"{name}[]", _encode(item)
    else:
        yield name, _encode(value)


def encode_query(params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Encode *params* into a query string, preserving their order.

    >>> encode_query({"order_directions": ["desc", "asc"], "order_by": ["name", "age"]})
    'order_directions[]=desc&order_directions[]=asc&order_by[]=name&order_by[]=age'
    """
    items = params.items() if isinstance(params, Mapping) else params
    return "&".join(
        f"{key}={value}" for name, item in items for key, value in _pairs(_encode(name), item)
    )


def _split_key(key: str) -> list[str]:
    match = _KEY_RE.match(key)
    if match is None:
        return [key]
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def _assign(container: dict[str, Any], parts: list[str], value: str) -> None:
    key, rest = parts[0], parts[1:]
    if not rest:
        container[key] = value
        return

    if rest[0] == "":
        items = container.get(key)
        if not isinstance(items, list):
            items = container[key] = []
        if len(rest) == 1:
            items.append(value)
            return
        sub_parts = rest[1:]
        if items and isinstance(items[-1], dict) and sub_parts[0] not in items[-1]:
            target = items[-1]
        else:
            target = {}
            items.append(target)
        _assign(target, sub_parts, value)
        return

    child = container.get(key)
    if not isinstance(child, dict):
        child = container[key] = {}
    _assign(child, rest, value)


def decode_query(query: str) -> dict[str, Any]:
    """Decode a query string into nested dicts and lists; values stay strings.

    >>> decode_query("filters[0][field]=name&filters[0][value]=Mag&page=2")
    {'filters': {'0': {'field': 'name', 'value': 'Mag'}}, 'page': '2'}
    """
    result: dict[str, Any] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        _assign(result, _split_key(key), value)
    return result


__all__ = ["decode_query", "encode_query"]
