"""
Request decoding for the torneio routes.

Bodies are read leniently: field names match case-insensitively, missing or
null fields fall back to zero values ("" and 0), unknown fields are ignored.
A field of the wrong JSON type, a non-object body or unparsable JSON is a
DecodeError.
"""
import json
import re
from typing import Tuple

from .errors import DecodeError, InvalidIdentifier

INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+')


def parse_tournament_payload(raw: bytes) -> Tuple[str, int]:
    """Decode a `{"nome": str, "ano": int}` body into (name, year)."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        raise DecodeError()

    if data is None:
        return "", 0
    if not isinstance(data, dict):
        raise DecodeError()

    name = ""
    year = 0
    for key, value in data.items():
        field = key.lower()
        if field == 'nome':
            name = _decode_name(value, name)
        elif field == 'ano':
            year = _decode_year(value, year)

    return name, year


def _decode_name(value, current: str) -> str:
    if value is None:
        return current
    if not isinstance(value, str):
        raise DecodeError()
    return value


def _decode_year(value, current: int) -> int:
    if value is None:
        return current
    # bool is an int subclass; floats never decode into an integer field
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError()
    if not INT_MIN <= value <= INT_MAX:
        raise DecodeError()
    return value


def parse_id_from_path(path: str) -> int:
    """Extract the id from a path like "/torneios/123"."""
    parts = path.strip('/').split('/')
    if len(parts) < 2:
        raise InvalidIdentifier()

    segment = parts[1]
    if not _INTEGER.fullmatch(segment):
        raise InvalidIdentifier()

    tournament_id = int(segment)
    if not INT_MIN <= tournament_id <= INT_MAX:
        raise InvalidIdentifier()
    return tournament_id
