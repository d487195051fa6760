from __future__ import annotations

import base64
import binascii

from typing import Final

SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 8, 10, 16)

_PREFIXES: Final[dict[int, str]] = {2: '0b', 8: '0o', 16: '0x'}


def b64_encode(text: str) -> str:
    """Encode UTF-8 text with the standard Base64 alphabet."""
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def b64_decode(text: str) -> str:
    """
    Decode standard Base64 back into text.

    Undecodable UTF-8 sequences are replaced rather than rejected.

    Raises:
        ValueError: If the input is not valid Base64.
    """
    try:
        raw = base64.b64decode(text.strip(), validate=True)
    except binascii.Error as exc:
        msg = f'Provided input is not a valid base64 string: {exc}'
        raise ValueError(msg) from exc
    return raw.decode('utf-8', errors='replace')


def _check_base(base: int) -> None:
    if base not in SUPPORTED_BASES:
        msg = f'Unsupported base {base}; choose one of {SUPPORTED_BASES}.'
        raise ValueError(msg)


def _to_base(number: int, base: int) -> str:
    if number < 0:
        return '-' + _to_base(-number, base)
    if base == 10:
        return str(number)
    return format(number, {2: 'b', 8: 'o', 16: 'X'}[base])


def parse_number(value: str, base: int) -> int:
    """
    Parse ``value`` written in ``base``.

    An optional sign, the matching 0b/0o/0x prefix and underscores are
    accepted.

    Raises:
        ValueError: If the base is unsupported or the digits are invalid.
    """
    _check_base(base)
    text = value.strip().replace('_', '')
    sign = 1
    if text[:1] in ('-', '+'):
        sign = -1 if text[0] == '-' else 1
        text = text[1:]

    prefix = _PREFIXES.get(base)
    if prefix and text.lower().startswith(prefix):
        text = text[2:]

    if not text or not text[0].isalnum():
        msg = f'No digits to convert in {value!r}.'
        raise ValueError(msg)

    try:
        return sign * int(text, base)
    except ValueError:
        msg = f'Invalid base-{base} number: {value!r}'
        raise ValueError(msg) from None


def convert_base(value: str, base_from: int, base_to: int) -> str:
    """Convert ``value`` from one supported base to another."""
    _check_base(base_to)
    return _to_base(parse_number(value, base_from), base_to)


def convert_all(value: str, base_from: int) -> dict[int, str]:
    """Return ``value`` rendered in every supported base."""
    number = parse_number(value, base_from)
    return {base: _to_base(number, base) for base in SUPPORTED_BASES}
