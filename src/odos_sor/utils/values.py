"""Conversion of API string fields into chain-native values."""

import binascii
import string

from eth_utils import decode_hex, is_0x_prefixed

from odos_sor.errors import OdosHexDecodeError, OdosValueParseError


def parse_value(value: str) -> int:
    """Parse a wei amount given as a decimal string or 0x-prefixed hex.

    Args:
        value: Numeric string as returned by the API (e.g. "1000000000000000000")

    Returns:
        The amount as an integer

    Raises:
        OdosValueParseError: If the string is neither decimal nor hex
    """
    text = value.strip()
    if text in ("", "0x", "0X"):
        return 0

    if is_0x_prefixed(text):
        digits, base = text[2:], 16
        valid = all(c in string.hexdigits for c in digits)
    else:
        digits, base = text, 10
        valid = digits.isascii() and digits.isdecimal()

    if not valid:
        raise OdosValueParseError(f"Invalid numeric value: {value!r}")

    return int(digits, base)


def decode_call_data(data: str) -> bytes:
    """Decode transaction call data from hex (with or without 0x prefix).

    Raises:
        OdosHexDecodeError: On odd length or non-hex characters
    """
    try:
        return decode_hex(data)
    except (binascii.Error, ValueError, TypeError) as e:
        raise OdosHexDecodeError(f"Invalid hex call data: {e}") from e
