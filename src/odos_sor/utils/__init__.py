"""Helpers for converting Odos API fields into chain-native values."""

from odos_sor.utils.values import decode_call_data, parse_value

__all__ = ["decode_call_data", "parse_value"]
