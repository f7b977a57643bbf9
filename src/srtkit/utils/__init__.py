"""Utility modules."""

from srtkit.utils.config import Settings, get_settings
from srtkit.utils.encoding import (
    BOM_SIGNATURES,
    DecodedText,
    decode_to_canonical,
    detect_bom,
    detect_encoding,
    encode_from_canonical,
)
from srtkit.utils.logging import setup_logging

__all__ = [
    "BOM_SIGNATURES",
    "DecodedText",
    "Settings",
    "decode_to_canonical",
    "detect_bom",
    "detect_encoding",
    "encode_from_canonical",
    "get_settings",
    "setup_logging",
]
