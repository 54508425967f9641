"""Common utilities for tokensign."""

from tokensign.common.segments import decode_segment, encode_segment
from tokensign.common.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "encode_segment",
    "decode_segment",
]
