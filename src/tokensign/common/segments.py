"""Segment encoding for signature bytes."""

import base64
import binascii
import re

from tokensign.common.errors import SegmentDecodeError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_segment(data: bytes) -> str:
    """
    Encode raw bytes to Base64 URL-safe without padding.

    Args:
        data: Raw bytes to encode

    Returns:
        Base64 URL-safe encoded string without padding
    """
    enc = base64.urlsafe_b64encode(data).decode("ascii")
    return enc.rstrip("=")


def decode_segment(segment: str) -> bytes:
    """
    Decode a Base64 URL-safe segment, with or without padding.

    Only the canonical encoding is accepted: trailing bits left over in the
    final character must be zero.

    Args:
        segment: Base64 URL-safe encoded string

    Returns:
        Decoded raw bytes

    Raises:
        SegmentDecodeError: If the segment is not valid URL-safe Base64
    """
    if not isinstance(segment, str):
        raise SegmentDecodeError(f"segment must be str, not {type(segment).__name__}")
    if not _SEGMENT_RE.fullmatch(segment):
        raise SegmentDecodeError("segment contains characters outside the URL-safe alphabet")

    # Add padding back
    pad = "=" * ((4 - (len(segment) % 4)) % 4)
    try:
        raw = base64.b64decode(
            (segment + pad).encode("ascii"),
            altchars=b"-_",
            validate=True,
        )
    except binascii.Error as e:
        raise SegmentDecodeError(f"illegal base64 data: {e}") from e

    # Unused trailing bits must be zero, so each byte string has one encoding
    if encode_segment(raw) != segment.rstrip("="):
        raise SegmentDecodeError("segment has non-canonical trailing bits")
    return raw
