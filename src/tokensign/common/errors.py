"""Shared error types and codes."""

from __future__ import annotations


class ErrorCode:
    INVALID_KEY_TYPE = "invalid_key_type"
    HASH_UNAVAILABLE = "hash_unavailable"
    SIGNATURE_INVALID = "signature_invalid"
    SEGMENT_DECODE_ERROR = "segment_decode_error"
    UNKNOWN_ALGORITHM = "unknown_algorithm"


class TokenSignError(Exception):
    """Base class for all signing errors."""

    code = "error"


class InvalidKeyTypeError(TokenSignError, TypeError):
    """Key is not of the type the signing method requires."""

    code = ErrorCode.INVALID_KEY_TYPE

    def __init__(self, message: str = "key is of invalid type"):
        super().__init__(message)


class HashUnavailableError(TokenSignError):
    """Requested hash function is not provided by this runtime."""

    code = ErrorCode.HASH_UNAVAILABLE

    def __init__(self, message: str = "the requested hash function is unavailable"):
        super().__init__(message)


class SignatureInvalidError(TokenSignError):
    """Signature does not match the message and key."""

    code = ErrorCode.SIGNATURE_INVALID

    def __init__(self, message: str = "signature is invalid"):
        super().__init__(message)


class SegmentDecodeError(TokenSignError, ValueError):
    """Segment is not valid unpadded URL-safe base64."""

    code = ErrorCode.SEGMENT_DECODE_ERROR


class UnknownAlgorithmError(TokenSignError, LookupError):
    """No signing method is registered under the requested name."""

    code = ErrorCode.UNKNOWN_ALGORITHM

    def __init__(self, alg: str):
        super().__init__(f"signing method {alg!r} is not registered")
        self.alg = alg
