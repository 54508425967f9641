"""HMAC-SHA family of signing methods (HS256, HS384, HS512)."""

from __future__ import annotations

import hashlib
import hmac
from enum import Enum
from typing import Any

from tokensign.common.errors import (
    HashUnavailableError,
    InvalidKeyTypeError,
    SignatureInvalidError,
)
from tokensign.common.segments import decode_segment, encode_segment
from tokensign.signing.registry import SigningMethod, SigningMethodRegistry, get_registry


class HashAlgorithm(str, Enum):
    """Hash functions supported by the HMAC family."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    def available(self) -> bool:
        """Check whether this runtime's hashlib provides the hash."""
        return self.value in hashlib.algorithms_available

    def new(self) -> Any:
        """Create a fresh hash object."""
        return hashlib.new(self.value)

    @property
    def digest_size(self) -> int:
        """Digest size in bytes."""
        return self.new().digest_size


def _message_bytes(message: str | bytes | bytearray) -> bytes:
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    if isinstance(message, str):
        return message.encode("utf-8")
    raise TypeError(f"message must be str or bytes, not {type(message).__name__}")


class HMACSigningMethod(SigningMethod):
    """
    Keyed-hash MAC signing method.

    Expects raw secret bytes as the key for both signing and verification.
    Constructing an instance registers it under its name; lookups by that
    name return this same instance.
    """

    __slots__ = ("_name", "_hash_algorithm")

    def __init__(
        self,
        name: str,
        hash_algorithm: HashAlgorithm | str,
        *,
        registry: SigningMethodRegistry | None = None,
    ):
        self._name = name
        self._hash_algorithm = HashAlgorithm(hash_algorithm)
        self.register(registry)

    @property
    def name(self) -> str:
        return self._name

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return self._hash_algorithm

    def __repr__(self) -> str:
        return f"HMACSigningMethod(name={self._name!r}, hash_algorithm={self._hash_algorithm.value!r})"

    def alg(self) -> str:
        return self._name

    def register(self, registry: SigningMethodRegistry | None = None) -> None:
        """Register this method under its name."""
        if registry is None:
            registry = get_registry()
        registry.register(self._name, lambda: self)

    def _digest(self, message: str | bytes, key: bytes) -> bytes:
        return hmac.new(bytes(key), _message_bytes(message), self._hash_algorithm.value).digest()

    def sign(self, message: str | bytes, key: bytes) -> str:
        """
        Sign a message with a shared secret.

        Args:
            message: Signing input (str is UTF-8 encoded)
            key: Raw secret bytes

        Returns:
            Unpadded URL-safe Base64 signature

        Raises:
            InvalidKeyTypeError: If key is not bytes
            HashUnavailableError: If the hash is missing from this runtime
        """
        if not isinstance(key, (bytes, bytearray)):
            raise InvalidKeyTypeError()
        if not self._hash_algorithm.available():
            raise HashUnavailableError()

        return encode_segment(self._digest(message, key))

    def verify(self, message: str | bytes, signature: str, key: bytes) -> None:
        """
        Verify an HMAC signature. Returns None if the signature is valid.

        Raises:
            InvalidKeyTypeError: If key is not bytes
            SegmentDecodeError: If signature is not valid URL-safe Base64
            HashUnavailableError: If the hash is missing from this runtime
            SignatureInvalidError: If the signature does not match
        """
        if not isinstance(key, (bytes, bytearray)):
            raise InvalidKeyTypeError()

        sig = decode_segment(signature)

        if not self._hash_algorithm.available():
            raise HashUnavailableError()

        # Symmetric: reproduce the MAC and compare in constant time
        if not hmac.compare_digest(sig, self._digest(message, key)):
            raise SignatureInvalidError()


SIGNING_METHOD_HS256 = HMACSigningMethod("HS256", HashAlgorithm.SHA256)
SIGNING_METHOD_HS384 = HMACSigningMethod("HS384", HashAlgorithm.SHA384)
SIGNING_METHOD_HS512 = HMACSigningMethod("HS512", HashAlgorithm.SHA512)
