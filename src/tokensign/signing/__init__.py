"""Signing methods and the algorithm registry."""

from tokensign.signing.hmac import (
    SIGNING_METHOD_HS256,
    SIGNING_METHOD_HS384,
    SIGNING_METHOD_HS512,
    HashAlgorithm,
    HMACSigningMethod,
)
from tokensign.signing.registry import (
    SigningMethod,
    SigningMethodRegistry,
    default_signing_method,
    get_registry,
    get_signing_method,
    register_signing_method,
    require_signing_method,
)

__all__ = [
    "SigningMethod",
    "SigningMethodRegistry",
    "HashAlgorithm",
    "HMACSigningMethod",
    "SIGNING_METHOD_HS256",
    "SIGNING_METHOD_HS384",
    "SIGNING_METHOD_HS512",
    "get_registry",
    "get_signing_method",
    "register_signing_method",
    "require_signing_method",
    "default_signing_method",
]
