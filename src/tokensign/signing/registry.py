"""Signing method abstraction and the algorithm registry."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import lru_cache

from tokensign.common.errors import UnknownAlgorithmError
from tokensign.common.logging import get_logger
from tokensign.common.settings import Settings

logger = get_logger(__name__)


class SigningMethod(ABC):
    """Abstract base class for token signing methods."""

    __slots__ = ()

    @abstractmethod
    def alg(self) -> str:
        """Return the algorithm name used as the registry key."""

    @abstractmethod
    def sign(self, message: str | bytes, key: bytes) -> str:
        """
        Sign a message.

        Args:
            message: Signing input
            key: Key material for this family

        Returns:
            Encoded signature segment
        """

    @abstractmethod
    def verify(self, message: str | bytes, signature: str, key: bytes) -> None:
        """
        Verify a signature over a message.

        Returns None when the signature is valid and raises otherwise.
        """


SigningMethodFactory = Callable[[], SigningMethod]


class SigningMethodRegistry:
    """Thread-safe mapping of algorithm names to signing method factories."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._factories: dict[str, SigningMethodFactory] = {}

    def register(self, name: str, factory: SigningMethodFactory) -> None:
        """Register a factory under name, replacing any previous entry."""
        with self._lock:
            replaced = name in self._factories
            self._factories[name] = factory
        if replaced:
            logger.info("Replaced signing method", alg=name)

    def lookup(self, name: str) -> SigningMethod | None:
        """Return the signing method registered under name, or None."""
        with self._lock:
            factory = self._factories.get(name)
        if factory is None:
            return None
        return factory()

    def algorithms(self) -> list[str]:
        """List registered algorithm names."""
        with self._lock:
            return sorted(self._factories)

    def clear(self) -> None:
        """Remove all entries. Intended for isolated registries in tests."""
        with self._lock:
            self._factories.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


@lru_cache
def get_registry() -> SigningMethodRegistry:
    """Get the process-wide signing method registry."""
    return SigningMethodRegistry()


def register_signing_method(name: str, factory: SigningMethodFactory) -> None:
    """Register a signing method factory in the process-wide registry."""
    get_registry().register(name, factory)


def get_signing_method(name: str) -> SigningMethod | None:
    """Look up a signing method in the process-wide registry."""
    return get_registry().lookup(name)


def require_signing_method(
    name: str,
    registry: SigningMethodRegistry | None = None,
) -> SigningMethod:
    """
    Look up a signing method, raising if it is not registered.

    Args:
        name: Algorithm name (e.g. "HS256")
        registry: Registry to search (defaults to the process-wide one)

    Raises:
        UnknownAlgorithmError: If no method is registered under name
    """
    if registry is None:
        registry = get_registry()

    method = registry.lookup(name)
    if method is None:
        raise UnknownAlgorithmError(name)
    return method


def default_signing_method(
    settings: Settings | None = None,
    registry: SigningMethodRegistry | None = None,
) -> SigningMethod:
    """
    Resolve the configured default algorithm to a signing method.

    Args:
        settings: Application settings
        registry: Registry to search (defaults to the process-wide one)

    Returns:
        Signing method named by settings.default_algorithm
    """
    if settings is None:
        from tokensign.common.settings import get_settings

        settings = get_settings()

    return require_signing_method(settings.default_algorithm, registry)
