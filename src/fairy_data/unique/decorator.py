"""Uniqueness decorator for capability sets.

Wraps a capability set so that its non-exempt operations never return a
value that the same decorator has already returned.

Example:
    words = UniquenessDecorator.wrap(text_producer)
    first, second = words.word(), words.word()  # always different

The fingerprint session is private, mutable and unsynchronized state: drive
one decorated instance from one logical caller at a time, or give each
caller its own decorator.
"""

from functools import wraps
from typing import Any, Callable, Generic, TypeVar
import logging

from fairy_data.errors import ExhaustionError
from fairy_data.unique.capability import (
    CapabilitySignature,
    capability_interface,
    signature_of,
)
from fairy_data.unique.hasher import fingerprint

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 100


class GenerationSession:
    """Fingerprints of the values returned by one decorator.

    The set only grows; it is discarded together with its decorator.
    """

    def __init__(self) -> None:
        self._fingerprints: set[str] = set()

    def record(self, value_fingerprint: str) -> bool:
        """Record a fingerprint, returning False if it was already present."""
        if value_fingerprint in self._fingerprints:
            return False
        self._fingerprints.add(value_fingerprint)
        return True

    def __contains__(self, value_fingerprint: object) -> bool:
        return value_fingerprint in self._fingerprints

    def __len__(self) -> int:
        return len(self._fingerprints)


class UniquenessDecorator(Generic[T]):
    """Enforces no-repeat semantics on one capability set instance."""

    def __init__(self, delegate: T, interface: type[T] | None = None):
        """Initialize the decorator.

        Args:
            delegate: The capability set instance to wrap
            interface: The capability interface to expose; defaults to the
                interface implemented by the delegate's class

        Raises:
            TypeError: If the delegate does not implement the interface
        """
        if interface is None:
            interface = capability_interface(type(delegate))
        if not isinstance(delegate, interface):
            raise TypeError(
                f"{type(delegate).__name__} does not implement {interface.__name__}"
            )

        self._delegate = delegate
        self._signature = signature_of(interface)
        self._session = GenerationSession()
        self._decorated: T | None = None

    @classmethod
    def wrap(cls, capability_set: T, interface: type[T] | None = None) -> T:
        """Wrap a capability set in a new decorator and return the decorated set."""
        return cls(capability_set, interface).decorated

    @property
    def decorated(self) -> T:
        """The decorated capability set (created once per decorator)."""
        if self._decorated is None:
            proxy_class = _proxy_class(self._signature)
            self._decorated = proxy_class(self)
        return self._decorated

    @property
    def delegate(self) -> T:
        return self._delegate

    @property
    def signature(self) -> CapabilitySignature:
        return self._signature

    @property
    def session(self) -> GenerationSession:
        return self._session

    def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke an operation on the delegate, enforcing uniqueness.

        Raises:
            AttributeError: If the operation is not part of the interface
            ExhaustionError: If no new value was produced within MAX_RETRIES
                attempts
        """
        if operation not in self._signature:
            raise AttributeError(
                f"{self._signature.interface.__name__} has no operation {operation!r}"
            )

        method: Callable[..., Any] = getattr(self._delegate, operation)
        if self._signature.is_exempt(operation):
            return method(*args, **kwargs)

        candidate = None
        for attempt in range(1, MAX_RETRIES + 1):
            candidate = method(*args, **kwargs)
            if candidate is None:
                return None
            if self._session.record(fingerprint(candidate)):
                return candidate
            logger.debug("Duplicate value from %s() on attempt %d", operation, attempt)

        logger.warning(
            "No unique value from %s() after %d attempts (%d values recorded)",
            operation,
            MAX_RETRIES,
            len(self._session),
        )
        raise ExhaustionError(MAX_RETRIES, candidate, operation)


_proxy_classes: dict[type, type] = {}


def _forwarding_method(operation: str, template: Callable[..., Any]) -> Callable[..., Any]:
    # updated=() keeps __isabstractmethod__ from being copied onto the proxy
    @wraps(template, updated=())
    def forward(self: Any, *args: Any, **kwargs: Any) -> Any:
        return self._uniqueness.invoke(operation, *args, **kwargs)

    return forward


def _proxy_class(signature: CapabilitySignature) -> type:
    """Build (once per interface) a subclass forwarding every operation."""
    interface = signature.interface
    proxy_class = _proxy_classes.get(interface)
    if proxy_class is not None:
        return proxy_class

    def __init__(self: Any, decorator: UniquenessDecorator) -> None:
        self._uniqueness = decorator

    def __repr__(self: Any) -> str:
        return f"<unique {interface.__name__} wrapping {self._uniqueness.delegate!r}>"

    namespace: dict[str, Any] = {
        "__init__": __init__,
        "__repr__": __repr__,
        "__module__": interface.__module__,
        "uniqueness": property(lambda self: self._uniqueness, doc="The owning decorator"),
    }
    for operation in signature.operations:
        namespace[operation] = _forwarding_method(operation, getattr(interface, operation))

    proxy_class = type(f"Unique{interface.__name__}", (interface,), namespace)
    _proxy_classes[interface] = proxy_class
    return proxy_class
