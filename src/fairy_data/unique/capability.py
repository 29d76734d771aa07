"""Capability sets - named collections of value-producing operations.

A capability set is an abstract class whose public methods are its
operations. Operations decorated with ``unique_exempt`` are never checked for
uniqueness (typically configuration-only operations).
"""

from abc import ABC
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar
import inspect

F = TypeVar("F", bound=Callable[..., Any])

EXEMPT_ATTRIBUTE = "__unique_exempt__"


def unique_exempt(func: F) -> F:
    """Mark a capability operation as exempt from uniqueness checks."""
    setattr(func, EXEMPT_ATTRIBUTE, True)
    return func


class CapabilitySet(ABC):
    """Base class for interfaces that can be wrapped by UniquenessDecorator."""


@dataclass(frozen=True)
class CapabilitySignature:
    """Operation table of a capability interface: name -> exempt flag."""

    interface: type
    operations: Mapping[str, bool]

    def is_exempt(self, operation: str) -> bool:
        return self.operations[operation]

    def __contains__(self, operation: object) -> bool:
        return operation in self.operations


@lru_cache(maxsize=None)
def signature_of(interface: type) -> CapabilitySignature:
    """Read the operations and exempt flags declared by a capability interface.

    Operations are collected from every CapabilitySet subclass in the MRO,
    most derived first, in declaration order.

    Raises:
        TypeError: If interface is not a CapabilitySet subclass or declares
            no operations
    """
    if not (isinstance(interface, type) and issubclass(interface, CapabilitySet)):
        raise TypeError(f"{interface!r} is not a CapabilitySet interface")

    operations: dict[str, bool] = {}
    for klass in interface.__mro__:
        if klass is CapabilitySet or not issubclass(klass, CapabilitySet):
            continue
        for name, attr in vars(klass).items():
            if name.startswith("_") or name in operations or not inspect.isfunction(attr):
                continue
            operations[name] = bool(getattr(attr, EXEMPT_ATTRIBUTE, False))

    if not operations:
        raise TypeError(f"{interface.__name__} declares no operations")

    return CapabilitySignature(interface=interface, operations=MappingProxyType(operations))


def capability_interface(klass: type) -> type:
    """Find the capability interface implemented by a concrete class.

    The interface is the first abstract CapabilitySet subclass in the MRO;
    for a class that is itself an abstract interface, that is the class.

    Raises:
        TypeError: If klass implements no capability interface
    """
    for candidate in klass.__mro__:
        if (
            candidate is not CapabilitySet
            and issubclass(candidate, CapabilitySet)
            and inspect.isabstract(candidate)
        ):
            return candidate
    raise TypeError(f"{klass.__name__} does not implement a CapabilitySet interface")
