"""Uniqueness enforcement for capability sets."""

from fairy_data.unique.capability import (
    CapabilitySet,
    CapabilitySignature,
    capability_interface,
    signature_of,
    unique_exempt,
)
from fairy_data.unique.decorator import MAX_RETRIES, GenerationSession, UniquenessDecorator
from fairy_data.unique.hasher import fingerprint

__all__ = [
    "CapabilitySet",
    "CapabilitySignature",
    "capability_interface",
    "signature_of",
    "unique_exempt",
    "MAX_RETRIES",
    "GenerationSession",
    "UniquenessDecorator",
    "fingerprint",
]
