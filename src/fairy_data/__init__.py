"""fairy-data - synthetic test data for Python objects.

Provides random words, numbers and dates, a uniqueness decorator that keeps
any producer from repeating itself, and a magic producer that fills an
object's fields according to their declared types.
"""

__version__ = "0.1.0"

from fairy_data.config import DateConfig, FairyConfig, TextConfig
from fairy_data.errors import (
    AccessViolation,
    BewitchError,
    ConfigError,
    ExhaustionError,
    FairyError,
    FieldAssignmentError,
    FieldNotFound,
    UnsupportedFieldType,
    ValueGenerationError,
)
from fairy_data.fairy import Fairy
from fairy_data.magic import Float32, Instant, Int32, Int64, MagicProducer, ZonedDateTime
from fairy_data.producers import BaseProducer, DateProducer, TextProducer, Texts
from fairy_data.unique import CapabilitySet, UniquenessDecorator, unique_exempt

__all__ = [
    "DateConfig",
    "FairyConfig",
    "TextConfig",
    "AccessViolation",
    "BewitchError",
    "ConfigError",
    "ExhaustionError",
    "FairyError",
    "FieldAssignmentError",
    "FieldNotFound",
    "UnsupportedFieldType",
    "ValueGenerationError",
    "Fairy",
    "Float32",
    "Instant",
    "Int32",
    "Int64",
    "MagicProducer",
    "ZonedDateTime",
    "BaseProducer",
    "DateProducer",
    "TextProducer",
    "Texts",
    "CapabilitySet",
    "UniquenessDecorator",
    "unique_exempt",
]
