"""Magic module - populating arbitrary objects with random values."""

from fairy_data.magic.bewitcher import MagicProducer
from fairy_data.magic.dispatch import (
    DISPATCH_TABLE,
    Float32,
    Instant,
    Int32,
    Int64,
    RuleSources,
    SemanticType,
    ZonedDateTime,
    rule_for,
    semantic_type_of,
)
from fairy_data.magic.fields import (
    FieldAccessToken,
    FieldSpec,
    FieldState,
    declared_fields,
    resolve_fields,
)

__all__ = [
    "MagicProducer",
    "DISPATCH_TABLE",
    "Float32",
    "Instant",
    "Int32",
    "Int64",
    "RuleSources",
    "SemanticType",
    "ZonedDateTime",
    "rule_for",
    "semantic_type_of",
    "FieldAccessToken",
    "FieldSpec",
    "FieldState",
    "declared_fields",
    "resolve_fields",
]
