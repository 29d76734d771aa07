"""Field dispatch table - maps a field's semantic type to an assignment rule.

Python annotations are first reduced to a SemanticType tag; the tag is then
looked up in a fixed, read-only table of rules. Types without a rule are not
supported for bewitching.

Python has a single ``int`` and a single ``float``, so the fixed-width kinds
are declared with the ``Annotated`` aliases below:

    @dataclass
    class Account:
        owner: str
        balance: Decimal
        pin: Int32
        opened: ZonedDateTime

Zoned date-times keep the drawn wall time in the system zone; a wall time
that falls into a daylight-saving gap is shifted by the gap (usually one
hour) when the zone is attached.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from types import MappingProxyType, NoneType, UnionType
from typing import Annotated, Any, Callable, Mapping, Union, get_args, get_origin
import struct
import sys

from fairy_data.producers.base import BaseProducer
from fairy_data.producers.date import DateProducer
from fairy_data.producers.text import Texts


class SemanticType(str, Enum):
    """Semantic type tags understood by the dispatch table."""

    STRING = "string"
    INT64 = "int64"
    INT32 = "int32"
    FLOAT64 = "float64"
    FLOAT32 = "float32"
    BIG_INTEGER = "big_integer"
    BIG_DECIMAL = "big_decimal"
    DATE = "date"
    LOCAL_DATETIME = "local_datetime"
    ZONED_DATETIME = "zoned_datetime"
    INSTANT = "instant"
    UNSUPPORTED = "unsupported"


Int64 = Annotated[int, SemanticType.INT64]
Int32 = Annotated[int, SemanticType.INT32]
Float32 = Annotated[float, SemanticType.FLOAT32]
ZonedDateTime = Annotated[datetime, SemanticType.ZONED_DATETIME]
Instant = Annotated[datetime, SemanticType.INSTANT]

INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
FLOAT64_MAX = sys.float_info.max
FLOAT32_MAX = 3.4028234663852886e38

_PLAIN_TYPES: Mapping[type, SemanticType] = MappingProxyType({
    str: SemanticType.STRING,
    int: SemanticType.BIG_INTEGER,
    float: SemanticType.FLOAT64,
    Decimal: SemanticType.BIG_DECIMAL,
    date: SemanticType.DATE,
    datetime: SemanticType.LOCAL_DATETIME,
})


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(args) == 1:
            return args[0]
    return annotation


def semantic_type_of(annotation: Any) -> SemanticType:
    """Reduce a field annotation to its semantic type tag.

    ``Optional[X]`` is treated as ``X`` and an ``Annotated`` SemanticType
    marker overrides the underlying type. Lookup is by exact type, so
    subclasses (``bool`` for ``int``, for instance) are unsupported.
    """
    annotation = _unwrap_optional(annotation)

    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        for marker in metadata:
            if isinstance(marker, SemanticType):
                return marker
        return semantic_type_of(base)

    if isinstance(annotation, type):
        return _PLAIN_TYPES.get(annotation, SemanticType.UNSUPPORTED)
    return SemanticType.UNSUPPORTED


@dataclass(frozen=True)
class RuleSources:
    """Random sources available to assignment rules."""

    base: BaseProducer
    dates: DateProducer
    texts: Texts


TypeRule = Callable[[RuleSources], Any]


def _int64(sources: RuleSources) -> int:
    return sources.base.random_between(INT64_MIN, INT64_MAX)


def _float64(sources: RuleSources) -> float:
    return sources.base.random_between(-FLOAT64_MAX, FLOAT64_MAX)


def _float32(sources: RuleSources) -> float:
    drawn = sources.base.random_between(-FLOAT32_MAX, FLOAT32_MAX)
    return struct.unpack("f", struct.pack("f", drawn))[0]


def _random_date(sources: RuleSources) -> datetime:
    return sources.dates.random_date_in_window()


DISPATCH_TABLE: Mapping[SemanticType, TypeRule] = MappingProxyType({
    SemanticType.STRING: lambda sources: sources.texts.word(),
    SemanticType.INT64: _int64,
    SemanticType.INT32: lambda sources: sources.base.random_between(INT32_MIN, INT32_MAX),
    SemanticType.FLOAT64: _float64,
    SemanticType.FLOAT32: _float32,
    SemanticType.BIG_INTEGER: _int64,
    SemanticType.BIG_DECIMAL: lambda sources: Decimal(repr(_float64(sources))),
    SemanticType.DATE: lambda sources: _random_date(sources).replace(tzinfo=timezone.utc).date(),
    SemanticType.LOCAL_DATETIME: _random_date,
    SemanticType.ZONED_DATETIME: lambda sources: _random_date(sources).astimezone(),
    SemanticType.INSTANT: lambda sources: _random_date(sources).replace(tzinfo=timezone.utc),
})


def rule_for(semantic_type: SemanticType) -> TypeRule | None:
    """Look up the assignment rule for a tag (None if unsupported)."""
    return DISPATCH_TABLE.get(semantic_type)
