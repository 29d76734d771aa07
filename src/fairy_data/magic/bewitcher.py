"""Magic producer - populates an object's fields with random values."""

from typing import Any
import logging

from fairy_data.errors import BewitchError, UnsupportedFieldType, ValueGenerationError
from fairy_data.magic.dispatch import RuleSources, rule_for
from fairy_data.magic.fields import (
    FieldAccessToken,
    FieldSpec,
    declared_fields,
    resolve_fields,
)
from fairy_data.producers.base import BaseProducer
from fairy_data.producers.date import DateProducer
from fairy_data.producers.text import Texts

logger = logging.getLogger(__name__)


class MagicProducer:
    """Bewitches objects: assigns each field a random value of its type.

    Holds no state between calls. Bewitching different objects concurrently
    is safe; bewitching the same object from two callers is not.
    """

    def __init__(
        self,
        base_producer: BaseProducer,
        text_producer: Texts,
        date_producer: DateProducer,
    ):
        self._sources = RuleSources(
            base=base_producer,
            dates=date_producer,
            texts=text_producer,
        )

    def bewitch(self, target: Any, *field_names: str) -> None:
        """Apply random values to the named fields of target.

        Without field names every field declared directly on target's class
        is tried and fields that cannot be bewitched are left untouched. With
        field names, all names are resolved up front and the first field that
        cannot be bewitched aborts the call.

        Args:
            target: The object to bewitch; None is ignored
            *field_names: Names of the fields to bewitch

        Raises:
            FieldNotFound: If a named field is not declared on target's class
            UnsupportedFieldType: If a named field's type has no rule
            AccessViolation: If a named field refuses assignment after relaxation
            FieldAssignmentError: If a named field refuses ordinary assignment
            ValueGenerationError: If no value could be drawn for a named field
        """
        if target is None:
            return

        fields_are_given = bool(field_names)
        klass = type(target)
        if fields_are_given:
            fields = resolve_fields(klass, field_names)
        else:
            fields = declared_fields(klass)

        for spec in fields:
            self._bewitch_field(target, spec, rethrow=fields_are_given)

    def _bewitch_field(self, target: Any, spec: FieldSpec, rethrow: bool) -> None:
        try:
            with FieldAccessToken(target, spec) as token:
                rule = rule_for(spec.semantic_type)
                if rule is None:
                    raise UnsupportedFieldType(spec.name, spec.annotation)
                try:
                    value = rule(self._sources)
                except Exception as e:
                    raise ValueGenerationError(f"{type(e).__name__}: {e}", spec.name) from e
                token.assign(value)
        except BewitchError as e:
            if rethrow:
                raise e.annotate(type(target).__name__)
            logger.debug("Skipped field %s of %s: %s", spec.name, type(target).__name__, e)
            return

        logger.debug("Bewitched field %s of %s", spec.name, type(target).__name__)
