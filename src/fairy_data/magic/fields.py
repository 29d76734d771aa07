"""Field introspection and scoped field access.

Fields are the annotations declared directly on an object's class, in
declaration order; inherited annotations and ``ClassVar`` entries are not
fields. Assignments go through a FieldAccessToken, which relaxes access for
frozen instances and is always released when its ``with`` block exits.
"""

from dataclasses import dataclass, InitVar, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, get_origin
import inspect
import logging
import sys

from pydantic import BaseModel

from fairy_data.errors import AccessViolation, FieldAssignmentError, FieldNotFound
from fairy_data.magic.dispatch import SemanticType, semantic_type_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """A declared field of a class.

    ``name`` is the name as requested, ``attribute`` the attribute actually
    set (they differ for name-mangled ``__private`` fields).
    """

    name: str
    attribute: str
    annotation: Any
    semantic_type: SemanticType


def _is_field(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return False
    if isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar")):
        return False
    if isinstance(annotation, InitVar) or annotation is InitVar:
        return False
    return True


def _raw_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # deferred annotations naming undefined types (Python 3.14+)
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)


def _evaluate(klass: type, name: str, annotation: Any) -> Any:
    """Evaluate one string annotation, leaving it a string if it cannot be."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(klass.__module__)
    globalns = getattr(module, "__dict__", {})
    try:
        return eval(annotation, globalns, dict(vars(klass)))
    except (NameError, AttributeError, SyntaxError, TypeError) as e:
        logger.debug("Could not resolve annotation of %s.%s: %s", klass.__name__, name, e)
        return annotation


def _field_annotations(klass: type) -> dict[str, Any]:
    """Own annotations of klass, each resolved on its own where possible."""
    resolved = {
        name: _evaluate(klass, name, annotation)
        for name, annotation in _raw_annotations(klass).items()
    }
    return {name: annotation for name, annotation in resolved.items() if _is_field(annotation)}


def _spec(name: str, attribute: str, annotation: Any) -> FieldSpec:
    return FieldSpec(
        name=name,
        attribute=attribute,
        annotation=annotation,
        semantic_type=semantic_type_of(annotation),
    )


def declared_fields(klass: type) -> list[FieldSpec]:
    """All fields declared directly on klass."""
    return [
        _spec(name, name, annotation)
        for name, annotation in _field_annotations(klass).items()
    ]


def resolve_fields(klass: type, field_names: Iterable[str]) -> list[FieldSpec]:
    """Resolve every requested name before any of them is used.

    Raises:
        FieldNotFound: For the first name that is not a declared field
    """
    annotations = _field_annotations(klass)
    specs = []
    for name in field_names:
        attribute = name
        if attribute not in annotations and name.startswith("__") and not name.endswith("__"):
            attribute = f"_{klass.__name__.lstrip('_')}{name}"
        if attribute not in annotations:
            raise FieldNotFound(name, klass.__name__)
        specs.append(_spec(name, attribute, annotations[attribute]))
    return specs


def requires_relaxation(target: Any, attribute: str) -> bool:
    """Whether normal attribute assignment is refused for this field."""
    if is_dataclass(target) and target.__dataclass_params__.frozen:
        return True
    if isinstance(target, BaseModel):
        if target.model_config.get("frozen", False):
            return True
        field_info = type(target).model_fields.get(attribute)
        return bool(field_info is not None and field_info.frozen)
    return False


class FieldState(str, Enum):
    """Per-field processing states."""

    RESOLVED = "resolved"
    ACCESS_RELAXED = "access_relaxed"
    ASSIGNED = "assigned"
    FAILED = "failed"
    ACCESS_RESTORED = "access_restored"


class FieldAccessToken:
    """Scoped write access to one field of one object.

    Entering the token relaxes access if the instance refuses ordinary
    assignment; leaving it, on any path, restores the ordinary access and
    invalidates the token.
    """

    def __init__(self, target: Any, spec: FieldSpec):
        self._target = target
        self._spec = spec
        self.relaxed = False
        self.history: list[FieldState] = [FieldState.RESOLVED]

    @property
    def state(self) -> FieldState:
        return self.history[-1]

    @property
    def released(self) -> bool:
        return self.state is FieldState.ACCESS_RESTORED

    def __enter__(self) -> "FieldAccessToken":
        if requires_relaxation(self._target, self._spec.attribute):
            self.relaxed = True
            self.history.append(FieldState.ACCESS_RELAXED)
        return self

    def assign(self, value: Any) -> None:
        """Assign value to the field.

        Raises:
            AccessViolation: If assignment fails although access was relaxed
            FieldAssignmentError: If ordinary assignment fails
        """
        if self.released:
            raise RuntimeError(f"access to field {self._spec.name} was already released")

        try:
            if self.relaxed:
                object.__setattr__(self._target, self._spec.attribute, value)
            else:
                setattr(self._target, self._spec.attribute, value)
        except Exception as e:
            self.history.append(FieldState.FAILED)
            error_class = AccessViolation if self.relaxed else FieldAssignmentError
            raise error_class(f"{type(e).__name__}: {e}", self._spec.name) from e

        self.history.append(FieldState.ASSIGNED)

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if exc_type is not None and self.state is not FieldState.FAILED:
            self.history.append(FieldState.FAILED)
        self.relaxed = False
        self.history.append(FieldState.ACCESS_RESTORED)
