"""Exception taxonomy for fairy-data."""

from typing import Any


class FairyError(Exception):
    """Base class for all fairy-data errors."""


class ConfigError(FairyError):
    """Raised when a configuration file or mapping is invalid."""


class ExhaustionError(FairyError):
    """No new unique value could be produced within the retry bound.

    The last candidate is carried for diagnostics only; it was never recorded
    as produced.
    """

    def __init__(self, attempts: int, last_candidate: Any, operation: str | None = None):
        self.attempts = attempts
        self.last_candidate = last_candidate
        self.operation = operation
        where = f" for {operation}()" if operation else ""
        super().__init__(
            f"no more unique element found{where} after {attempts} retries. "
            f"Last found element was {last_candidate!r}"
        )


class BewitchError(FairyError):
    """Base class for failures while populating an object's fields."""

    def __init__(self, message: str, field_name: str, target_type: str | None = None):
        self.field_name = field_name
        self.target_type = target_type
        super().__init__(message)

    def annotate(self, target_type: str) -> "BewitchError":
        """Attach the runtime type name of the bewitched object."""
        self.target_type = target_type
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.target_type:
            return f"could not bewitch field {self.field_name} of class {self.target_type}: {message}"
        return message


class FieldNotFound(BewitchError, AttributeError):
    """A requested field is not declared on the target's type."""

    def __init__(self, field_name: str, target_type: str | None = None):
        super().__init__(f"field not found: {field_name}", field_name, target_type)


class UnsupportedFieldType(BewitchError):
    """A field's declared type has no assignment rule."""

    def __init__(self, field_name: str, field_type: Any, target_type: str | None = None):
        self.field_type = field_type
        super().__init__(
            f"cannot bewitch field {field_name} of type {field_type!r}",
            field_name,
            target_type,
        )


class AccessViolation(BewitchError):
    """The runtime refused assignment to a field after access relaxation."""


class FieldAssignmentError(BewitchError):
    """Assigning a generated value to a public field failed."""


class ValueGenerationError(BewitchError):
    """The assignment rule of a field failed to produce a value."""
