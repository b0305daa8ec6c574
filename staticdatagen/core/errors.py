"""Data error taxonomy shared by validators, records and the orchestrator.

Every failure a factory or ``validate()`` can report is one of four kinds:

* ``missing``: a required front-matter key is absent or blank.
* ``invalid``: a value is present but fails a validator
  (``length`` is the over-length flavour of the same thing).
* ``structural``: a cross-field invariant is violated.
* ``security``: path traversal or unsafe content, always fatal to the
  artifact being built.

The orchestrator catches ``DataError`` per (page, artifact kind) and keeps
going; anything else propagates.
"""

from __future__ import annotations

from typing import Any


class DataError(ValueError):
    """Base class for all record and validator failures.

    Parameters
    ----------
    message:
        Human-readable description.
    field:
        Name of the offending field or front-matter key.
    value:
        The offending value, when there is one.
    """

    kind: str = "data"

    def __init__(self, message: str, *, field: str = "", value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r}, message={str(self)!r})"


class MissingFieldError(DataError):
    """Raised when a required field is absent from the metadata map."""

    kind = "missing"

    def __init__(self, field: str, message: str = "") -> None:
        super().__init__(
            message or f"Missing required field: {field}", field=field
        )


class InvalidValueError(DataError):
    """Raised when a present value fails a validator."""

    kind = "invalid"

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        *,
        kind: str = "invalid",
    ) -> None:
        super().__init__(
            f"Invalid value for '{field}': {reason} (got {value!r})",
            field=field,
            value=value,
        )
        self.kind = kind
        self.reason = reason


class StructuralError(DataError):
    """Raised when a cross-field invariant does not hold."""

    kind = "structural"


class SecurityError(DataError):
    """Raised on path traversal or unsafe content."""

    kind = "security"
