"""Exception hierarchy for structmodel.

The read side (``read_from_file``, ``validate``) raises these to the caller.
The write side (``write_to_file``) catches them, logs the cause and returns
``False``. Callers that care about the reason must use the read-side API or
inspect the logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structmodel.domain.results import Violation


class StructModelError(Exception):
    """Base class for every error raised by structmodel."""


class PathError(StructModelError, OSError):
    """A file location could not be resolved, or is not a regular file."""


class EncodeError(StructModelError, ValueError):
    """A model graph could not be represented as JSON."""


class DecodeError(StructModelError, ValueError):
    """JSON text was malformed or did not match the target model."""


class ValidationError(StructModelError, ValueError):
    """One or more declared rules failed for a model instance.

    Attributes:
        model_name: Class name of the offending instance.
        violations: Every violation found, in field order.
    """

    def __init__(self, model_name: str, violations: list[Violation]) -> None:
        self.model_name = model_name
        self.violations = list(violations)
        details = "; ".join(f"{v.field_path}: {v.message}" for v in self.violations)
        super().__init__(
            f"{model_name} failed validation with {len(self.violations)} violation(s): {details}"
        )
