"""structmodel: JSON serialization and opt-in rule validation for pydantic models."""

from __future__ import annotations

from structmodel.domain.results import ModelResult, Violation
from structmodel.domain.rules import Max, Min, NotBlank, Pattern, Rule, Size
from structmodel.errors import (
    DecodeError,
    EncodeError,
    PathError,
    StructModelError,
    ValidationError,
)
from structmodel.infrastructure.paths import resolve_filepath
from structmodel.model import StructModel
from structmodel.services.model_io import ModelIO

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "EncodeError",
    "Max",
    "Min",
    "ModelIO",
    "ModelResult",
    "NotBlank",
    "PathError",
    "Pattern",
    "Rule",
    "Size",
    "StructModel",
    "StructModelError",
    "ValidationError",
    "Violation",
    "__version__",
    "resolve_filepath",
]
