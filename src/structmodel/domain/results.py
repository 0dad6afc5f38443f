"""Violation and ModelResult: outcomes of rule validation.

``Violation`` is the unit reported by a validation call. ``ModelResult`` is
what :meth:`StructModel.try_create` returns, so a caller can build a model
and inspect failures without an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single failed rule, tied to one field path.

    Attributes:
        field_path: Dotted path to the field, list items as ``[i]``
            (e.g. ``"addresses[0].city"``). Uses serialization aliases.
        message: Human-readable description of the failure.
    """

    model_config = {"frozen": True}

    field_path: str
    message: str


class ModelResult(BaseModel):
    """Outcome of a validating construction.

    Attributes:
        ok: Whether the instance passed every rule.
        model_type: Class name of the requested model.
        instance: The constructed instance when ``ok``; ``None`` otherwise.
        violations: Rule failures when not ``ok``.
    """

    model_config = {"frozen": True}

    ok: bool
    model_type: str
    instance: Any = None
    violations: list[Violation] = Field(default_factory=list)
