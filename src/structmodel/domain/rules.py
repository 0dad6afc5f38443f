"""Declarative field rules attached through ``typing.Annotated`` metadata.

Rules plug into pydantic's core schema as after-validators, but they are
dormant unless the validation context carries :data:`RULES_CONTEXT_KEY`.
Construction, ``model_validate_json`` and assignment therefore never run
them; only an explicit validation call (``ModelIO.validate``) does.

Usage::

    class User(StructModel):
        favorite_food: Annotated[str, Pattern(r"^(?!Revenge$).*$")]
        nickname: Annotated[str | None, Size(max=20)] = None

Null values satisfy every rule except :class:`NotBlank`, matching the
usual bean-validation convention.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, Any, get_args, get_origin

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

RULES_CONTEXT_KEY = "structmodel.rules"
RULE_ERROR_TYPE = "rule_violation"


def rules_context() -> dict[str, Any]:
    """Return a pydantic validation context that activates rules."""
    return {RULES_CONTEXT_KEY: True}


def rules_enabled(context: Any) -> bool:
    """Whether *context* (``ValidationInfo.context``) activates rules."""
    return isinstance(context, dict) and bool(context.get(RULES_CONTEXT_KEY))


def declares_rules(annotation: Any) -> bool:
    """Whether *annotation* carries a :class:`Rule` anywhere inside it.

    Finds rules nested in generic arguments too, as in
    ``list[Annotated[str, NotBlank()]]``. Model classes are not entered.
    """
    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        return any(isinstance(m, Rule) for m in metadata) or declares_rules(base)
    return any(declares_rules(arg) for arg in get_args(annotation))


@dataclass(frozen=True)
class Rule(ABC):
    """Base class for a single declarative constraint on one field."""

    message: str | None = field(default=None, kw_only=True)

    @abstractmethod
    def is_satisfied(self, value: Any) -> bool:
        """Whether *value* meets the constraint.

        May raise ``TypeError`` when the rule does not apply to the value's
        type; that is reported as a violation, not propagated.
        """

    def default_message(self) -> str:
        return "is invalid"

    @property
    def effective_message(self) -> str:
        return self.message or self.default_message()

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_after_validator_function(self._apply, handler(source_type))

    def _apply(self, value: Any, info: core_schema.ValidationInfo) -> Any:
        if not rules_enabled(info.context):
            return value
        try:
            satisfied = self.is_satisfied(value)
        except TypeError:
            raise PydanticCustomError(
                RULE_ERROR_TYPE,
                "{rule} is not applicable to {type}",
                {"rule": type(self).__name__, "type": type(value).__name__},
            ) from None
        if satisfied:
            return value
        # Passed as context so braces in user messages are not format fields.
        raise PydanticCustomError(
            RULE_ERROR_TYPE, "{message}", {"message": self.effective_message}
        )


@dataclass(frozen=True)
class Pattern(Rule):
    """The whole string value must match *regexp*."""

    regexp: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        return re.fullmatch(self.regexp, str(value)) is not None

    def default_message(self) -> str:
        return f'must match "{self.regexp}"'


@dataclass(frozen=True)
class NotBlank(Rule):
    """The value must be a string with at least one non-whitespace character."""

    def is_satisfied(self, value: Any) -> bool:
        return isinstance(value, str) and bool(value.strip())

    def default_message(self) -> str:
        return "must not be blank"


@dataclass(frozen=True)
class Size(Rule):
    """``len(value)`` must lie within ``[min, max]`` (``max=None`` is unbounded)."""

    min: int = 0
    max: int | None = None

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        length = len(value)
        if length < self.min:
            return False
        return self.max is None or length <= self.max

    def default_message(self) -> str:
        if self.max is None:
            return f"size must be at least {self.min}"
        return f"size must be between {self.min} and {self.max}"


@dataclass(frozen=True)
class Min(Rule):
    """A numeric value must be greater than or equal to *value*."""

    value: float

    def is_satisfied(self, value: Any) -> bool:
        return value is None or value >= self.value

    def default_message(self) -> str:
        return f"must be greater than or equal to {self.value}"


@dataclass(frozen=True)
class Max(Rule):
    """A numeric value must be less than or equal to *value*."""

    value: float

    def is_satisfied(self, value: Any) -> bool:
        return value is None or value <= self.value

    def default_message(self) -> str:
        return f"must be less than or equal to {self.value}"
