"""StructModel: convenience base class for serializable, rule-checked records.

Field names are snake_case in Python and camelCase on the wire
(``favorite_food`` <-> ``favoriteFood``). Either spelling is accepted when
constructing or decoding.

Rules declared on fields are opt-in: plain construction skips them. Use
:meth:`StructModel.create` for a constructor that validates, or
:meth:`StructModel.try_create` to get a :class:`ModelResult` instead of an
exception.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from structmodel.domain.results import ModelResult
from structmodel.errors import ValidationError
from structmodel.services.model_io import ModelIO


class StructModel(BaseModel):
    """Base class for user-defined records.

    Usage::

        class User(StructModel):
            name: Annotated[str, NotBlank()]
            birthyear: int

        user = User.create(name="Arthur", birthyear=1863)
        user.write_json("user.json", indent=4)
        same = User.read_json("user.json")
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def create(cls, **data: Any) -> Self:
        """Construct an instance and validate its rules.

        Raises:
            pydantic.ValidationError: *data* does not fit the field types.
            ValidationError: A rule failed.
        """
        instance = cls(**data)
        instance.check_rules()
        return instance

    @classmethod
    def try_create(cls, **data: Any) -> ModelResult:
        """Like :meth:`create`, but report rule failures in a ModelResult."""
        try:
            instance = cls.create(**data)
        except ValidationError as exc:
            return ModelResult(ok=False, model_type=cls.__name__, violations=exc.violations)
        return ModelResult(ok=True, model_type=cls.__name__, instance=instance)

    @classmethod
    def read_json(
        cls,
        filename: str | os.PathLike[str],
        *,
        validate: bool = True,
    ) -> Self:
        """Load an instance from a JSON file, validating it by default."""
        return ModelIO().read_from_file(filename, cls, validate=validate)

    def dump_json(self, indent: int = 0) -> str:
        """Return this instance as JSON text (compact when *indent* <= 0)."""
        return ModelIO().to_json_text(self, indent)

    def write_json(self, filename: str | os.PathLike[str], indent: int = 0) -> bool:
        """Write this instance to a JSON file. Returns False on failure."""
        return ModelIO().write_to_file(self, filename, indent)

    def check_rules(self) -> None:
        """Raise :class:`ValidationError` if any declared rule fails."""
        ModelIO().validate(self)

    def __str__(self) -> str:
        name = type(self).__name__
        try:
            return name + self.dump_json(0)
        except Exception as exc:
            return f"{name}{{{exc}}}"
