"""ModelIO: JSON encode/decode, file round-trips and rule validation.

Works on any pydantic ``BaseModel``; :class:`structmodel.model.StructModel`
only adds convenience methods on top of it. Pydantic does the object-graph
mapping (nested models, lists, ISO-8601 timestamps) and the error
aggregation; this module wires it to the filesystem and to the rules in
:mod:`structmodel.domain.rules`.

INVARIANT: the two directions report failure differently.
``write_to_file`` never raises for resolution, encoding or write errors: it
logs the cause and returns ``False``. ``read_from_file`` and ``validate``
raise typed errors from :mod:`structmodel.errors`.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

import pydantic
from pydantic import BaseModel, TypeAdapter

from structmodel.config.settings import StructSettings
from structmodel.domain.results import Violation
from structmodel.domain.rules import RULE_ERROR_TYPE, Rule, declares_rules, rules_context
from structmodel.errors import DecodeError, EncodeError, PathError, ValidationError
from structmodel.infrastructure.paths import resolve_filepath

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pydantic_core import ErrorDetails

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def format_field_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``"items[0].name"``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def _to_violation(error: ErrorDetails, prefix: tuple[int | str, ...]) -> Violation:
    return Violation(
        field_path=format_field_path((*prefix, *error["loc"])), message=error["msg"]
    )


@functools.cache
def _rule_adapter(model_type: type[BaseModel], name: str) -> TypeAdapter[Any] | None:
    """Validator for one field's declared type and rules; None if it has no rules."""
    info = model_type.model_fields[name]
    own_rules = any(isinstance(m, Rule) for m in info.metadata)
    if not own_rules and not declares_rules(info.annotation):
        return None
    if info.metadata:
        return TypeAdapter(Annotated[info.annotation, *info.metadata])
    return TypeAdapter(info.annotation)


def _iter_violations(
    instance: BaseModel, prefix: tuple[int | str, ...], active: set[int]
) -> Iterator[Violation]:
    # Field values are checked in place; the model itself is never re-validated.
    if id(instance) in active:
        return
    active.add(id(instance))
    model_type = type(instance)
    for name, info in model_type.model_fields.items():
        value = getattr(instance, name, None)
        loc = (*prefix, info.serialization_alias or info.alias or name)
        adapter = _rule_adapter(model_type, name)
        if adapter is not None:
            try:
                adapter.validate_python(value, context=rules_context())
            except pydantic.ValidationError as exc:
                for error in exc.errors(include_url=False):
                    if error["type"] == RULE_ERROR_TYPE:
                        yield _to_violation(error, loc)
        yield from _iter_nested(value, loc, active)
    active.discard(id(instance))


def _iter_nested(
    value: Any, loc: tuple[int | str, ...], active: set[int]
) -> Iterator[Violation]:
    if isinstance(value, BaseModel):
        yield from _iter_violations(value, loc, active)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _iter_nested(item, (*loc, index), active)
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _iter_nested(item, (*loc, str(key)), active)


class ModelIO:
    """Encode, decode, persist and validate pydantic models.

    Usage::

        io = ModelIO()
        io.write_to_file(user, "user.json", indent_width=4)
        user = io.read_from_file("user.json", ExampleUser)
    """

    def __init__(self, settings: StructSettings | None = None) -> None:
        self._settings = settings if settings is not None else StructSettings.load()

    @property
    def settings(self) -> StructSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def to_json_text(self, instance: BaseModel, indent_width: int | None = None) -> str:
        """Encode *instance* as JSON text.

        ``indent_width <= 0`` yields compact JSON with no inserted
        whitespace. A positive width pretty-prints with that many spaces
        per nesting level. ``None`` falls back to ``settings.default_indent``.
        String values are never reformatted.

        Raises:
            EncodeError: The value graph is cyclic or holds a type that has
                no JSON representation.
        """
        if not isinstance(instance, BaseModel):
            msg = f"Unable to serialize {type(instance).__name__}: not a pydantic model"
            raise EncodeError(msg)
        if indent_width is None:
            indent_width = self._settings.default_indent

        try:
            if indent_width <= 0:
                return instance.model_dump_json(by_alias=True)
            return instance.model_dump_json(by_alias=True, indent=indent_width)
        except (ValueError, TypeError) as exc:
            msg = f"Unable to serialize {type(instance).__name__} to JSON: {exc}"
            raise EncodeError(msg) from exc

    def from_json_text(
        self,
        text: str | bytes,
        model_type: type[M],
        *,
        validate: bool = False,
    ) -> M:
        """Decode *text* into a *model_type* instance.

        Rules are not applied during decoding; pass ``validate=True`` to
        run :meth:`validate` on the result.

        Raises:
            DecodeError: Malformed JSON, or JSON that does not fit *model_type*.
            ValidationError: ``validate=True`` and a rule failed.
        """
        try:
            instance = model_type.model_validate_json(text)
        except pydantic.ValidationError as exc:
            msg = f"Unable to deserialize JSON into {model_type.__name__}: {exc}"
            raise DecodeError(msg) from exc

        if validate:
            self.validate(instance)
        return instance

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def write_to_file(
        self,
        instance: BaseModel,
        filename: str | os.PathLike[str],
        indent_width: int | None = None,
    ) -> bool:
        """Serialize *instance* to *filename*, overwriting any existing file.

        Parent directories are not created. Returns ``False`` (after logging
        the cause) if the path cannot be resolved, the model cannot be
        encoded, or the write fails.
        """
        try:
            path = resolve_filepath(
                filename, must_exist=False, suffix=self._settings.json_suffix
            )
        except PathError as exc:
            logger.error("Unable to resolve filepath %s: %s", filename, exc)
            return False
        logger.debug("Serializing to: %s", path)

        try:
            text = self.to_json_text(instance, indent_width)
        except EncodeError as exc:
            logger.error("Unable to serialize to JSON with error %s", exc)
            return False

        try:
            path.write_text(text, encoding=self._settings.encoding)
        except (OSError, ValueError, LookupError) as exc:
            logger.error("Unable to write JSON to %s: %s", path, exc)
            return False

        logger.info("Serialized to JSON at %s", path)
        return True

    def read_from_file(
        self,
        filename: str | os.PathLike[str],
        model_type: type[M],
        *,
        validate: bool | None = None,
    ) -> M:
        """Deserialize the JSON file at *filename* into *model_type*.

        The file must exist and be a regular file. The decoded instance is
        validated unless *validate* is False (``None`` uses
        ``settings.validate_on_read``).

        Raises:
            PathError: The file is missing or not a regular file.
            OSError: The file could not be read.
            DecodeError: The content is not valid JSON for *model_type*.
            ValidationError: A rule failed on the decoded instance.
        """
        path = resolve_filepath(filename, must_exist=True, suffix=self._settings.json_suffix)

        try:
            text = path.read_text(encoding=self._settings.encoding)
        except UnicodeDecodeError as exc:
            msg = f"Unable to decode {path} as {self._settings.encoding}: {exc}"
            raise DecodeError(msg) from exc

        if validate is None:
            validate = self._settings.validate_on_read
        instance = self.from_json_text(text, model_type, validate=validate)
        logger.debug("Deserialized %s from %s", model_type.__name__, path)
        return instance

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def check(self, instance: BaseModel) -> list[Violation]:
        """Run every rule on *instance* and return all violations.

        Nested models, list items and dict values are checked too. Only
        rule failures are reported; fields whose values do not fit their
        declared types (e.g. after ``model_construct``) are not. Nothing is
        logged or raised; an empty list means valid.
        """
        return list(_iter_violations(instance, (), set()))

    def validate(self, instance: BaseModel) -> None:
        """Raise :class:`ValidationError` if any rule fails on *instance*.

        Every violation is collected and logged before raising. Calling
        this again re-runs the rules; nothing is cached on the instance.
        """
        violations = self.check(instance)
        if not violations:
            return

        model_name = type(instance).__name__
        for violation in violations:
            logger.error(
                "Validation failed for %s.%s: %s",
                model_name,
                violation.field_path,
                violation.message,
            )
        raise ValidationError(model_name, violations)
