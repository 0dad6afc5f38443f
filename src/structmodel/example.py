"""Example model and walkthrough used by ``structmodel example``."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from typing import Annotated

from pydantic import Field

from structmodel.domain.rules import Pattern
from structmodel.errors import ValidationError
from structmodel.model import StructModel

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ExampleUser(StructModel):
    """A user with a name, birth year, favorite food and creation time."""

    name: str
    birthyear: int
    favorite_food: Annotated[
        str,
        Pattern(r"^(?!Revenge$).*$", message="favoriteFood must not be 'Revenge'"),
    ]
    generated_time: datetime = Field(default_factory=_utcnow)


def run_example(filename: str | os.PathLike[str] = "user.json") -> list[str]:
    """Write a valid user, read it back, then show a rejected one.

    Returns the lines describing each step, in order.
    """
    lines: list[str] = []

    user = ExampleUser.create(name="Arthur", birthyear=1863, favorite_food="Bear")
    if not user.write_json(filename, indent=4):
        lines.append(f"Unable to serialize {user.name} to {filename}")
        return lines
    lines.append(f"Successfully serialized to JSON: {user.dump_json(4)}")

    loaded = ExampleUser.read_json(filename)
    lines.append(f"Successfully deserialized from JSON: {loaded.dump_json(4)}")

    try:
        bad_user = ExampleUser.create(name="Micah", birthyear=1860, favorite_food="Revenge")
        lines.append(f"Somehow {bad_user.name} returned.")
    except ValidationError as exc:
        logger.debug("Example rejection: %s", exc)
        lines.append(f"Micah has been stopped in his tracks (this is a good thing!) {exc}")

    return lines
