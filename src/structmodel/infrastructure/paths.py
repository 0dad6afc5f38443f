"""Path resolution for model files.

Turns a user-supplied filename into an absolute :class:`~pathlib.Path`
before any I/O happens. Nothing here creates, deletes or modifies
filesystem entries.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from structmodel.errors import PathError

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"


def resolve_filepath(
    filename: str | os.PathLike[str],
    *,
    must_exist: bool,
    suffix: str = JSON_SUFFIX,
) -> Path:
    """Resolve *filename* to an absolute path, optionally checking it exists.

    - The path is made absolute whether or not the target exists.
    - A final segment not ending with *suffix* only logs a warning.
    - With ``must_exist=False`` no filesystem check happens, so a missing
      parent directory surfaces later, at write time.
    - With ``must_exist=True`` symlinks are resolved and the target must be
      a regular file.

    Raises:
        PathError: *filename* is not path-like, cannot be made absolute
            (e.g. the working directory is gone), cannot be canonicalized,
            or does not name a regular file.
    """
    try:
        path = Path(filename).absolute()
    except (TypeError, ValueError, OSError) as exc:
        msg = f"Unable to interpret {filename!r} as a filepath"
        raise PathError(msg) from exc

    if not path.name.endswith(suffix):
        logger.warning("The filename specified (%s) does not end with %s", path, suffix)

    if not must_exist:
        return path

    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        msg = f"Unexpected error resolving filepath {filename}"
        raise PathError(msg) from exc

    if not resolved.is_file():
        msg = f"Filepath ({resolved}) is not a file"
        raise PathError(msg)

    logger.debug("Resolved %s to %s", filename, resolved)
    return resolved
