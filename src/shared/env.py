"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Resolve environment variables that follow Docker secret conventions.

    For every KEY_FILE entry (e.g. DATASTORE_URL_FILE holding a URL with
    credentials), read the referenced file and expose its contents via KEY
    unless KEY is already set. Unreadable files are logged and skipped.
    """

    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


# Resolve on import so settings see the values.
load_secret_file_variables()
