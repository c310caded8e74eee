"""Locate the repository root holding the module map."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from depcalc.errors import ConfigurationMissingError


ROOT_ENV_VARS = ("DEPCALC_ROOT", "YUI3_PATH")


def find_root(explicit: str | Path | None = None, environ: Mapping[str, str] | None = None) -> Path:
    """Return the explicit root, else the first root environment variable set."""
    if explicit:
        return Path(explicit)

    environ = os.environ if environ is None else environ
    for name in ROOT_ENV_VARS:
        value = environ.get(name)
        if value:
            return Path(value)

    raise ConfigurationMissingError(
        "Please specify the path to your repository with --root, "
        f"or set one of: {', '.join('$' + name for name in ROOT_ENV_VARS)}"
    )
