"""Reads the two-line wiring config from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from calcdi.domain.exceptions import ConfigurationError, ResourceNotFound
from calcdi.domain.model.wiring_spec import WiringSpec

logger = logging.getLogger(__name__)


def read_wiring_spec(path: Path) -> WiringSpec:
    """Load a WiringSpec from a plain text file.

    Line 1 is the provider type name, line 2 (optional) the calculator
    type name. The file is read once, in full.
    """
    if not path.is_file():
        raise ResourceNotFound(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc

    spec = WiringSpec.parse(text)
    logger.debug(
        "Read wiring config",
        extra={"config_path": str(path), "step": "reading config"},
    )
    return spec
