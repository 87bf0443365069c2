from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Tuple

from gradnoise.safe_parse import to_color, to_float, to_int

logger = logging.getLogger(__name__)


@dataclass
class NoiseSettings:
    """Tweakable defaults for sampling and rendering noise fields.

    The CLI starts from these values; a JSON settings file can override any
    of them without touching code.
    """

    # fBm layering
    octaves: int = 4
    falloff: float = 0.5

    # Field sampling: noise-space units per pixel
    scale: float = 0.02
    width: int = 256
    height: int = 256

    # Colour ramp endpoints for rendered fields (background colour of the sketches)
    low_color: Tuple[int, int, int] = (26, 32, 38)
    high_color: Tuple[int, int, int] = (255, 255, 255)


# Defaults used when no settings file is given
SETTINGS = NoiseSettings()


def _coerce(name: str, value: Any, current: Any) -> Any:
    if name in ("octaves", "width", "height"):
        return to_int(value, default=current)
    if name in ("falloff", "scale"):
        return to_float(value, default=current)
    return to_color(value, default=current)


def settings_from_dict(data: Dict[str, Any], base: NoiseSettings = SETTINGS) -> NoiseSettings:
    """Return a copy of ``base`` with the recognised keys of ``data`` applied."""
    known = {f.name for f in fields(NoiseSettings)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("settings: ignoring unknown key %r", key)
            continue
        overrides[key] = _coerce(key, value, getattr(base, key))
    return replace(base, **overrides)


def load_settings(path: str, base: NoiseSettings = SETTINGS) -> NoiseSettings:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings must be a JSON object, got {type(data).__name__}")
    settings = settings_from_dict(data, base)
    logger.info("Loaded settings from %s", path)
    return settings
