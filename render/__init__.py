# render/__init__.py
# Package init for rendering modules

from .render_noise import render_field, ramp_palette, to_unit

__all__ = ["render_field", "ramp_palette", "to_unit"]
