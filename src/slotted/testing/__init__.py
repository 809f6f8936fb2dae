from __future__ import annotations

from .corpus import generate_template_sources

__all__ = ["generate_template_sources"]
