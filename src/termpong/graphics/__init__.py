"""Graphics module for termpong rendering."""

from termpong.graphics.renderer import Renderer, format_score

__all__ = [
    "Renderer",
    "format_score",
]
