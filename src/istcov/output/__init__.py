from .human import format_human
from .json import format_json
from .render import RenderOptions, render

__all__ = ["RenderOptions", "format_human", "format_json", "render"]
