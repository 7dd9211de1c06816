"""Core types for plugin_error."""

from plugin_error.core.style_mode import StyleMode
from plugin_error.core.construction_error import ConstructionError
from plugin_error.core.colors import get_default_style, set_default_style
from plugin_error.core.options import normalize_arguments
from plugin_error.core.plugin_error import PluginError, create

__all__ = [
    "StyleMode",
    "ConstructionError",
    "get_default_style",
    "set_default_style",
    "normalize_arguments",
    "PluginError",
    "create",
]
