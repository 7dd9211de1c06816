"""
plugin_error - Errors attributed to a named plugin, rendered for humans.

A PluginError records which plugin failed and why, optionally wrapping the
exception that caused it, and renders as a Message / Details / Stack report.

Example:
    from plugin_error import PluginError

    try:
        compile_assets()
    except OSError as exc:
        err = PluginError("build", exc, {"show_stack": True})
        err.file_name = "assets/site.css"
        print(err)

    # Plain output for log files
    from plugin_error import StyleMode, set_default_style

    set_default_style(StyleMode.NEVER)
"""

from plugin_error.core.style_mode import StyleMode
from plugin_error.core.construction_error import ConstructionError
from plugin_error.core.colors import get_default_style, set_default_style
from plugin_error.core.options import normalize_arguments
from plugin_error.core.plugin_error import PluginError, create

__version__ = "1.0.0"

__all__ = [
    # Core types
    "PluginError",
    "ConstructionError",
    "create",
    "normalize_arguments",
    # Styling
    "StyleMode",
    "get_default_style",
    "set_default_style",
]
