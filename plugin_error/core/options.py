"""Argument normalization and the field sets shared by PluginError."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Fields a wrapped cause always contributes, present on its own or not
NON_ENUMERABLE_FIELDS = frozenset({"message", "name", "stack"})

# Fields that never appear in the Details section
IGNORED_FIELDS = NON_ENUMERABLE_FIELDS | frozenset(
    {
        "_safety",
        "_stack",
        "plugin",
        "show_properties",
        "show_stack",
        # injected by error-propagation wrappers
        "domain",
        "domain_emitter",
        "domain_thrown",
    }
)

# Diagnostic fields that read as None until set
DIAGNOSTIC_FIELDS = ("file_name", "line_number", "column_number", "cause", "code")

# Option keys copied onto a new record; anything else is dropped
MERGE_FIELDS: tuple[str, ...] = (
    "plugin",
    "name",
    "message",
    "show_stack",
    "show_properties",
    "stack",
) + DIAGNOSTIC_FIELDS

DEFAULT_OPTIONS: Mapping[str, Any] = {
    "show_stack": False,
    "show_properties": True,
}


def normalize_arguments(
    plugin: str | Mapping[str, Any] | None,
    message: str | BaseException | Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Fold the supported call shapes into a single options dictionary.

    Supported shapes:
        normalize_arguments("plugin", "message", {...})
        normalize_arguments("plugin", ValueError("message"), {...})
        normalize_arguments("plugin", obj_with_message_attribute)
        normalize_arguments("plugin", {"message": "...", ...})
        normalize_arguments({"plugin": "...", "message": "...", ...})

    None of the arguments is modified.

    Args:
        plugin: The plugin name, or a descriptor mapping holding every field.
        message: The message, a wrapped cause (an exception or any object with
            a message attribute), or a mapping of fields.
        options: Extra options layered over the defaults.

    Returns:
        A new options dictionary.
    """
    merged: dict[str, Any] = dict(DEFAULT_OPTIONS)
    if options:
        merged.update(options)

    if isinstance(plugin, Mapping):
        merged.update(plugin)
        return merged

    if _is_cause(message):
        merged["error"] = message
    elif isinstance(message, Mapping):
        merged.update(message)
    else:
        merged["message"] = message

    merged["plugin"] = plugin
    return merged


def _is_cause(value: Any) -> bool:
    """Exceptions and other non-mapping objects carrying a message are causes."""
    if isinstance(value, BaseException):
        return True
    if value is None or isinstance(value, (Mapping, str, bytes)):
        return False
    return hasattr(value, "message")
