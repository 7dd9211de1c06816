"""Plugin error record: construction, cause import and rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from plugin_error.core.colors import cyan, red, should_style
from plugin_error.core.construction_error import ConstructionError
from plugin_error.core.options import (
    DIAGNOSTIC_FIELDS,
    IGNORED_FIELDS,
    MERGE_FIELDS,
    NON_ENUMERABLE_FIELDS,
    normalize_arguments,
)
from plugin_error.core.stack import capture_stack, exception_stack, sanitize_stack
from plugin_error.core.style_mode import StyleMode

logger = logging.getLogger(__name__)

# Attributes stored on the instance itself rather than in the details mapping
_CORE_FIELDS = frozenset({"plugin", "message", "name", "show_stack", "show_properties", "stack"})
_BOOL_FIELDS = frozenset({"show_stack", "show_properties"})

# Values that can never be a wrapped cause
_SCALARS = (str, bytes, int, float)


class PluginError(Exception):
    """
    Error attributed to a named plugin, rendered for terminals and logs.

    A PluginError can be built from a plugin name and a message, from a plugin
    name and a wrapped exception, or from a single descriptor mapping:

        PluginError("build", "compile failed")
        PluginError("build", exc, {"show_stack": True})
        PluginError("build", {"message": "compile failed", "code": "E42"})
        PluginError({"plugin": "build", "message": "compile failed"})

    Any public attribute that is not a core field is kept in the ordered
    ``details`` mapping and listed in the Details section of ``str(err)``,
    including attributes set after construction.

    Attributes:
        plugin: Name of the plugin the failure is attributed to.
        message: Human-readable error message.
        name: Error name, "Error" unless a wrapped exception supplies one.
        show_stack: Whether the rendered form includes the stack.
        show_properties: Whether the rendered form includes the details.
        stack: Stack text, supplied or captured at construction.
    """

    def __init__(
        self,
        plugin: str | Mapping[str, Any] | None,
        message: str | BaseException | Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Create a new PluginError.

        Args:
            plugin: The plugin name, or a descriptor mapping holding every field.
            message: The message, an exception to wrap, or a mapping of fields.
            options: show_stack, show_properties, stack, file_name, line_number,
                column_number, cause, code.

        Raises:
            ConstructionError: If the plugin name or the message is missing.
        """
        opts = normalize_arguments(plugin, message, options)
        super().__init__()

        self._details: dict[str, Any] = {}
        self._stack: str | None = None
        self._safety: str | None = None
        self.plugin = None
        self.name = "Error"
        self.message = None
        self.show_stack = False
        self.show_properties = True
        self.stack = None

        self.import_cause(opts)
        self.merge_options(opts)
        self._validate()

        self.args = (self.message,)
        self._add_stack_trace()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _BOOL_FIELDS:
            value = bool(value)
        if name.startswith("_") or name in _CORE_FIELDS or name == "args":
            super().__setattr__(name, value)
        else:
            self._details[name] = value

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if not name.startswith("_"):
            details = self.__dict__.get("_details", {})
            if name in details:
                return details[name]
            if name in DIAGNOSTIC_FIELDS:
                return None
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __delattr__(self, name: str) -> None:
        details = self.__dict__.get("_details", {})
        if name in details:
            del details[name]
        else:
            super().__delattr__(name)

    @property
    def details(self) -> dict[str, Any]:
        """
        Extra diagnostic fields in insertion order; callers may add to it.

        Assigning any public name other than a core field stores it here,
        including names of methods and of this property itself.
        """
        return self._details

    def import_cause(self, opts: Mapping[str, Any]) -> None:
        """
        Copy fields from the wrapped cause in ``opts["error"]`` onto this error.

        The message, name and stack are always taken, together with every
        field the cause carries and its cause and code. Does nothing when no
        cause object is present. The cause itself is left untouched.

        Args:
            opts: Normalized options.
        """
        error = opts.get("error")
        if error is None or isinstance(error, _SCALARS):
            return

        fields = _cause_fields(error)
        for key, value in fields.items():
            if key.startswith("_") or key in _CORE_FIELDS:
                setattr(self, key, value)
            else:
                self._details[key] = value
        logger.debug("Imported %d fields from %s", len(fields), type(error).__name__)

    def merge_options(self, opts: Mapping[str, Any], fields: Iterable[str] = MERGE_FIELDS) -> None:
        """
        Copy allow-listed options onto this error.

        Keys not listed in ``fields`` are ignored.

        Args:
            opts: Normalized options.
            fields: Names of the options to copy.
        """
        allowed = frozenset(fields)
        for key, value in opts.items():
            if key in allowed:
                setattr(self, key, value)

    def _validate(self) -> None:
        if not self.plugin:
            raise ConstructionError("Missing plugin name")
        if not self.message:
            raise ConstructionError("Missing error message")

    def _add_stack_trace(self) -> None:
        if self.stack or self._stack:
            return
        self._safety = capture_stack()
        self.stack = self._safety

    def format_properties(self) -> str:
        """
        Format the Details section.

        Returns:
            "\\nDetails:" followed by one indented ``key: value`` line per
            field, or "" if properties are hidden or nothing is left to show.
        """
        if not self.show_properties:
            return ""

        lines = [
            f"    {key}: {value}"
            for key, value in self._details.items()
            if key not in IGNORED_FIELDS and value is not None
        ]
        if not lines:
            return ""
        return "\nDetails:\n" + "\n".join(lines)

    def format_stack(self) -> str:
        """
        Format the Stack section.

        Internal interpreter frames are removed from ``stack`` in place.

        Returns:
            "\\nStack:" followed by the stack text, or "" if the stack is
            hidden or absent.
        """
        if not self.show_stack:
            return ""

        if self.stack:
            self.stack = sanitize_stack(str(self.stack))

        stack = self._safety or self._stack or self.stack
        if not stack:
            return ""
        return f"\nStack:\n    {sanitize_stack(str(stack))}"

    def format_message(self) -> str:
        """Format the Message section followed by the Details section."""
        return f"Message:\n    {self.message}{self.format_properties()}"

    def to_string(self, style: StyleMode | str | int | None = None) -> str:
        """
        Render the error.

        Args:
            style: Styling mode for the name and plugin; the process default
                applies when None.

        Returns:
            The signature line, the message, and the details and stack when enabled.
        """
        styled = should_style(style)
        signature = f'{red(self.name, styled)} in plugin "{cyan(self.plugin, styled)}"'
        return f"{signature}\n{self.format_message()}{self.format_stack()}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PluginError(plugin={self.plugin!r}, message={self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (type(self), dict(self.__dict__)))


def create(
    plugin: str | Mapping[str, Any] | None,
    message: str | BaseException | Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> PluginError:
    """
    Create a PluginError.

    Accepts the same call shapes as the PluginError constructor.

    Raises:
        ConstructionError: If the plugin name or the message is missing.
    """
    return PluginError(plugin, message, options)


def _cause_fields(error: Any) -> dict[str, Any]:
    """Collect the fields imported from a wrapped cause, own fields first."""
    if isinstance(error, Mapping):
        own = dict(error)
    else:
        own = dict(getattr(error, "__dict__", {}))
    own = {k: v for k, v in own.items() if isinstance(k, str) and (not k.startswith("_") or k == "_stack")}

    if isinstance(error, BaseException):
        derived = {
            "message": own.get("message") or _exception_message(error),
            "name": type(error).__name__,
            "stack": own.get("stack") or exception_stack(error),
            "cause": own.get("cause", error.__cause__),
            "code": own.get("code"),
        }
    else:
        derived = {key: own.get(key, getattr(error, key, None)) for key in ("message", "name", "stack", "cause", "code")}

    fields = dict(own)
    for key, value in derived.items():
        if value is not None:
            fields[key] = value
        elif key in NON_ENUMERABLE_FIELDS:
            fields.pop(key, None)
    return fields


def _exception_message(error: BaseException) -> str | None:
    # KeyError quotes its key in str()
    if len(error.args) == 1 and isinstance(error.args[0], str):
        return error.args[0] or None
    return str(error) or None


def _restore(cls: type[PluginError], state: dict[str, Any]) -> PluginError:
    error = cls.__new__(cls)
    error.__dict__.update(state)
    error.args = (state.get("message"),)
    return error
