"""Tests for normalize_arguments."""

from types import SimpleNamespace

from plugin_error import normalize_arguments
from plugin_error.core.options import IGNORED_FIELDS, MERGE_FIELDS


class TestNormalizeArguments:
    """Tests for normalize_arguments."""

    def test_plugin_and_message___defaults_applied(self) -> None:
        opts = normalize_arguments("test", "something broke")

        assert opts == {
            "show_stack": False,
            "show_properties": True,
            "message": "something broke",
            "plugin": "test",
        }

    def test_options___layered_over_defaults(self) -> None:
        opts = normalize_arguments("test", "something broke", {"show_stack": True, "code": "E1"})

        assert opts["show_stack"] is True
        assert opts["show_properties"] is True
        assert opts["code"] == "E1"

    def test_exception_message___stored_as_error(self) -> None:
        error = ValueError("something broke")

        opts = normalize_arguments("test", error)

        assert opts["error"] is error
        assert "message" not in opts

    def test_object_with_message___stored_as_error(self) -> None:
        cause = SimpleNamespace(message="disk full")

        opts = normalize_arguments("test", cause)

        assert opts["error"] is cause
        assert "message" not in opts

    def test_object_without_message___stored_as_message(self) -> None:
        assert normalize_arguments("test", 404)["message"] == 404

    def test_mapping_message___merged(self) -> None:
        opts = normalize_arguments("test", {"message": "something broke", "line_number": 3})

        assert opts["message"] == "something broke"
        assert opts["line_number"] == 3
        assert opts["plugin"] == "test"

    def test_mapping_message___plugin_argument_wins(self) -> None:
        opts = normalize_arguments("test", {"message": "something broke", "plugin": "other"})

        assert opts["plugin"] == "test"

    def test_descriptor___overrides_defaults_and_ignores_message(self) -> None:
        opts = normalize_arguments({"plugin": "test", "message": "from descriptor", "show_properties": False}, "ignored")

        assert opts["plugin"] == "test"
        assert opts["message"] == "from descriptor"
        assert opts["show_properties"] is False

    def test_descriptor___options_below_descriptor(self) -> None:
        opts = normalize_arguments({"plugin": "test", "show_stack": False}, None, {"show_stack": True, "code": "E1"})

        assert opts["show_stack"] is False
        assert opts["code"] == "E1"

    def test_inputs___never_mutated(self) -> None:
        options = {"show_stack": True}
        message = {"message": "something broke"}

        opts = normalize_arguments("test", message, options)
        opts["extra"] = 1

        assert options == {"show_stack": True}
        assert message == {"message": "something broke"}

    def test_none_message___kept_for_validation(self) -> None:
        assert normalize_arguments("test")["message"] is None


class TestFieldSets:
    """Tests for the shared field sets."""

    def test_merge_fields___allow_list(self) -> None:
        assert set(MERGE_FIELDS) == {
            "plugin",
            "name",
            "message",
            "show_stack",
            "show_properties",
            "stack",
            "file_name",
            "line_number",
            "column_number",
            "cause",
            "code",
        }

    def test_ignored_fields___core_and_noise(self) -> None:
        assert {"message", "name", "stack", "_safety", "_stack", "plugin"} <= IGNORED_FIELDS
        assert {"domain", "domain_emitter", "domain_thrown"} <= IGNORED_FIELDS
        assert "file_name" not in IGNORED_FIELDS
