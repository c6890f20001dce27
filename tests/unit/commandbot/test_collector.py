"""Tests for argument collection."""

import pytest

from commandbot.commands.argument_types import ArgumentDeclaration
from commandbot.commands.collector import ArgumentCollector, CollectionResult
from commandbot.errors import ArgumentDeclarationError


class TestCollectorConstruction:
    """Declaration order and uniqueness rules."""

    def test_duplicate_key_fails(self, mock_bot, registry):
        """Two arguments cannot share a key."""
        with pytest.raises(ArgumentDeclarationError, match="already registered"):
            ArgumentCollector(
                mock_bot,
                [
                    {"key": "a", "label": "A", "type": "string"},
                    {"key": "a", "label": "Other A", "type": "string"},
                ],
            )

    def test_argument_after_infinite_fails(self, mock_bot, registry):
        """Nothing may follow an infinite argument."""
        with pytest.raises(ArgumentDeclarationError, match="infinite"):
            ArgumentCollector(
                mock_bot,
                [
                    {"key": "rest", "label": "Rest", "type": "string", "infinite": True},
                    {"key": "b", "label": "B", "type": "string"},
                ],
            )

    def test_optional_argument_after_infinite_fails(self, mock_bot, registry):
        """An optional argument after an infinite one is rejected too."""
        with pytest.raises(ArgumentDeclarationError, match="infinite"):
            ArgumentCollector(
                mock_bot,
                [
                    {"key": "rest", "label": "Rest", "type": "string", "infinite": True, "default": "x"},
                    {"key": "b", "label": "B", "type": "string", "default": "y"},
                ],
            )

    def test_required_after_optional_fails(self, mock_bot, registry):
        """Required arguments must come before optional ones."""
        with pytest.raises(ArgumentDeclarationError, match="Required arguments"):
            ArgumentCollector(
                mock_bot,
                [
                    {"key": "a", "label": "A", "type": "string", "default": "x"},
                    {"key": "b", "label": "B", "type": "string"},
                ],
            )

    def test_unknown_type_fails(self, mock_bot, registry):
        """Arguments must reference a registered type."""
        with pytest.raises(ArgumentDeclarationError, match="unknown type"):
            ArgumentCollector(mock_bot, [{"key": "a", "label": "A", "type": "colour"}])

    def test_args_must_be_a_list(self, mock_bot, registry):
        """A single declaration is not accepted in place of a list."""
        with pytest.raises(TypeError):
            ArgumentCollector(mock_bot, {"key": "a", "label": "A"})

    def test_bot_is_required(self):
        """The collector needs a bot to resolve types."""
        with pytest.raises(TypeError):
            ArgumentCollector(None, [])

    def test_accepts_declarations_and_mappings(self, mock_bot, registry):
        """Dataclass declarations and plain mappings can be mixed."""
        collector = ArgumentCollector(
            mock_bot,
            [
                ArgumentDeclaration("count", "Count", "integer"),
                {"key": "text", "label": "Text", "type": "string", "infinite": True, "default": "none"},
            ],
        )

        assert len(collector) == 2
        assert [arg.key for arg in collector] == ["count", "text"]
        assert collector.args[0].type is registry.find_type("integer")

    def test_usage(self, mock_bot, registry):
        """Usage marks required, optional and infinite arguments."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "target", "label": "Target", "type": "user"},
                {"key": "reason", "label": "Reason", "default": "none", "infinite": True},
            ],
        )

        assert collector.usage() == "<target> [reason...]"


class TestCollect:
    """Binding, defaulting, validation and parsing."""

    def test_positional_binding(self, mock_bot, registry, mock_context):
        """Tokens are bound left to right and parsed by type."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "count", "label": "Count", "type": "integer"},
                {"key": "loud", "label": "Loud", "type": "boolean"},
                {"key": "word", "label": "Word", "type": "string"},
            ],
        )

        result = collector.collect(mock_context, "repeat", ["3", "yes", "hello"])

        assert result.success is True
        assert result.failed is False
        assert result.values == {"count": 3, "loud": True, "word": "hello"}
        assert [item.raw for item in result.bound] == ["3", "yes", "hello"]

    @pytest.mark.parametrize(
        "tokens",
        [
            ["one"],
            ["one", "two"],
            ["one", "two", "three", "four", "five"],
        ],
    )
    def test_infinite_argument_captures_overflow(self, mock_bot, registry, mock_context, tokens):
        """The infinite argument receives every remaining token joined by spaces."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "first", "label": "First", "type": "string"},
                {"key": "rest", "label": "Rest", "type": "string", "infinite": True},
            ],
        )

        result = collector.collect(mock_context, "say", ["head", *tokens])

        assert result.success
        assert result.values["first"] == "head"
        assert result.values["rest"] == " ".join(tokens)

    def test_infinite_argument_without_tokens_is_missing(self, mock_bot, registry, mock_context):
        """An empty capture counts as missing."""
        collector = ArgumentCollector(
            mock_bot, [{"key": "text", "label": "Text", "type": "string", "infinite": True}]
        )

        result = collector.collect(mock_context, "say", [])

        assert result.failed
        assert "`Text`" in result.message

    def test_missing_argument(self, mock_bot, registry, mock_context):
        """An absent required argument fails with its label."""
        collector = ArgumentCollector(mock_bot, [{"key": "a", "label": "A", "type": "string", "default": None}])

        result = collector.collect(mock_context, "cmd", [])

        assert result.failed is True
        assert result.values is None
        assert "A" in result.message

    def test_missing_message_lists_every_label(self, mock_bot, registry, mock_context):
        """Missing labels are backtick-quoted and comma-joined."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "a", "label": "first", "type": "string"},
                {"key": "b", "label": "second", "type": "string"},
            ],
        )

        result = collector.collect(mock_context, "pair", [])

        assert result.message == "the command `pair` is invalid: missing arguments: `first`, `second`."

    def test_invalid_command_argument(self, mock_bot, registry, mock_context):
        """A value the type rejects is reported as invalid, not missing."""
        collector = ArgumentCollector(mock_bot, [{"key": "a", "label": "A", "type": "command", "default": None}])

        result = collector.collect(mock_context, "cmd", ["xyz"])

        assert result.failed is True
        assert result.message == "the command `cmd` is invalid: invalid arguments: `A`."

    def test_missing_is_reported_before_invalid(self, mock_bot, registry, mock_context):
        """Validation does not run while something is missing."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "n", "label": "Number", "type": "integer"},
                {"key": "s", "label": "Text", "type": "string"},
            ],
        )

        result = collector.collect(mock_context, "cmd", ["not-a-number"])

        assert "missing arguments: `Text`" in result.message
        assert "Number" not in result.message

    def test_command_name_taken_from_command(self, mock_bot, registry, mock_context, command_factory):
        """Failure messages name the command being collected for."""
        registry.register_command(command_factory("greet", args=[{"key": "who", "label": "Who"}]))
        command = registry.find_command("greet")

        result = command.args_collector.collect(mock_context, command, [])

        assert result.message.startswith("the command `greet` is invalid")

    def test_defaults_fill_absent_values(self, mock_bot, registry, mock_context):
        """Absent optional arguments take their default."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "word", "label": "Word", "type": "string"},
                {"key": "times", "label": "Times", "type": "integer", "default": 1},
            ],
        )

        result = collector.collect(mock_context, "repeat", ["hi"])

        assert result.values == {"word": "hi", "times": 1}
        assert result.bound[1].defaulted is True
        assert result.bound[1].raw is None

    @pytest.mark.parametrize(
        "type_id,default",
        [("boolean", False), ("integer", 0), ("command", "")],
    )
    def test_falsy_defaults_are_not_missing(self, mock_bot, registry, mock_context, type_id, default):
        """False, zero and empty-string defaults are real values."""
        collector = ArgumentCollector(
            mock_bot, [{"key": "opt", "label": "Option", "type": type_id, "default": default}]
        )

        result = collector.collect(mock_context, "cmd", [])

        assert result.success
        assert result.values == {"opt": default}

    def test_string_default_is_parsed(self, mock_bot, registry, mock_context):
        """A non-empty string default is parsed by the argument type."""
        collector = ArgumentCollector(
            mock_bot, [{"key": "times", "label": "Times", "type": "integer", "default": "5"}]
        )

        result = collector.collect(mock_context, "cmd", [])

        assert result.values == {"times": 5}
        assert result.bound[0].defaulted is True
        assert result.bound[0].raw is None

    def test_invalid_string_default_fails(self, mock_bot, registry, mock_context):
        """A string default the type rejects is reported as invalid."""
        collector = ArgumentCollector(
            mock_bot, [{"key": "cmd", "label": "Command", "type": "command", "default": "nosuch"}]
        )

        result = collector.collect(mock_context, "help", [])

        assert result.failed
        assert result.values is None
        assert result.message == "the command `help` is invalid: invalid arguments: `Command`."

    def test_given_value_overrides_default(self, mock_bot, registry, mock_context):
        """A supplied token is validated and parsed even when a default exists."""
        collector = ArgumentCollector(
            mock_bot, [{"key": "times", "label": "Times", "type": "integer", "default": 1}]
        )

        assert collector.collect(mock_context, "cmd", ["4"]).values == {"times": 4}
        assert collector.collect(mock_context, "cmd", ["four"]).failed

    def test_empty_token_counts_as_missing(self, mock_bot, registry, mock_context):
        """Empty tokens from the legacy tokenizer are treated as absent."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "a", "label": "A", "type": "string"},
                {"key": "b", "label": "B", "type": "string"},
            ],
        )

        result = collector.collect(mock_context, "cmd", ["x", ""])

        assert result.message == "the command `cmd` is invalid: missing arguments: `B`."

    def test_extra_tokens_are_ignored(self, mock_bot, registry, mock_context):
        """Tokens beyond the declared arguments are dropped."""
        collector = ArgumentCollector(mock_bot, [{"key": "a", "label": "A", "type": "string"}])

        result = collector.collect(mock_context, "cmd", ["x", "y", "z"])

        assert result.values == {"a": "x"}

    def test_given_tokens_are_not_mutated(self, mock_bot, registry, mock_context):
        """Collecting leaves the caller's token list intact."""
        collector = ArgumentCollector(
            mock_bot,
            [
                {"key": "a", "label": "A", "type": "string"},
                {"key": "b", "label": "B", "type": "string", "infinite": True},
            ],
        )
        tokens = ["x", "y", "z"]

        collector.collect(mock_context, "cmd", tokens)

        assert tokens == ["x", "y", "z"]

    def test_each_collect_returns_fresh_values(self, mock_bot, registry, mock_context):
        """Results from one invocation are not overwritten by the next."""
        collector = ArgumentCollector(mock_bot, [{"key": "a", "label": "A", "type": "string"}])

        first = collector.collect(mock_context, "cmd", ["one"])
        second = collector.collect(mock_context, "cmd", ["two"])

        assert first.values == {"a": "one"}
        assert second.values == {"a": "two"}
        assert not hasattr(collector.args[0], "value")

    def test_command_argument_parses_to_command(self, mock_bot, registry, mock_context, command_factory):
        """The command type resolves aliases to the registered command."""
        registry.register_command(command_factory("ping", aliases=["p"]))
        collector = ArgumentCollector(mock_bot, [{"key": "cmd", "label": "Command", "type": "command"}])

        result = collector.collect(mock_context, "help", ["P"])

        assert result.values["cmd"] is registry.find_command("ping")


class TestCollectionResult:
    """Result helpers."""

    def test_fail(self):
        result = CollectionResult.fail("nope")

        assert result.failed is True
        assert result.success is False
        assert result.message == "nope"
        assert result.values is None
        assert result.bound == ()

    def test_ok_keeps_declaration_order(self):
        from commandbot.commands.arguments import BoundArgument

        result = CollectionResult.ok([BoundArgument("b", "2", 2), BoundArgument("a", "1", 1)])

        assert result.success is True
        assert list(result.values) == ["b", "a"]
