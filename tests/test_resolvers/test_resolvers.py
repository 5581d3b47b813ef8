"""Tests for rule and classname resolution."""

import pytest

from style_engine.errors import UnknownExpanderError
from style_engine.expanders import ExpanderRegistry
from style_engine.model import Expansion, StyleDefinition, freeze_schema
from style_engine.paths import lookup
from style_engine.resolvers import expand_value, resolve_classnames, resolve_rules
from style_engine.schema import BLOCK_STYLE_DEFINITIONS


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _schema(**entries: StyleDefinition):
    """Build a single-category schema named 'test'."""
    return freeze_schema({"test": entries})


def _registry(**expanders) -> ExpanderRegistry:
    registry = ExpanderRegistry()
    for handler_id, expander in expanders.items():
        registry.register(handler_id, expander)
    return registry


# ---------------------------------------------------------------------------
# resolve_rules
# ---------------------------------------------------------------------------


class TestResolveRules:
    @pytest.mark.parametrize("tree", [{}, None, [], ""])
    def test_empty_tree(self, tree):
        assert resolve_rules(BLOCK_STYLE_DEFINITIONS, tree) == {}

    def test_scalar_value(self):
        tree = {"typography": {"fontSize": "2em"}}
        assert resolve_rules(BLOCK_STYLE_DEFINITIONS, tree) == {"font-size": "2em"}

    def test_box_model_value(self):
        tree = {"spacing": {"padding": {"top": "10px", "left": "5px"}}}
        rules = resolve_rules(BLOCK_STYLE_DEFINITIONS, tree)
        assert rules == {"padding-top": "10px", "padding-left": "5px"}
        assert list(rules) == ["padding-top", "padding-left"]

    def test_schema_order(self):
        tree = {
            "typography": {"lineHeight": "1.5", "fontSize": "2em"},
            "spacing": {"margin": "1em", "padding": "2em"},
        }
        rules = resolve_rules(BLOCK_STYLE_DEFINITIONS, tree)
        assert list(rules) == ["padding", "margin", "font-size", "line-height"]

    def test_unknown_paths_ignored(self):
        tree = {"color": {"text": "red"}, "typography": {"fontSize": "1em", "bogus": "x"}}
        assert resolve_rules(BLOCK_STYLE_DEFINITIONS, tree) == {"font-size": "1em"}

    def test_malformed_branch_ignored(self):
        tree = {"spacing": "1em", "typography": ["not", "a", "mapping"]}
        assert resolve_rules(BLOCK_STYLE_DEFINITIONS, tree) == {}

    @pytest.mark.parametrize("value", ["", 0, "0", False, None, {}])
    def test_falsy_values_skipped(self, value):
        tree = {"typography": {"letterSpacing": value}}
        assert resolve_rules(BLOCK_STYLE_DEFINITIONS, tree) == {}

    @pytest.mark.parametrize("value", [0, "0"])
    def test_render_zero(self, value):
        tree = {"typography": {"letterSpacing": value}}
        rules = resolve_rules(BLOCK_STYLE_DEFINITIONS, tree, render_zero=True)
        assert rules == {"letter-spacing": "0"}

    def test_last_write_wins(self):
        schema = _schema(
            a=StyleDefinition("margin", ("a",)),
            b=StyleDefinition("margin", ("b",)),
        )
        assert resolve_rules(schema, {"a": "1px", "b": "2px"}) == {"margin": "2px"}

    def test_overlapping_box_subkeys(self):
        schema = _schema(
            a=StyleDefinition("margin", ("a",)),
            b=StyleDefinition("margin-top", ("b",)),
        )
        rules = resolve_rules(schema, {"a": {"top": "1px"}, "b": "3px"})
        assert rules == {"margin-top": "3px"}

    def test_box_model_expansion(self):
        schema = _schema(
            m=StyleDefinition("margin", ("m",), expansion=Expansion.BOX_MODEL),
        )
        rules = resolve_rules(schema, {"m": {"top": "1px", "start": "2px"}})
        assert rules == {"margin-top": "1px"}

    def test_custom_expansion(self):
        calls = []

        def double(value, prop):
            calls.append((value, prop))
            return {prop: f"calc({value} * 2)"}

        schema = _schema(
            g=StyleDefinition("gap", ("g",), expansion=Expansion.CUSTOM, handler_id="double"),
        )
        rules = resolve_rules(schema, {"g": "4px"}, _registry(double=double))
        assert rules == {"gap": "calc(4px * 2)"}
        assert calls == [("4px", "gap")]

    def test_custom_expansion_without_registry(self):
        schema = _schema(
            g=StyleDefinition("gap", ("g",), expansion=Expansion.CUSTOM, handler_id="double"),
        )
        assert resolve_rules(schema, {"g": "4px"}) == {}

    def test_unregistered_custom_expander_skipped(self):
        schema = _schema(
            g=StyleDefinition("gap", ("g",), expansion=Expansion.CUSTOM, handler_id="x"),
            m=StyleDefinition("margin", ("m",)),
        )
        rules = resolve_rules(schema, {"g": "1px", "m": "2px"}, ExpanderRegistry())
        assert rules == {"margin": "2px"}

    def test_custom_lookup(self):
        seen = []

        def fake_lookup(tree, path):
            seen.append(tuple(path))
            return "9px" if path == ("spacing", "margin") else None

        rules = resolve_rules(BLOCK_STYLE_DEFINITIONS, {"x": 1}, lookup_func=fake_lookup)
        assert rules == {"margin": "9px"}
        assert len(seen) == 10

    def test_idempotent(self):
        tree = {"spacing": {"padding": {"top": "1px"}}, "typography": {"fontSize": "2em"}}
        first = resolve_rules(BLOCK_STYLE_DEFINITIONS, tree)
        second = resolve_rules(BLOCK_STYLE_DEFINITIONS, tree)
        assert first == second
        assert first is not second

    def test_input_not_mutated(self):
        tree = {"spacing": {"padding": {"top": "1px"}}}
        resolve_rules(BLOCK_STYLE_DEFINITIONS, tree)
        assert tree == {"spacing": {"padding": {"top": "1px"}}}


class TestExpandValue:
    def test_unregistered_custom_is_empty(self):
        definition = StyleDefinition("gap", ("g",), expansion=Expansion.CUSTOM, handler_id="nope")
        assert expand_value(definition, "1px", ExpanderRegistry()) == {}

    def test_registry_resolve_still_raises(self):
        with pytest.raises(UnknownExpanderError):
            ExpanderRegistry().resolve("nope")

    def test_default(self):
        definition = StyleDefinition("margin", ("m",))
        assert expand_value(definition, {"left": "1px"}) == {"margin-left": "1px"}


# ---------------------------------------------------------------------------
# resolve_classnames
# ---------------------------------------------------------------------------


class TestResolveClassnames:
    def test_empty_tree(self):
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, {}) == []

    def test_font_size(self):
        tree = {"typography": {"fontSize": "2em"}}
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == ["has-2em-font-size"]

    def test_kebab_cased(self):
        tree = {"typography": {"fontSize": "xLarge", "fontFamily": "Open Sans"}}
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == [
            "has-x-large-font-size",
            "has-open-sans-font-family",
        ]

    def test_entries_without_template_use_value(self):
        tree = {
            "typography": {"fontSize": "large", "fontStyle": "italic", "textTransform": "upperCase"},
        }
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == [
            "has-large-font-size",
            "italic",
            "upper-case",
        ]

    def test_scalar_spacing_value_used_verbatim(self):
        tree = {"spacing": {"margin": "1em"}, "typography": {"fontWeight": "bold"}}
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == ["1em", "bold"]

    def test_zero_skipped_unless_rendered(self):
        tree = {"typography": {"letterSpacing": "0"}}
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == []
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree, render_zero=True) == ["0"]

    def test_box_model_value_has_no_classname(self):
        schema = _schema(p=StyleDefinition("padding", ("p",), "has-%s-padding"))
        assert resolve_classnames(schema, {"p": {"top": "1px"}}) == []

    def test_duplicates_preserved(self):
        schema = _schema(
            a=StyleDefinition("font-size", ("size",), "is-%s"),
            b=StyleDefinition("font-family", ("size",), "is-%s"),
        )
        assert resolve_classnames(schema, {"size": "big"}) == ["is-big", "is-big"]

    def test_stub_kebab(self):
        tree = {"typography": {"fontSize": "Huge"}}
        result = resolve_classnames(
            BLOCK_STYLE_DEFINITIONS, tree, kebab_func=lambda v: f"<{v}>"
        )
        assert result == ["has-<Huge>-font-size"]

    def test_stub_lookup(self):
        result = resolve_classnames(
            BLOCK_STYLE_DEFINITIONS,
            {"any": "thing"},
            lookup_func=lambda tree, path: "small" if path[-1] == "fontFamily" else None,
        )
        assert result == ["has-small-font-family"]

    def test_uses_real_lookup_semantics(self):
        tree = {"typography": {"fontSize": "small"}}
        assert lookup(tree, ("typography", "fontSize")) == "small"
        assert resolve_classnames(BLOCK_STYLE_DEFINITIONS, tree) == ["has-small-font-size"]
