"""Tests for theme merging."""

import copy

from tinky_theme.theme.merge import (
    deep_merge,
    extend_theme,
    merge_component_themes,
    merge_values,
)
from tinky_theme.theme.schemes import (
    ComponentTheme,
    Computed,
    Static,
    Theme,
)


class TestDeepMerge:
    """Tests for the generic deep merge."""

    def test_override_wins_and_keys_are_kept(self):
        """Conflicting keys take the override, one-sided keys survive."""
        merged = deep_merge(
            {"padding": 10, "backgroundColor": "blue"},
            {"backgroundColor": "red", "margin": 5},
        )
        assert merged == {"padding": 10, "backgroundColor": "red", "margin": 5}

    def test_nested_mappings_recurse(self):
        """Nested maps are merged key by key."""
        merged = deep_merge(
            {"border": {"style": "round", "color": "red"}},
            {"border": {"color": "green"}},
        )
        assert merged == {"border": {"style": "round", "color": "green"}}

    def test_lists_are_replaced(self):
        """Arrays are atomic values."""
        merged = deep_merge({"padding": [1, 2, 3]}, {"padding": [4]})
        assert merged == {"padding": [4]}

    def test_mapping_replaces_scalar(self):
        """A mapping override replaces a non-mapping base."""
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_result_does_not_alias_inputs(self):
        """Nested containers in the result are fresh copies."""
        base = {"border": {"color": "red"}, "sizes": [1, 2]}
        merged = deep_merge(base, {})

        assert merged == base
        assert merged is not base
        assert merged["border"] is not base["border"]
        assert merged["sizes"] is not base["sizes"]


class TestMergeValues:
    """Tests for merging tagged values."""

    def test_static_static_merges(self):
        merged = merge_values(Static({"a": 1}), Static({"b": 2}))
        assert merged == Static({"a": 1, "b": 2})

    def test_computed_override_replaces(self):
        """Functions are never merged into; the override wins."""
        fn = lambda p: {"color": "red"}
        merged = merge_values(Static({"a": 1}), Computed(fn))
        assert merged == Computed(fn)

    def test_static_override_replaces_computed(self):
        merged = merge_values(Computed(lambda p: {}), Static({"b": 2}))
        assert merged == Static({"b": 2})

    def test_absent_sides(self):
        """None is treated as absent."""
        assert merge_values(None, None) is None
        assert merge_values(Static({"a": 1}), None) == Static({"a": 1})
        assert merge_values(None, Static({"b": 2})) == Static({"b": 2})


class TestMergeComponentThemes:
    """Tests for merge_component_themes."""

    def test_merge_with_empty_is_equal_copy(self):
        """Merging with an empty override gives an equal, distinct theme."""
        fn = lambda p: {"color": "red"}
        base = ComponentTheme(
            styles={"root": {"padding": 10}, "label": fn},
            config={"size": "m"},
        )
        merged = merge_component_themes(base, ComponentTheme())

        assert merged == base
        assert merged is not base
        assert merged.styles is not base.styles
        assert merged.styles["root"].value is not base.styles["root"].value

    def test_override_precedence(self):
        """Override wins at shared paths, base survives elsewhere."""
        base = ComponentTheme(styles={
            "root": {"padding": 10, "backgroundColor": "blue"},
            "icon": {"color": "white"},
        })
        override = ComponentTheme(styles={"root": {"backgroundColor": "red", "margin": 5}})

        merged = merge_component_themes(base, override)

        assert merged.styles["root"] == Static(
            {"padding": 10, "backgroundColor": "red", "margin": 5}
        )
        assert merged.styles["icon"] == Static({"color": "white"})

    def test_config_merge(self):
        """Static config merges key by key."""
        merged = merge_component_themes(
            ComponentTheme(config={"size": "m", "icon": "dot"}),
            ComponentTheme(config={"size": "l"}),
        )
        assert merged.config == Static({"size": "l", "icon": "dot"})

    def test_dynamic_config_override_wins(self):
        fn = lambda p: {"size": "xl"}
        merged = merge_component_themes(
            ComponentTheme(config={"size": "m"}),
            ComponentTheme(config=fn),
        )
        assert merged.config == Computed(fn)

    def test_accepts_dicts(self):
        """Dict definitions are accepted on both sides."""
        merged = merge_component_themes(
            {"styles": {"root": {"a": 1}}},
            {"styles": {"root": {"b": 2}}},
        )
        assert merged.styles["root"] == Static({"a": 1, "b": 2})

    def test_inputs_not_mutated(self):
        """Neither input changes."""
        base = ComponentTheme(styles={"root": {"padding": 10, "border": {"color": "red"}}})
        override = ComponentTheme(styles={"root": {"border": {"color": "green"}}})
        base_before = copy.deepcopy(base)
        override_before = copy.deepcopy(override)

        merge_component_themes(base, override)

        assert base == base_before
        assert override == override_before


class TestExtendTheme:
    """Tests for extend_theme."""

    def test_merges_new_components(self):
        """Components from both themes are present."""
        base = Theme(components={"BaseComp": {"styles": {}}})

        custom = extend_theme(base, Theme(components={
            "Custom": {"styles": {"label": {"color": "red"}}},
        }))

        assert "Custom" in custom.components
        assert "BaseComp" in custom.components

    def test_deep_merges_component_styles(self):
        """Shared components are merged slot by slot."""
        base = Theme(components={
            "Button": {"styles": {"root": {"padding": 10, "backgroundColor": "blue"}}},
        })
        override = Theme(components={
            "Button": {"styles": {"root": {"backgroundColor": "red", "margin": 5}}},
        })

        merged = extend_theme(base, override)
        root = merged.components["Button"].styles["root"].value

        assert root["padding"] == 10
        assert root["margin"] == 5
        assert root["backgroundColor"] == "red"

    def test_function_styles_replace(self):
        """An override function replaces the base function."""
        base_fn = lambda p: {"color": "blue"}
        override_fn = lambda p: {"color": "red"}

        merged = extend_theme(
            Theme(components={"TestData": {"styles": {"root": base_fn}}}),
            Theme(components={"TestData": {"styles": {"root": override_fn}}}),
        )

        assert merged.components["TestData"].styles["root"].fn is override_fn

    def test_does_not_mutate_originals(self):
        """Input themes are left alone."""
        base = Theme(components={"A": {}})
        new = Theme(components={"B": {}})

        merged = extend_theme(base, new)

        assert merged is not base
        assert merged is not new
        assert "B" not in base.components
        assert "A" not in new.components

    def test_one_sided_components_are_copied(self):
        """A component from one side is equal but not shared."""
        base = Theme(components={"A": {"styles": {"root": {"color": "red"}}}})

        merged = extend_theme(base, Theme())

        assert merged.components["A"] == base.components["A"]
        assert merged.components["A"] is not base.components["A"]

    def test_layers_fold_left_to_right(self):
        """Later layers win over earlier ones."""
        merged = extend_theme(
            {"components": {"Box": {"styles": {"root": {"borderColor": "red"}}}}},
            {"components": {"Box": {"styles": {"root": {"borderColor": "green"}}}}},
            {"components": {"Box": {"styles": {"root": {"borderWidth": 2}}}}},
        )
        assert merged.components["Box"].styles["root"] == Static(
            {"borderColor": "green", "borderWidth": 2}
        )
