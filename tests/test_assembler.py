"""Tests for the presentation assembler."""

from collections import Counter

import pytest

from inserter.assembler import PresentationAssembler
from inserter.grouping.suggestion_ranker import SuggestionRanker
from inserter.models.model_display import DisplayGroup, GroupKind
from inserter.models.model_item import Category, Collection, Item


@pytest.fixture
def assembler() -> PresentationAssembler:
    return PresentationAssembler()


def _summary(groups: list[DisplayGroup]) -> list[tuple[str, str, list[str]]]:
    return [(g.kind.value, g.key, g.item_names()) for g in groups]


class TestAssemble:
    """Tests for PresentationAssembler.assemble."""

    def test_full_layout(
        self,
        assembler: PresentationAssembler,
        sample_items: list[Item],
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        groups = assembler.assemble(sample_items, sample_categories, sample_collections)
        assert _summary(groups) == [
            (
                "suggested",
                "suggested",
                ["core/image", "core/paragraph", "acme/widget", "core/quote", "core/embed"],
            ),
            ("category", "media", ["core/image"]),
            ("category", "text", ["core/paragraph", "core/quote", "acme/widget"]),
            ("uncategorized", "uncategorized", ["core/embed"]),
            ("collection", "acme", ["acme/widget"]),
        ]

    def test_titles_icons_and_labels(
        self,
        assembler: PresentationAssembler,
        sample_items: list[Item],
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        groups = assembler.assemble(sample_items, sample_categories, sample_collections)
        by_key = {g.key: g for g in groups}
        assert by_key["suggested"].title == "Most used"
        assert by_key["uncategorized"].label == "Uncategorized"
        assert by_key["media"].title == "Media"
        assert by_key["media"].label == "Media"
        assert by_key["media"].icon == "format-image"
        assert by_key["acme"].title == "Acme Blocks"
        assert by_key["acme"].icon == "star-filled"

    def test_suggestions_disabled(
        self, assembler: PresentationAssembler, sample_items: list[Item]
    ) -> None:
        groups = assembler.assemble(sample_items, show_suggestions=False)
        assert GroupKind.SUGGESTED not in [g.kind for g in groups]

    def test_empty_catalog_yields_nothing(
        self,
        assembler: PresentationAssembler,
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        assert assembler.assemble([], sample_categories, sample_collections) == []

    def test_no_registries(self, assembler: PresentationAssembler, sample_items: list[Item]) -> None:
        groups = assembler.assemble(sample_items, [], None)
        assert [g.kind for g in groups] == [GroupKind.SUGGESTED, GroupKind.UNCATEGORIZED]

    def test_handlers_attached(
        self, assembler: PresentationAssembler, sample_items: list[Item]
    ) -> None:
        def on_select(item: Item) -> None:
            pass

        def on_hover(item: Item | None) -> None:
            pass

        groups = assembler.assemble(sample_items, on_select=on_select, on_hover=on_hover)
        assert groups
        assert all(g.on_select is on_select and g.on_hover is on_hover for g in groups)

    def test_custom_ranker(self, sample_items: list[Item]) -> None:
        assembler = PresentationAssembler(ranker=SuggestionRanker(max_items=1))
        groups = assembler.assemble(sample_items)
        assert groups[0].item_names() == ["core/image"]


class TestRestricted:
    """Tests for child-restricted contexts."""

    def test_single_child_group(
        self,
        assembler: PresentationAssembler,
        sample_items: list[Item],
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        groups = assembler.assemble(
            sample_items, sample_categories, sample_collections, restricted=True
        )
        assert len(groups) == 1
        assert groups[0].kind == GroupKind.CHILD
        assert groups[0].label == "Child Blocks"
        assert groups[0].item_names() == [item.name for item in sample_items]

    def test_child_group_emitted_even_when_empty(self, assembler: PresentationAssembler) -> None:
        groups = assembler.assemble([], restricted=True)
        assert len(groups) == 1
        assert groups[0].items == []

    def test_restriction_ignores_suggestion_flag(
        self, assembler: PresentationAssembler, sample_items: list[Item]
    ) -> None:
        groups = assembler.assemble(sample_items, restricted=True, show_suggestions=False)
        assert [g.kind for g in groups] == [GroupKind.CHILD]


class TestGroupingProperties:
    """Properties that hold for any catalog."""

    @pytest.fixture
    def mixed_items(self) -> list[Item]:
        return [
            Item(name="core/block", category="reusable", frecency=7),
            Item(name="core/paragraph", category="text", frecency=3),
            Item(name="plugin/orphan", category="unknown", frecency=3),
            Item(name="core/html", category="", frecency=1),
            Item(name="core/image", category="media", frecency=3),
            Item(name="core/embed", frecency=0),
            Item(name="acme/widget", category="text", frecency=2),
            Item(name="acme/slider", category="media", frecency=8),
        ]

    def test_deterministic(
        self,
        assembler: PresentationAssembler,
        mixed_items: list[Item],
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        first = assembler.assemble(mixed_items, sample_categories, sample_collections)
        second = assembler.assemble(mixed_items, sample_categories, sample_collections)
        assert _summary(first) == _summary(second)

    def test_category_and_uncategorized_are_exclusive(
        self,
        assembler: PresentationAssembler,
        mixed_items: list[Item],
        sample_categories: list[Category],
    ) -> None:
        groups = assembler.assemble(mixed_items, sample_categories)
        placed = Counter(
            name
            for g in groups
            if g.kind in (GroupKind.CATEGORY, GroupKind.UNCATEGORIZED)
            for name in g.item_names()
        )
        assert all(count == 1 for count in placed.values())
        assert "core/block" not in placed

    def test_completeness_modulo_reserved(self, assembler: PresentationAssembler) -> None:
        items = [
            Item(name="core/block", category="reusable"),
            Item(name="core/paragraph", category="text"),
            Item(name="core/image", category="media"),
            Item(name="core/embed"),
        ]
        categories = [
            Category(slug="text", title="Text"),
            Category(slug="media", title="Media"),
            Category(slug="reusable", title="Reusable"),
        ]
        groups = assembler.assemble(items, categories)
        placed = sorted(
            name
            for g in groups
            if g.kind in (GroupKind.CATEGORY, GroupKind.UNCATEGORIZED)
            for name in g.item_names()
        )
        assert placed == ["core/embed", "core/image", "core/paragraph"]

    def test_suggestion_bound_and_order(
        self, assembler: PresentationAssembler, mixed_items: list[Item]
    ) -> None:
        suggested = assembler.assemble(mixed_items)[0]
        assert suggested.kind == GroupKind.SUGGESTED
        assert len(suggested.items) == min(6, len(mixed_items))
        scores = [item.frecency for item in suggested.items]
        assert scores == sorted(scores, reverse=True)
        # Equal scores keep catalog order
        assert suggested.item_names()[2:5] == ["core/paragraph", "plugin/orphan", "core/image"]

    def test_no_empty_groups(
        self,
        assembler: PresentationAssembler,
        mixed_items: list[Item],
        sample_categories: list[Category],
    ) -> None:
        collections = {"acme": Collection(title="Acme"), "nobody": Collection(title="Nobody")}
        groups = assembler.assemble(mixed_items, sample_categories, collections)
        assert all(g.items for g in groups)
        assert "nobody" not in [g.key for g in groups]

    def test_item_can_appear_in_several_views(
        self,
        assembler: PresentationAssembler,
        mixed_items: list[Item],
        sample_categories: list[Category],
        sample_collections: dict[str, Collection],
    ) -> None:
        groups = assembler.assemble(mixed_items, sample_categories, sample_collections)
        kinds = [g.kind for g in groups if "acme/slider" in g.item_names()]
        assert kinds == [GroupKind.SUGGESTED, GroupKind.CATEGORY, GroupKind.COLLECTION]
