import pytest

from core import queries
from core.models import ComponentDetail, RegistryIndex

from conftest import BUTTON_DETAIL, CARD_DETAIL, INDEX, make_index, summary


@pytest.fixture
def index():
    return RegistryIndex.model_validate(INDEX)


def names(components):
    return [c.name for c in components]


class TestFilterComponents:
    def test_empty_query_returns_everything_in_order(self, index):
        result = queries.filter_components(index, "")

        assert names(result.results) == ["button", "toggle-button", "card", "link", "textarea"]
        assert result.total == len(INDEX["components"])
        assert result.query == ""
        assert result.filters.category is None
        assert result.filters.featured is None

    def test_whitespace_query_is_no_text_filter(self, index):
        result = queries.filter_components(index, "   ", category="action")

        assert names(result.results) == ["button", "toggle-button", "link"]

    def test_category_featured_and_text_compose(self, index):
        result = queries.filter_components(index, "but", category="action", featured=True)

        assert names(result.results) == ["button"]
        assert result.total == 1
        assert result.filters.category == "action"
        assert result.filters.featured is True

    def test_text_match_is_case_insensitive_across_fields(self, index):
        result = queries.filter_components(index, "BUTTON")

        # name, title and description all count; "card" matches on description
        assert names(result.results) == ["button", "toggle-button", "card"]

    def test_featured_false_is_a_filter(self, index):
        result = queries.filter_components(index, "", featured=False)

        assert names(result.results) == ["toggle-button", "textarea"]

    def test_unknown_category_matches_nothing(self, index):
        assert queries.filter_components(index, "", category="charts").total == 0


class TestCategories:
    def test_components_in_unknown_category(self, index):
        result = queries.components_in_category(index, "nonexistent")

        assert result.category == "nonexistent"
        assert result.category_info is None
        assert result.components == []
        assert result.total == 0

    def test_components_in_category_keeps_order(self, index):
        result = queries.components_in_category(index, "action")

        assert names(result.components) == ["button", "toggle-button", "link"]
        assert result.category_info.title == "Action"
        assert result.total == 3

    def test_described_category_without_components_still_has_info(self, index):
        result = queries.components_in_category(index, "feedback")

        assert result.category_info is not None
        assert result.components == []

    def test_summarize_counts_including_zero(self):
        index = RegistryIndex.model_validate(make_index(
            [
                summary("input", "Input", "Text input", ["forms"], False),
                summary("select", "Select", "Pick one", ["forms"], True),
            ],
            ["forms", "display"],
        ))

        listing = queries.summarize_categories(index)

        assert listing.categories["forms"].count == 2
        assert listing.categories["display"].count == 0
        assert listing.categories["forms"].title == "Forms"
        assert listing.total == 2

    def test_summarize_ignores_undescribed_keys(self):
        index = RegistryIndex.model_validate(make_index(
            [summary("chart", "Chart", "Bars", ["charts", "display"], False)],
            ["display"],
        ))

        listing = queries.summarize_categories(index)

        assert set(listing.categories) == {"display"}
        assert listing.categories["display"].count == 1

    def test_dumped_listing_uses_wire_names(self, index):
        dumped = queries.components_in_category(index, "nonexistent").model_dump(by_alias=True)

        assert dumped["categoryInfo"] is None


class TestFeaturedAndInfo:
    def test_featured_components_in_order(self, index):
        result = queries.featured_components(index)

        assert names(result.components) == ["button", "card", "link"]
        assert result.total == 3

    def test_registry_info_stats(self, index):
        info = queries.registry_info(index)

        assert info.registry is index
        assert info.stats.total_components == 5
        assert info.stats.featured_components == 3
        assert info.stats.categories_count == 5
        assert info.stats.last_updated == "2025-01-15"

    def test_last_updated_is_none_without_meta(self):
        index = RegistryIndex.model_validate(make_index([], ["forms"]))

        info = queries.registry_info(index)

        assert info.stats.last_updated is None
        assert info.model_dump(by_alias=True)["stats"]["lastUpdated"] is None


class TestFetchingWrappers:
    @pytest.mark.asyncio
    async def test_queries_share_one_index_fetch(self, client, registry_stub):
        search = await queries.search_components(client, "link")
        categories = await queries.get_categories(client)
        featured = await queries.get_featured_components(client)
        by_category = await queries.get_components_by_category(client, "forms")
        info = await queries.get_registry_info(client)

        assert names(search.results) == ["link"]
        assert categories.categories["action"].count == 3
        assert featured.total == 3
        assert names(by_category.components) == ["textarea"]
        assert info.stats.total_components == 5
        assert registry_stub.count("index.json") == 1


class TestComponentFiles:
    def test_example_files_prefers_examples(self):
        component = ComponentDetail.model_validate(BUTTON_DETAIL)

        assert [f.path for f in queries.example_files(component)] == [
            "components/ui/button/button-example.tsx",
        ]

    def test_example_files_falls_back_to_main_source(self):
        component = ComponentDetail.model_validate(CARD_DETAIL)

        assert [f.name for f in queries.example_files(component)] == ["Card.tsx"]

    def test_example_files_matches_usage_case_insensitively(self):
        component = ComponentDetail.model_validate({
            **CARD_DETAIL,
            "files": [{"name": "Card.tsx", "content": ""}, {"name": "CardUsage.md", "content": ""}],
        })

        assert [f.name for f in queries.example_files(component)] == ["CardUsage.md"]

    def test_style_files(self):
        button = ComponentDetail.model_validate(BUTTON_DETAIL)
        card = ComponentDetail.model_validate(CARD_DETAIL)

        assert [f.path for f in queries.style_files(button)] == ["components/ui/button/Button.module.css"]
        assert [f.name for f in queries.style_files(card)] == ["Card.scss"]

    def test_dependency_names_from_map_list_or_nothing(self):
        assert queries.dependency_names(ComponentDetail.model_validate(BUTTON_DETAIL)) == ["clsx"]
        assert queries.dependency_names(ComponentDetail.model_validate(CARD_DETAIL)) == ["react"]
        no_deps = {k: v for k, v in CARD_DETAIL.items() if k != "dependencies"}
        assert queries.dependency_names(ComponentDetail.model_validate(no_deps)) == []

    def test_import_statement_uses_title_without_spaces(self):
        component = ComponentDetail.model_validate({**CARD_DETAIL, "title": "Hover Card"})

        assert queries.import_statement(component) == "import { HoverCard } from '@brutalist-ui/components'"
