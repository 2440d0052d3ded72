# =============================================================================
# core/queries.py  —  Query Layer over the Registry Index
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers the catalog questions the tools ask: search, browse by category,
#   category counts, featured components, registry stats.
#
# THE SEPARATION OF "FETCH" AND "QUERY":
#   - The pure functions (filter_components, summarize_categories, ...) take
#     an already-fetched RegistryIndex and return a result model.  They are
#     deterministic and need no network.
#   - The async wrappers (search_components, get_categories, ...) fetch the
#     index through the RegistryClient first, then call the pure function.
#     Registry errors pass through them untouched.
#
# ORDERING:
#   Every result list keeps the index's original component order.  Nothing
#   is re-ranked.
#
# The bottom of the module has the small helpers the tools use to pick
# example files, style files and dependencies out of a ComponentDetail.
# =============================================================================

from typing import Optional

from core.models import (
    CategoryComponents,
    CategoryListing,
    CategorySummary,
    ComponentDetail,
    ComponentFile,
    FeaturedComponents,
    RegistryIndex,
    RegistryInfo,
    RegistryStats,
    SearchFilters,
    SearchResults,
)
from core.registry import RegistryClient


# =============================================================================
# PURE QUERIES
# =============================================================================
def filter_components(
    index: RegistryIndex,
    query: str,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
) -> SearchResults:
    """Filter the index by category, then featured flag, then text.

    The text filter is a case-insensitive substring match on name, title and
    description.  An empty or all-whitespace query matches everything that
    survived the first two filters.
    """
    results = list(index.components)

    if category:
        results = [c for c in results if category in c.categories]

    if featured is not None:
        results = [c for c in results if c.featured == featured]

    if query.strip():
        needle = query.lower()
        results = [
            c for c in results
            if needle in c.name.lower()
            or needle in c.title.lower()
            or needle in c.description.lower()
        ]

    return SearchResults(
        results=results,
        total=len(results),
        query=query,
        filters=SearchFilters(category=category, featured=featured),
    )


def components_in_category(index: RegistryIndex, category: str) -> CategoryComponents:
    components = [c for c in index.components if category in c.categories]
    return CategoryComponents(
        category=category,
        category_info=index.categories.get(category),
        components=components,
        total=len(components),
    )


def summarize_categories(index: RegistryIndex) -> CategoryListing:
    """Every category in the index map, with how many components list it.

    Categories that no component lists still appear with ``count == 0``.
    Category keys that components list but the map lacks are ignored.
    """
    counts: dict[str, int] = {}
    for component in index.components:
        for key in component.categories:
            counts[key] = counts.get(key, 0) + 1

    categories = {
        key: CategorySummary(
            title=info.title,
            description=info.description,
            count=counts.get(key, 0),
        )
        for key, info in index.categories.items()
    }
    return CategoryListing(categories=categories, total=len(categories))


def featured_components(index: RegistryIndex) -> FeaturedComponents:
    components = [c for c in index.components if c.featured]
    return FeaturedComponents(components=components, total=len(components))


def registry_info(index: RegistryIndex) -> RegistryInfo:
    return RegistryInfo(
        registry=index,
        stats=RegistryStats(
            total_components=len(index.components),
            featured_components=sum(1 for c in index.components if c.featured),
            categories_count=len(index.categories),
            last_updated=index.meta.last_updated if index.meta else None,
        ),
    )


# =============================================================================
# FETCHING WRAPPERS
# =============================================================================
async def search_components(
    client: RegistryClient,
    query: str,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
) -> SearchResults:
    index = await client.fetch_registry_index()
    return filter_components(index, query, category, featured)


async def get_components_by_category(client: RegistryClient, category: str) -> CategoryComponents:
    index = await client.fetch_registry_index()
    return components_in_category(index, category)


async def get_categories(client: RegistryClient) -> CategoryListing:
    index = await client.fetch_registry_index()
    return summarize_categories(index)


async def get_featured_components(client: RegistryClient) -> FeaturedComponents:
    index = await client.fetch_registry_index()
    return featured_components(index)


async def get_registry_info(client: RegistryClient) -> RegistryInfo:
    index = await client.fetch_registry_index()
    return registry_info(index)


# =============================================================================
# COMPONENT FILE HELPERS
# =============================================================================
_STYLE_SUFFIXES = (".css", ".module.css", ".scss")


def _is_example(path: str) -> bool:
    return "example" in path or "demo" in path or "usage" in path.lower()


def example_files(component: ComponentDetail) -> list[ComponentFile]:
    """Example/demo files, or the main .tsx source when there are none."""
    examples = [f for f in component.files if _is_example(f.file_path)]
    if examples:
        return examples

    for f in component.files:
        if f.file_path.endswith(".tsx") and "example" not in f.file_path:
            return [f]
    return []


def style_files(component: ComponentDetail) -> list[ComponentFile]:
    return [f for f in component.files if f.file_path.endswith(_STYLE_SUFFIXES)]


def dependency_names(component: ComponentDetail) -> list[str]:
    """Dependencies as a flat list, whichever form the registry used."""
    deps = component.dependencies
    if deps is None:
        return []
    if isinstance(deps, dict):
        return list(deps.keys())
    return list(deps)


def import_statement(component: ComponentDetail) -> str:
    symbol = "".join((component.title or component.name).split())
    return f"import {{ {symbol} }} from '@brutalist-ui/components'"
