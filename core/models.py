# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of models live here:
#
#   1. REGISTRY DOCUMENTS (pydantic).  The registry publishes untyped JSON.
#      Everything that comes over the wire is validated into one of these
#      frozen models before anything else touches it.  A body that doesn't
#      fit raises pydantic's ValidationError, which the registry client turns
#      into a ParseError.  Wire names are camelCase ("baseUrl"); Python
#      attributes are snake_case ("base_url").  Dump with by_alias=True to
#      get the wire shape back.
#
#   2. QUERY RESULTS and DOCUMENTATION RECORDS.  Query results are pydantic
#      too (they embed registry models).  Documentation records are plain
#      dataclasses: they are built per call from a scraped page, never
#      validated, never cached.
# =============================================================================

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class RegistryModel(BaseModel):
    """Immutable model with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# -----------------------------------------------------------------------------
# Registry index  ({base_url}/index.json)
# -----------------------------------------------------------------------------
class CategoryInfo(RegistryModel):
    title: str
    description: str


class RegistryComponentSummary(RegistryModel):
    """One entry of the index's component list."""

    name: str                          # Unique key, also the detail document name
    title: str
    description: str
    type: str
    categories: tuple[str, ...]        # Keys into RegistryIndex.categories (not enforced)
    featured: bool
    url: str


class RegistryMeta(RegistryModel):
    last_updated: str
    total_components: int
    maintainer: str


class RegistryIndex(RegistryModel):
    """The registry's table of contents."""

    schema_: Optional[str] = Field(default=None, alias="$schema")
    name: str
    description: str
    version: str
    framework: str
    base_url: str
    components: tuple[RegistryComponentSummary, ...]
    categories: dict[str, CategoryInfo]
    meta: Optional[RegistryMeta] = None


# -----------------------------------------------------------------------------
# Component detail  ({base_url}/{name}.json)
# -----------------------------------------------------------------------------
class ComponentFile(RegistryModel):
    """A source file shipped with a component."""

    path: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    target: Optional[str] = None
    language: Optional[str] = None
    content: str

    @model_validator(mode="after")
    def _require_path_or_name(self) -> "ComponentFile":
        if not (self.path or self.name):
            raise ValueError("Either 'path' or 'name' must be provided")
        return self

    @property
    def file_path(self) -> str:
        return self.path or self.name or ""


class BrutalistFeatures(RegistryModel):
    has_thick_borders: Optional[bool] = None
    has_shadows: Optional[bool] = None
    has_sharp_corners: Optional[bool] = None
    has_high_contrast: Optional[bool] = None
    has_animations: Optional[bool] = None
    has_glitch_effects: Optional[bool] = None
    theme: Optional[Literal["classic", "modern", "experimental"]] = None


DependencySpec = Union[list[str], dict[str, str]]


class ComponentDetail(RegistryModel):
    """The full record for one component.  Unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    schema_: Optional[str] = Field(default=None, alias="$schema")
    name: str
    version: str
    description: str
    files: tuple[ComponentFile, ...]
    type: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    framework: Optional[str] = None
    frameworks: Optional[list[str]] = None
    brutalist_features: Optional[BrutalistFeatures] = None
    categories: Optional[list[str]] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    dependencies: Optional[DependencySpec] = None
    peer_dependencies: Optional[DependencySpec] = None
    last_updated: Optional[str] = None


# -----------------------------------------------------------------------------
# Query results  (core/queries.py)
# -----------------------------------------------------------------------------
class SearchFilters(RegistryModel):
    category: Optional[str] = None
    featured: Optional[bool] = None


class SearchResults(RegistryModel):
    results: list[RegistryComponentSummary]
    total: int
    query: str
    filters: SearchFilters


class CategoryComponents(RegistryModel):
    category: str
    category_info: Optional[CategoryInfo]  # None when the key isn't in the index map
    components: list[RegistryComponentSummary]
    total: int


class CategorySummary(RegistryModel):
    title: str
    description: str
    count: int                         # Components listing this category key


class CategoryListing(RegistryModel):
    categories: dict[str, CategorySummary]
    total: int


class FeaturedComponents(RegistryModel):
    components: list[RegistryComponentSummary]
    total: int


class RegistryStats(RegistryModel):
    total_components: int
    featured_components: int
    categories_count: int
    last_updated: Optional[str]        # None when the index has no meta block


class RegistryInfo(RegistryModel):
    registry: RegistryIndex
    stats: RegistryStats


# -----------------------------------------------------------------------------
# Documentation records  (core/docs.py)
# -----------------------------------------------------------------------------
@dataclass
class AccessibilityInfo:
    """Accessibility notes scraped from a component's docs page."""

    keyboard_support: list[str] = field(default_factory=list)   # "Enter: Activates the button"
    aria_attributes: list[str] = field(default_factory=list)
    best_practices: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.keyboard_support or self.aria_attributes or self.best_practices)


@dataclass
class PropInfo:
    name: str
    type: str
    description: str
    default_value: Optional[str] = None
    required: Optional[bool] = None


@dataclass
class ApiReference:
    props: list[PropInfo] = field(default_factory=list)


@dataclass
class DocumentationRecord:
    """Normalized documentation for one component."""

    title: str
    description: str
    content: str                       # Markdown
    examples: list[str] = field(default_factory=list)
    accessibility: Optional[AccessibilityInfo] = None
    api_reference: Optional[ApiReference] = None
