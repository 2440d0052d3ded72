# =============================================================================
# core/docs.py  —  Documentation Extractor & Static Docs Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. Turns a component's documentation page source (a .tsx page from the
#      Brutalist UI website) into a DocumentationRecord by scraping it with
#      regular expressions.
#   2. Holds the static catalog of documentation pages (guides, components,
#      api) and a substring search over it.
#
# THE BEST-EFFORT CONTRACT:
#   extract_component_documentation() never raises.
#     - No docs directory configured, no file for the name, or the read
#       fails  →  a default record derived from the component name.
#     - The file was read  →  each field is extracted by its own step.  A
#       step that finds nothing, or blows up, leaves only THAT field at its
#       default.  The other steps still run.
#
# LOCATING THE PAGE:
#   A handful of components have pages that don't follow the naming
#   convention; they are listed in _SPECIAL_PAGES.  Everything else is
#   components/<Name>Page.tsx with the first letter upper-cased
#   ("button" → components/ButtonPage.tsx).
#
# This module is independent of the registry client and the cache.
# =============================================================================

import logging
import os
import re
from typing import Callable, Optional, TypeVar

from core.models import AccessibilityInfo, ApiReference, DocumentationRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Static documentation catalog
# =============================================================================
DOCS_STRUCTURE: dict[str, list[str]] = {
    "guides": [
        "introduction",
        "installation",
        "typescript",
        "cli",
        "design-principles",
        "colors",
        "typography",
        "spacing",
        "animations",
        "shapes",
        "accessibility",
        "theming",
        "changelog",
    ],
    "components": [
        "accordion", "alert", "avatar", "badge", "bar-chart", "line-chart", "pie-chart", "area-chart",
        "aspect-ratio", "breadcrumb", "button", "card", "checkbox", "combobox", "command", "container",
        "context-menu", "dialog", "drawer", "dropdown", "hover-card", "input", "input-otp",
        "navigation", "pagination", "popover", "progress", "radio", "select", "separator",
        "sidebar", "skeleton", "slider", "spinner", "stack", "switch", "toggle", "typography",
        "table", "table-of-contents", "tabs", "textarea", "toast", "tooltip",
    ],
    "api": [
        "types",
        "registry",
    ],
}


def search_documentation(query: str, section: Optional[str] = None) -> list[str]:
    """Find catalog entries whose item name contains ``query``.

    Args:
        query: Case-insensitive substring to look for.
        section: Restrict the search to one section ("guides", "components",
            "api").  An unknown section matches nothing.

    Returns:
        Matches as "section/item" paths, in catalog order.
    """
    needle = query.lower()
    sections = [section] if section else list(DOCS_STRUCTURE)

    results = []
    for name in sections:
        for item in DOCS_STRUCTURE.get(name, []):
            if needle in item.lower():
                results.append(f"{name}/{item}")
    return results


def get_all_documentation_sections() -> dict[str, list[str]]:
    return DOCS_STRUCTURE


def humanize_slug(slug: str) -> str:
    """'table-of-contents' → 'Table Of Contents'."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), slug.replace("-", " "))


# =============================================================================
# Locating a component's docs page
# =============================================================================
# Paths are relative to the configured docs root (BRUTALIST_DOCS_DIR).
_SPECIAL_PAGES: dict[str, str] = {
    "bar-chart": "components/BarChartPage.tsx",
    "line-chart": "components/LineChartPage.tsx",
    "table-of-contents": "components/TableOfContentsPage.tsx",
    "shapes": "ShapesPage.tsx",
    "pagination": "components/pagination.tsx",
    "aspect-ratio": "components/aspect-ratio.tsx",
}


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def resolve_docs_page(component_name: str, docs_root: str) -> str:
    relative = _SPECIAL_PAGES.get(component_name)
    if relative is None:
        relative = f"components/{_capitalize(component_name)}Page.tsx"
    return os.path.join(docs_root, relative)


# =============================================================================
# PUBLIC API: extract_component_documentation
# =============================================================================
def default_documentation(component_name: str, reason: Optional[str] = None) -> DocumentationRecord:
    """The record returned when no docs page could be read."""
    title = _capitalize(component_name)
    detail = reason or (
        "Documentation file not found. Please check the component's source "
        "code for implementation details."
    )
    return DocumentationRecord(
        title=title,
        description=f"Documentation for {component_name} component",
        content=f"# {title} Component\n\n{detail}",
        examples=[],
        accessibility=AccessibilityInfo(),
    )


def extract_component_documentation(
    component_name: str,
    docs_root: Optional[str] = None,
) -> DocumentationRecord:
    """Build a DocumentationRecord for ``component_name``.  Never raises.

    Args:
        component_name: Registry name of the component (e.g. "button").
        docs_root: Directory holding the docs page sources.  None means no
            pages are available and the default record is returned.
    """
    if not docs_root:
        return default_documentation(component_name)

    path = resolve_docs_page(component_name, docs_root)
    if not os.path.isfile(path):
        logger.info("no docs page for %s at %s", component_name, path)
        return default_documentation(component_name)

    try:
        with open(path, encoding="utf-8") as fh:
            source = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read docs page %s: %s", path, exc)
        return default_documentation(
            component_name, reason=f"Error loading documentation: {exc}"
        )

    return DocumentationRecord(
        title=_step(extract_title, source, "") or _capitalize(component_name),
        description=_step(extract_description, source, "") or f"{component_name} component",
        content=_step(extract_main_content, source, "") or f"Documentation loaded from: {path}",
        examples=_step(extract_examples, source, []),
        accessibility=_step(extract_accessibility, source, None) or AccessibilityInfo(),
        api_reference=_step(extract_api_reference, source, None),
    )


def _step(extract: Callable[[str], T], source: str, default: T) -> T:
    """Run one extraction step; any failure yields ``default`` for that field."""
    try:
        return extract(source)
    except Exception:  # noqa: BLE001
        logger.warning("docs extraction step %s failed", extract.__name__, exc_info=True)
        return default


# =============================================================================
# Extraction steps
# =============================================================================
# Each takes the raw page source and returns its field, or an empty value.

_TITLE_RE = re.compile(r"<h1[^>]*>([^<]+)</h1>")
_DESCRIPTION_RE = re.compile(r"<p className=\{styles\.description\}>([^<]+)</p>")
_FEATURES_RE = re.compile(r'<h2[^>]*id="features"[^>]*>Features</h2>(.*?)</section>', re.S)
_USAGE_RE = re.compile(r'<h2[^>]*id="usage"[^>]*>Usage</h2>(.*?)</section>', re.S)
_CODE_BLOCK_RE = re.compile(r"<CodeBlock[^>]*code=\{`([^`]+)`\}")
_SHORTCUT_RE = re.compile(r"<div className=\{styles\.shortcut\}>(.*?)</div>", re.S)
_KBD_RE = re.compile(r"<kbd[^>]*>([^<]+)</kbd>")
_SPAN_RE = re.compile(r"<span>([^<]+)</span>")
_ARIA_LIST_RE = re.compile(r"<ul className=\{styles\.ariaList\}>(.*?)</ul>", re.S)
_PRACTICE_LIST_RE = re.compile(r"<ul className=\{styles\.practiceList\}>(.*?)</ul>", re.S)
_LIST_ITEM_RE = re.compile(r"<li[^>]*>([^<]+)</li>")
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_title(source: str) -> str:
    match = _TITLE_RE.search(source)
    return match.group(1) if match else ""


def extract_description(source: str) -> str:
    match = _DESCRIPTION_RE.search(source)
    return match.group(1).strip() if match else ""


def extract_main_content(source: str) -> str:
    """Features (as a bullet list) and Usage (as plain text), in markdown."""
    sections = []

    features = _FEATURES_RE.search(source)
    if features:
        bullets = "\n".join(f"- {item}" for item in extract_list_items(features.group(1)))
        sections.append(f"## Features\n{bullets}")

    usage = _USAGE_RE.search(source)
    if usage:
        sections.append(f"## Usage\n{strip_tags(usage.group(1))}")

    return "\n\n".join(sections)


def extract_examples(source: str) -> list[str]:
    return _CODE_BLOCK_RE.findall(source)


def extract_accessibility(source: str) -> Optional[AccessibilityInfo]:
    keyboard = []
    for shortcut in _SHORTCUT_RE.findall(source):
        kbd = _KBD_RE.search(shortcut)
        span = _SPAN_RE.search(shortcut)
        if kbd and span:
            keyboard.append(f"{kbd.group(1)}: {span.group(1)}")

    aria = _ARIA_LIST_RE.search(source)
    practices = _PRACTICE_LIST_RE.search(source)

    info = AccessibilityInfo(
        keyboard_support=keyboard,
        aria_attributes=extract_list_items(aria.group(1)) if aria else [],
        best_practices=extract_list_items(practices.group(1)) if practices else [],
    )
    return None if info.is_empty() else info


def extract_api_reference(source: str) -> Optional[ApiReference]:
    # Prop tables are not scraped; the field is always absent.
    return None


def extract_list_items(fragment: str) -> list[str]:
    return [item.strip() for item in _LIST_ITEM_RE.findall(fragment)]


def strip_tags(fragment: str) -> str:
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub("", fragment)).strip()
