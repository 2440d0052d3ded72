# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool & Resource Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools and resources the server exposes.  Each one is a
#   thin wrapper around a core/ function: it logs the call, asks core/ for the
#   data, reshapes it into a JSON-ready dict and returns it.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g., "search_components")
#   2. FastMCP validates the arguments against the function signature
#      (missing or mistyped fields become an invalid-params tool error;
#      arguments are Strict* so "yes" is not coerced to a bool)
#   3. The decorated function calls core/ (registry client, queries, docs)
#   4. Registry failures are re-raised as ToolError("Failed to ...: <why>")
#   5. The client receives the dict serialized as JSON text content
#
# TOOL NAMING CONVENTIONS:
#   - list_* / get_*  → read-only retrieval (idempotent, safe to retry)
#   - search_*        → query with filters (idempotent, safe to retry)
#   Argument names are camelCase ("componentName") because that is the
#   published wire contract.
#
# RUNNING THIS SERVER:
#   build_server() returns a configured FastMCP instance.  main.py builds
#   one from Settings and runs it over stdio.
# =============================================================================

import asyncio
from contextlib import asynccontextmanager
import json
import logging
import sys
from typing import Annotated, Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from pydantic import BaseModel, Field, StrictBool, StrictStr

from core import docs, guides, queries
from core.cache import TTLCache
from core.config import Settings
from core.errors import RegistryError
from core.models import AccessibilityInfo, DocumentationRecord
from core.registry import RegistryClient

SERVER_NAME = "brutalist-ui-mcp-server"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON-RPC stream, and anything
# else written there corrupts it.
#
#   CYAN    incoming tool calls with their arguments
#   YELLOW  intermediate status
#   GREEN   the response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _tool_error(action: str, exc: Exception) -> ToolError:
    _log_status(f"{type(exc).__name__}: {exc}")
    return ToolError(f"Failed to {action}: {exc}")


def _dump(model: BaseModel, **kwargs: Any) -> dict:
    """Serialize a core model to its camelCase wire shape."""
    return model.model_dump(mode="json", by_alias=True, **kwargs)


def _accessibility_payload(info: Optional[AccessibilityInfo]) -> dict:
    info = info or AccessibilityInfo()
    return {
        "keyboardSupport": info.keyboard_support,
        "ariaAttributes": info.aria_attributes,
        "bestPractices": info.best_practices,
    }


def _documentation_payload(record: DocumentationRecord) -> dict:
    api_reference = None
    if record.api_reference is not None:
        api_reference = {
            "props": [
                {
                    "name": prop.name,
                    "type": prop.type,
                    "defaultValue": prop.default_value,
                    "description": prop.description,
                    "required": prop.required,
                }
                for prop in record.api_reference.props
            ]
        }
    return {
        "title": record.title,
        "description": record.description,
        "content": record.content,
        "examples": record.examples,
        "accessibility": _accessibility_payload(record.accessibility),
        "apiReference": api_reference,
    }


ComponentName = Annotated[
    StrictStr,
    Field(description="Name of the component (e.g., 'button', 'card', 'textarea')"),
]


# =============================================================================
# Server factory
# =============================================================================
def build_server(settings: Settings, client: Optional[RegistryClient] = None) -> FastMCP:
    """Create the FastMCP server with every tool and resource registered.

    Args:
        settings: Process-wide configuration (registry URL, site URL, docs root).
        client: Registry client to use.  When omitted, one is created for
            ``settings.registry_base_url`` with a fresh TTL cache.

    Returns:
        A FastMCP instance ready for ``run()``.
    """
    if client is None:
        client = RegistryClient(
            settings.registry_base_url,
            cache=TTLCache(ttl_seconds=settings.cache_ttl_seconds),
        )

    @asynccontextmanager
    async def lifespan(server: FastMCP):
        try:
            yield {}
        finally:
            await client.aclose()

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Browse and install Brutalist UI React components: list and search the "
            "registry, fetch component source and styles, and read component docs."
        ),
        lifespan=lifespan,
    )

    def docs_url(component_name: str) -> str:
        return f"{settings.site_url}/docs/components/{component_name}"

    # =========================================================================
    # REGISTRY TOOLS
    # =========================================================================
    @mcp.tool()
    async def list_components() -> dict:
        """List all available Brutalist UI components from the registry.

        Returns:
            A dict with ``components`` (name, title, description, type,
            categories, featured, url for each), ``total``, ``framework``
            and the registry ``version``.
        """
        _log_request("list_components")
        try:
            index = await client.fetch_registry_index()
        except Exception as exc:
            raise _tool_error("list components", exc) from exc

        _log_status(f"Registry has {len(index.components)} components")
        return _log_response("list_components", {
            "components": [_dump(c) for c in index.components],
            "total": len(index.components),
            "framework": index.framework,
            "version": index.version,
        })

    @mcp.tool()
    async def get_component(componentName: ComponentName) -> dict:  # noqa: N803
        """Get detailed information about a specific Brutalist UI component,
        including source code, styles and metadata.

        Returns:
            A dict with the full ``component`` record, its ``installCommand``
            and the ``registryUrl`` of its JSON document.
        """
        _log_request("get_component", componentName=componentName)
        try:
            component = await client.fetch_component(componentName)
        except Exception as exc:
            raise _tool_error("get component", exc) from exc

        _log_status(f"Found {len(component.files)} file(s)")
        return _log_response("get_component", {
            "component": _dump(component, exclude_none=True),
            "installCommand": guides.install_command(client.component_url(componentName)),
            "registryUrl": client.component_json_url(componentName),
        })

    @mcp.tool()
    async def search_components(
        query: Annotated[StrictStr, Field(description="Search query for component name, title, or description")],
        category: Annotated[
            Optional[StrictStr],
            Field(description="Filter by category (e.g., 'forms', 'display', 'navigation')"),
        ] = None,
        featured: Annotated[Optional[StrictBool], Field(description="Filter by featured status")] = None,
    ) -> dict:
        """Search Brutalist UI components by name, title, description, or filters.

        Filters apply in order: category, then featured flag, then a
        case-insensitive text match.  An empty query returns everything that
        passes the filters, in registry order.
        """
        _log_request("search_components", query=query, category=category, featured=featured)
        try:
            results = await queries.search_components(client, query, category, featured)
        except Exception as exc:
            raise _tool_error("search components", exc) from exc

        _log_status(f"{results.total} match(es)")
        return _log_response("search_components", _dump(results))

    @mcp.tool()
    async def get_component_examples(componentName: ComponentName) -> dict:  # noqa: N803
        """Get usage examples and demo code for a specific Brutalist UI component.

        Returns example/demo files when the component ships any, otherwise
        its main source file, plus the install command and an import line.
        """
        _log_request("get_component_examples", componentName=componentName)
        try:
            component = await client.fetch_component(componentName)
        except Exception as exc:
            raise _tool_error("get component examples", exc) from exc

        examples = queries.example_files(component)
        _log_status(f"{len(examples)} example file(s)")
        return _log_response("get_component_examples", {
            "componentName": componentName,
            "examples": [_dump(f, exclude_none=True) for f in examples],
            "installCommand": guides.install_command(client.component_url(componentName)),
            "usage": queries.import_statement(component),
        })

    @mcp.tool()
    async def get_component_styles(componentName: ComponentName) -> dict:  # noqa: N803
        """Get CSS styles and styling information for a specific Brutalist UI component.

        Returns the component's brutalist feature flags, its CSS/SCSS files
        and its dependency names.
        """
        _log_request("get_component_styles", componentName=componentName)
        try:
            component = await client.fetch_component(componentName)
        except Exception as exc:
            raise _tool_error("get component styles", exc) from exc

        features = component.brutalist_features
        return _log_response("get_component_styles", {
            "componentName": componentName,
            "brutalistFeatures": _dump(features, exclude_none=True) if features else None,
            "styleFiles": [_dump(f, exclude_none=True) for f in queries.style_files(component)],
            "dependencies": queries.dependency_names(component),
        })

    @mcp.tool()
    async def get_categories() -> dict:
        """Get all available component categories with descriptions and component counts."""
        _log_request("get_categories")
        try:
            listing = await queries.get_categories(client)
        except Exception as exc:
            raise _tool_error("get categories", exc) from exc
        return _log_response("get_categories", _dump(listing))

    @mcp.tool()
    async def get_components_by_category(
        category: Annotated[StrictStr, Field(description="Category name (e.g., 'forms', 'display', 'navigation')")],
    ) -> dict:
        """Get all components in a specific category.

        ``categoryInfo`` is null when the registry doesn't describe the category.
        """
        _log_request("get_components_by_category", category=category)
        try:
            result = await queries.get_components_by_category(client, category)
        except Exception as exc:
            raise _tool_error("get components by category", exc) from exc
        return _log_response("get_components_by_category", _dump(result))

    @mcp.tool()
    async def get_featured_components() -> dict:
        """Get all featured Brutalist UI components."""
        _log_request("get_featured_components")
        try:
            featured = await queries.get_featured_components(client)
        except Exception as exc:
            raise _tool_error("get featured components", exc) from exc
        return _log_response("get_featured_components", _dump(featured))

    @mcp.tool()
    async def get_registry_info() -> dict:
        """Get metadata and statistics about the Brutalist UI registry."""
        _log_request("get_registry_info")
        try:
            info = await queries.get_registry_info(client)
        except Exception as exc:
            raise _tool_error("get registry info", exc) from exc
        return _log_response("get_registry_info", _dump(info))

    @mcp.tool()
    async def get_install_command(componentName: ComponentName) -> dict:  # noqa: N803
        """Get the installation command for a specific component using the precast-ui CLI.

        The component is looked up first, so an unknown name is an error
        rather than a command that would fail later.
        """
        _log_request("get_install_command", componentName=componentName)
        try:
            await client.fetch_component(componentName)
        except Exception as exc:
            raise _tool_error("get install command", exc) from exc

        url = client.component_url(componentName)
        return _log_response("get_install_command", {
            "componentName": componentName,
            "installCommand": guides.install_command(url),
            "npmInstall": guides.NPM_INSTALL,
            "usage": guides.install_usage(url),
        })

    # =========================================================================
    # DOCUMENTATION TOOLS
    # =========================================================================
    # These never touch the registry.  Missing docs pages come back as a
    # default record, not an error.
    # =========================================================================
    @mcp.tool()
    async def get_component_documentation(componentName: ComponentName) -> dict:  # noqa: N803
        """Get documentation for a component: description, features and usage,
        code examples and accessibility notes.
        """
        _log_request("get_component_documentation", componentName=componentName)
        record = await asyncio.to_thread(
            docs.extract_component_documentation, componentName, settings.docs_root
        )
        _log_status(f"{len(record.examples)} example(s) extracted")
        return _log_response("get_component_documentation", {
            "componentName": componentName,
            "documentation": _documentation_payload(record),
            "documentationUrl": docs_url(componentName),
        })

    @mcp.tool()
    async def search_documentation(
        query: Annotated[StrictStr, Field(description="Text to look for in documentation page names")],
        category: Annotated[
            Optional[StrictStr],
            Field(description="Documentation section to search: 'guides', 'components' or 'api'"),
        ] = None,
    ) -> dict:
        """Search the documentation pages (guides, components, api) by name."""
        _log_request("search_documentation", query=query, category=category)
        paths = docs.search_documentation(query, category)
        return _log_response("search_documentation", {
            "query": query,
            "section": category,
            "results": [
                {
                    "path": path,
                    "url": f"{settings.site_url}/docs/{path}",
                    "title": docs.humanize_slug(path.rsplit("/", 1)[-1]),
                }
                for path in paths
            ],
        })

    @mcp.tool()
    async def get_documentation_sections() -> dict:
        """List every documentation section and the pages it contains."""
        _log_request("get_documentation_sections")
        sections = []
        for name, items in docs.get_all_documentation_sections().items():
            prefix = "components/" if name == "components" else ""
            sections.append({
                "name": name,
                "title": name[:1].upper() + name[1:],
                "items": [
                    {
                        "name": item,
                        "title": docs.humanize_slug(item),
                        "url": f"{settings.site_url}/docs/{prefix}{item}",
                    }
                    for item in items
                ],
            })
        return _log_response("get_documentation_sections", {"sections": sections})

    @mcp.tool()
    async def get_accessibility_info(componentName: ComponentName) -> dict:  # noqa: N803
        """Get keyboard support, ARIA attributes and accessibility best practices
        for a component.
        """
        _log_request("get_accessibility_info", componentName=componentName)
        record = await asyncio.to_thread(
            docs.extract_component_documentation, componentName, settings.docs_root
        )
        return _log_response("get_accessibility_info", {
            "componentName": componentName,
            "accessibility": _accessibility_payload(record.accessibility),
            "documentationUrl": f"{docs_url(componentName)}#accessibility",
        })

    # =========================================================================
    # RESOURCES
    # =========================================================================
    # Regenerated on every read.  The registry-backed ones share the registry
    # client's cache; the guides are static text.
    # =========================================================================
    @mcp.resource(
        "brutalist-ui://registry/overview",
        name="Brutalist UI Registry Overview",
        description="Overview of the Brutalist UI component registry and available components",
        mime_type="text/plain",
    )
    async def registry_overview() -> str:
        try:
            index = await client.fetch_registry_index()
        except RegistryError as exc:
            raise ResourceError(f"Error processing resource: {exc}") from exc
        return guides.render_overview(index)

    @mcp.resource(
        "brutalist-ui://registry/categories",
        name="Component Categories",
        description="List of all component categories with descriptions and component counts",
        mime_type="application/json",
    )
    async def registry_categories() -> str:
        try:
            listing = await queries.get_categories(client)
        except RegistryError as exc:
            raise ResourceError(f"Error processing resource: {exc}") from exc
        return json.dumps(_dump(listing), indent=2)

    @mcp.resource(
        "brutalist-ui://registry/featured",
        name="Featured Components",
        description="List of featured Brutalist UI components",
        mime_type="application/json",
    )
    async def registry_featured() -> str:
        try:
            featured = await queries.get_featured_components(client)
        except RegistryError as exc:
            raise ResourceError(f"Error processing resource: {exc}") from exc
        return json.dumps(_dump(featured), indent=2)

    @mcp.resource(
        "brutalist-ui://registry/installation",
        name="Installation Guide",
        description="Guide for installing and using Brutalist UI components",
        mime_type="text/markdown",
    )
    def installation_guide() -> str:
        return guides.INSTALLATION_GUIDE

    @mcp.resource(
        "brutalist-ui://registry/brutalist-features",
        name="Brutalist Design Features",
        description="Overview of brutalist design principles used in the components",
        mime_type="text/markdown",
    )
    def brutalist_features_guide() -> str:
        return guides.BRUTALIST_FEATURES_GUIDE

    return mcp
