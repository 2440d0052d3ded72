# =============================================================================
# main.py  —  Entry Point for the Brutalist UI MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                      # production registry
#   uv run python main.py --dev                # http://localhost:3000 registry
#   uv run python main.py --registry-url URL   # any registry
#
#   Once installed, the same command is available as `brutalist-ui-mcp`.
#
# WHAT HAPPENS:
#   1. Loads a .env file, if present (REGISTRY_BASE_URL, BRUTALIST_UI_ENV,
#      BRUTALIST_DOCS_DIR)
#   2. Resolves the Settings once (core/config.py)
#   3. Builds the FastMCP server with every tool and resource
#      (tools/mcp_server.py)
#   4. Serves MCP over stdio until the client disconnects
#
# Everything printed by this process goes to STDERR; STDOUT belongs to the
# MCP protocol.
# =============================================================================

import logging

import click
from dotenv import load_dotenv

from core import __version__
from core.config import Settings
from tools.mcp_server import SERVER_NAME, build_server

_EPILOG = """\b
Available tools:
  list_components              List all available components
  get_component                Get component details and source code
  search_components            Search components by query/filters
  get_component_examples       Get usage examples for a component
  get_component_styles         Get CSS styles for a component
  get_categories               Get all component categories
  get_components_by_category   Get components in a specific category
  get_featured_components      Get featured components
  get_registry_info            Get registry metadata
  get_install_command          Get installation command for a component
  get_component_documentation  Get documentation for a component
  search_documentation         Search documentation pages
  get_documentation_sections   List documentation sections
  get_accessibility_info       Get accessibility notes for a component

\b
Default registry: https://brutalist.precast.dev/registry/react
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name=SERVER_NAME,
    message="%(prog)s v%(version)s",
)
@click.option(
    "--registry-url",
    metavar="URL",
    default=None,
    help="Override the registry base URL.",
)
@click.option(
    "--dev",
    is_flag=True,
    default=False,
    help="Use the local development registry (http://localhost:3000).",
)
def main(registry_url: str | None, dev: bool) -> None:
    """Brutalist UI MCP Server.

    A Model Context Protocol server providing access to the Brutalist UI
    components registry and documentation.
    """
    load_dotenv()

    settings = Settings.from_env(registry_url=registry_url, dev=dev)
    if registry_url:
        logging.info(f"Using custom registry URL: {settings.registry_base_url}")
    else:
        logging.info(f"Using registry: {settings.registry_base_url}")

    server = build_server(settings)
    logging.info("Brutalist UI MCP Server starting on stdio")
    server.run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
