# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  The
#   server module:
#     1. Calls the registry client, query layer or docs extractor in core/
#     2. Registers each call as a FastMCP tool or resource
#     3. Converts core models into camelCase JSON-ready dicts
#     4. Re-raises registry failures as MCP tool/resource errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT filter, count or scrape anything themselves (core/ does)
#   - They do NOT read the environment (core/config.py does, once)
# =============================================================================

from tools.mcp_server import build_server

__all__ = ["build_server"]
