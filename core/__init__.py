# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the Brutalist UI MCP server:
# the TTL cache, the registry client, the query layer over the registry index,
# the documentation extractor and the static guides.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The tools/ layer wraps these
#   functions as MCP tools and resources; everything here can be exercised
#   from a plain Python session (or a test) with a mocked HTTP transport.
# =============================================================================

__version__ = "1.0.0"
