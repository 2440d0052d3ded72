# =============================================================================
# core/errors.py  —  Registry Error Types
# =============================================================================
#
# Every failure that can reach a tool caller from the registry is one of the
# classes below.  None of them is retried: the tool wrapper catches them and
# turns the message into an MCP tool error.
#
# Documentation lookups have no error type on purpose.  A missing or
# unreadable documentation page becomes a default record (see core/docs.py).
# =============================================================================


class RegistryError(Exception):
    """Base class for failures talking to the component registry."""


class FetchError(RegistryError):
    """The registry could not be reached or answered with a non-2xx status."""


class NotFoundError(RegistryError):
    """The registry has no detail document for the requested component."""

    def __init__(self, component_name: str):
        self.component_name = component_name
        super().__init__(f"Component '{component_name}' not found in registry")


class ParseError(RegistryError):
    """The registry answered, but the body is not the expected document shape."""
