"""Error types shared by the dispatcher, the tools and the transports."""


class McpError(Exception):
    """Base error carrying the machine readable ``code`` of a custom envelope."""

    code = "InternalServerError"


class InvalidInput(McpError):
    """A tool argument has the wrong type."""

    code = "InvalidInput"


class ToolNotFound(McpError):
    code = "ToolNotFound"

    def __init__(self, name):
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolExecutionError(McpError):
    code = "ToolExecutionError"


class VersionMismatch(McpError):
    code = "VersionMismatch"

    def __init__(self, requested, supported: str) -> None:
        self.requested = requested
        self.supported = supported
        super().__init__(f"Unsupported MCP version: {requested}. Required {supported}")


class MethodNotFound(McpError):
    code = "MethodNotFound"

    def __init__(self, method):
        self.method = method
        super().__init__(f"Unknown custom method: {method}")


class InvalidRequest(McpError):
    """The payload is not a well formed request envelope."""

    code = "InvalidRequest"


class ConfigError(ValueError):
    """Raised for unusable environment configuration."""
