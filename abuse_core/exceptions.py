class AbuseToolError(Exception):
    """Base exception for abuse ticket tool errors."""
    pass

class InvalidArgumentsError(AbuseToolError):
    """Raised when tool arguments are not a mapping."""
    pass

class BindingError(AbuseToolError):
    """Raised when arguments cannot be converted to the request schema."""
    pass

class RequestConstructionError(AbuseToolError):
    """Raised when the outbound HTTP request cannot be built."""
    pass

class NetworkError(AbuseToolError):
    """Raised on transport-level failure talking to the abuse API."""
    pass

class UpstreamError(AbuseToolError):
    """Raised when the abuse API answers with an HTTP status >= 400."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {body}")

class ToolExecutionError(AbuseToolError):
    """Raised when a tool execution fails."""
    pass
