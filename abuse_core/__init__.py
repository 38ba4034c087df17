from .client import AbuseToolSet
from .actions import Action
from .binding import bind_arguments, build_query_string
from .config import APIConfig, load_config
from .models import AbuseTicket, AbuseTicketCreate, AbuseTicketQuery, AbuseTicketId, AbuseTicketList, Pagination, Error, ErrorField
from .tools import SingleCallTool, CREATE_TICKET_TOOL, LIST_TICKETS_TOOL, ALL_TOOLS
from .exceptions import (
    AbuseToolError,
    InvalidArgumentsError,
    BindingError,
    RequestConstructionError,
    NetworkError,
    UpstreamError,
    ToolExecutionError,
)

__all__ = [
    "AbuseToolSet", "Action", "bind_arguments", "build_query_string", "APIConfig", "load_config",
    "AbuseTicket", "AbuseTicketCreate", "AbuseTicketQuery", "AbuseTicketId", "AbuseTicketList", "Pagination", "Error", "ErrorField",
    "SingleCallTool", "CREATE_TICKET_TOOL", "LIST_TICKETS_TOOL", "ALL_TOOLS",
    "AbuseToolError", "InvalidArgumentsError", "BindingError", "RequestConstructionError", "NetworkError", "UpstreamError", "ToolExecutionError",
]
