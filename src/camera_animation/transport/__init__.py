"""Transport helper exports for camera animation integrations."""

from .contract import TOOL_CONTRACTS, HTTP_OPERATIONS, CLI_OPERATIONS, OPERATION_CONTRACTS, ToolContract
from .response import normalize_transport_response

__all__ = [
    'normalize_transport_response',
    'TOOL_CONTRACTS',
    'HTTP_OPERATIONS',
    'CLI_OPERATIONS',
    'OPERATION_CONTRACTS',
    'ToolContract',
]
