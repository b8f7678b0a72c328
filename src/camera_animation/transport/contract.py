"""Transport contract definitions for camera animation operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ToolContract:
    operation: str
    http_route: str
    http_method: str
    cli_command: str


TOOL_CONTRACTS: List[ToolContract] = [
    ToolContract('create_animation', 'animations/create', 'POST', 'animate'),
    ToolContract('auto_keyframes', 'animations/auto-keyframes', 'POST', 'auto-keyframes'),
    ToolContract('list_presets', 'animations/presets', 'GET', 'presets'),
    ToolContract('preset', 'animations/preset', 'POST', 'preset'),
    ToolContract('preview', 'animations/preview', 'POST', 'preview'),
    ToolContract('export_animation', 'animations/export', 'POST', 'export'),
]

HTTP_OPERATIONS: Dict[str, ToolContract] = {contract.http_route: contract for contract in TOOL_CONTRACTS}
CLI_OPERATIONS: Dict[str, ToolContract] = {contract.cli_command: contract for contract in TOOL_CONTRACTS}
OPERATION_CONTRACTS: Dict[str, ToolContract] = {contract.operation: contract for contract in TOOL_CONTRACTS}

__all__ = ['ToolContract', 'TOOL_CONTRACTS', 'HTTP_OPERATIONS', 'CLI_OPERATIONS', 'OPERATION_CONTRACTS']
