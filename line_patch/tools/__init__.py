"""Agent tool surface for the file tool.

This module provides:
- ToolRegistry: Central registry for tool functions and schemas
- @tool decorator: Attaches a schema to a tool function
- create_file_tools: rewrite_file / apply_diff tools bound to a FileTool
"""

from .base import ToolRegistry
from .decorators import tool
from .file_tools import OPERATION_ITEM_SCHEMA, create_file_tools

__all__ = [
    "ToolRegistry",
    "tool",
    "create_file_tools",
    "OPERATION_ITEM_SCHEMA",
]
