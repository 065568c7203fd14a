"""
Agent tools - Sherlock client operations as schema-validated callables
"""

from sherlock.tools.registry import Tool, ToolRegistry, build_tools
from sherlock.tools.formats import (
    to_anthropic_tool,
    to_openai_tool,
    tools_to_anthropic,
    tools_to_openai
)

__all__ = [
    "Tool",
    "ToolRegistry",
    "build_tools",
    "to_anthropic_tool",
    "to_openai_tool",
    "tools_to_anthropic",
    "tools_to_openai"
]
