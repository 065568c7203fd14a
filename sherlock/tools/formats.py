"""
Format converters for model provider tool-calling APIs.

Converts registry Tools into the shapes Anthropic and OpenAI-compatible
providers expect.
"""

from typing import Any, Dict, Iterable, List

from sherlock.tools.registry import Tool


def to_anthropic_tool(tool: Tool) -> Dict[str, Any]:
    """Convert Tool to Anthropic's tool format."""
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": tool.json_schema()
    }


def to_openai_tool(tool: Tool) -> Dict[str, Any]:
    """Convert Tool to OpenAI's tool format (also used by DeepSeek, Kimi, Cloudflare)."""
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.json_schema()
        }
    }


def tools_to_anthropic(tools: Iterable[Tool]) -> List[Dict[str, Any]]:
    """Convert tools to Anthropic format."""
    return [to_anthropic_tool(t) for t in tools]


def tools_to_openai(tools: Iterable[Tool]) -> List[Dict[str, Any]]:
    """Convert tools to OpenAI format."""
    return [to_openai_tool(t) for t in tools]
