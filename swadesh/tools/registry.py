"""
Tool registry.

Each tool endpoint is a request schema plus a prompt template. Tools have no
state and no identity requirement: validate, template, generate, return.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from pydantic import BaseModel

from ..services.llm import Attachment

logger = logging.getLogger(__name__)


@dataclass
class ToolPrompt:
    """Prompt text plus inline attachments, for vision tools."""
    text: str
    attachments: list[Attachment] = field(default_factory=list)


PromptBuilder = Callable[[BaseModel], Union[str, ToolPrompt]]


@dataclass
class ToolEntry:
    name: str
    schema: type[BaseModel]
    role: str
    error: str
    build: PromptBuilder

    def render(self, request: BaseModel) -> ToolPrompt:
        out = self.build(request)
        if isinstance(out, str):
            return ToolPrompt(text=out)
        return out


_tools: dict[str, ToolEntry] = {}


def tool(
    name: str,
    schema: type[BaseModel],
    role: str = "",
    error: str = "Failed to generate response",
):
    """
    Decorator to register a prompt builder as a tool endpoint.

    Args:
        name:   URL segment under /api/tools/
        schema: Pydantic model the JSON body must satisfy
        role:   Expert role appended to the persona system prompt ("" → persona only)
        error:  Public message when generation fails
    """

    def decorator(func: PromptBuilder):
        if name in _tools:
            raise ValueError(f"Tool '{name}' is already registered")
        _tools[name] = ToolEntry(name=name, schema=schema, role=role, error=error, build=func)
        logger.debug("Registered tool: %s", name)
        return func

    return decorator


def get_tool(name: str) -> Optional[ToolEntry]:
    return _tools.get(name)


def get_tool_names() -> list[str]:
    """Get names of all registered tools."""
    return list(_tools)


def init_tools() -> None:
    """Import tool modules to trigger registration. Safe to call more than once."""
    from . import writing    # noqa: F401
    from . import learning   # noqa: F401
    from . import vision     # noqa: F401
    from . import lifestyle  # noqa: F401

    logger.info(
        "Tools ready: %d tools [%s]",
        len(_tools),
        ", ".join(get_tool_names()),
    )
