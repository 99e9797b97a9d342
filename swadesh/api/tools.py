"""
Tool endpoints. One route, many registered tools.

POST /api/tools/{name} — body validated against the tool's schema → {"result": text}
"""

import logging

import pydantic
from fastapi import APIRouter, Body

from ..core.errors import GenerationFailed, NotFound, ValidationError, format_validation_errors
from ..schemas import ToolResult
from ..services import llm
from ..services.prompts import tool_system_prompt
from ..tools.registry import get_tool

logger = logging.getLogger(__name__)

tools_router = APIRouter(prefix="/tools", tags=["tools"])


@tools_router.post("/{name}", response_model=ToolResult)
async def run_tool(name: str, body: dict = Body(...)):
    entry = get_tool(name)
    if entry is None:
        raise NotFound(f"Unknown tool: {name}")

    try:
        request = entry.schema.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError(format_validation_errors(e.errors())) from e

    prompt = entry.render(request)
    try:
        result = await llm.generate(
            tool_system_prompt(entry.role), prompt.text, prompt.attachments or None,
        )
    except GenerationFailed as e:
        logger.error("Tool %s failed: %s", name, e)
        raise GenerationFailed(entry.error) from e

    return ToolResult(result=result)
