"""
Learning tools — study help, code assistance, search summaries.
"""

from ..schemas import CodeRequest, SearchRequest, StudyRequest
from .registry import tool


@tool(
    name="study",
    schema=StudyRequest,
    role="You are an expert Indian education tutor familiar with the NCERT curriculum. Provide accurate, student-friendly explanations.",
    error="Failed to provide study assistance",
)
def study(req: StudyRequest) -> str:
    scope = f"For Class {req.grade} {req.subject}: " if req.grade and req.subject else ""
    prompts = {
        "ncert-solution": f"{scope}Provide a detailed NCERT-style solution for: {req.topic}. Include a step-by-step explanation.",
        "mcq-generate": f"{scope}Generate 5 multiple choice questions with answers and explanations on: {req.topic}",
        "long-answer": f"{scope}Write a comprehensive long answer for: {req.topic}. Include an introduction, main points and a conclusion.",
        "math-solve": f"Solve the following math problem step by step, showing all work: {req.topic}",
        "explain-diagram": f"Explain the following diagram or concept in detail: {req.topic}. Describe all components and how they relate.",
    }
    return prompts[req.action]


@tool(
    name="code",
    schema=CodeRequest,
    role="You are an expert programmer. Produce clean, well-commented code and be thorough when debugging or explaining.",
    error="Failed to process code",
)
def code(req: CodeRequest) -> str:
    if req.action == "generate":
        return f"Generate {req.language} code for the following requirement:\n\n{req.prompt or req.code}"
    prompts = {
        "debug": f"Debug the following {req.language} code and explain the issues found:",
        "optimize": f"Optimize the following {req.language} code for performance and readability:",
        "explain": f"Explain the following {req.language} code in detail, including what each part does:",
    }
    return f"{prompts[req.action]}\n\n{req.code}"


@tool(
    name="search",
    schema=SearchRequest,
    role="You are a search and research assistant. Provide accurate, well-organized information.",
    error="Failed to search",
)
def search(req: SearchRequest) -> str:
    focus = {
        "general": "Provide a comprehensive answer",
        "news": "Focus on recent news and current events",
        "academic": "Provide an academic, research-focused response with citations",
    }
    return f"{focus[req.type]} for the following query: {req.query}"
