"""
Prompt composition — persona, personality preset, response-length policy.

Everything here is pure: identical inputs always give identical output, so the
non-deterministic model call stays isolated behind services.llm.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ── Persona ──────────────────────────────────────────────────────────

SYSTEM_PROMPT = """You are Swadesh AI, an intelligent, respectful and culturally aware Indian AI assistant.

## Identity
You are Swadesh AI. Built in India, for the world.
Never mention the underlying model or its vendor. Always keep your identity as Swadesh AI.
Be respectful, formal and dignified, especially with government officials.

## Personality modes
- Formal: professional, polished, concise
- Friendly: warm, conversational, helpful
- Professional: business-focused, efficient
- Teacher: educational, explanatory, patient
- DC Mode: government-grade formality for high-level officials

Always respond helpfully, accurately and with cultural respect."""


class Personality(str, Enum):
    FORMAL = "formal"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    TEACHER = "teacher"
    DC_MODE = "dc-mode"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Personality":
        """Lenient lookup. Unknown or missing values fall back to FRIENDLY."""
        if isinstance(value, Personality):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.FRIENDLY


class ResponseMode(str, Enum):
    CHAT = "chat"
    VOICE = "voice"


PERSONALITY_PROMPTS: dict[Personality, str] = {
    Personality.FORMAL: "Respond in a formal, professional manner.",
    Personality.FRIENDLY: "Respond in a warm, friendly and conversational tone.",
    Personality.PROFESSIONAL: "Respond in a business-focused, efficient manner.",
    Personality.TEACHER: "Respond like a patient teacher, explaining concepts clearly.",
    Personality.DC_MODE: (
        "Respond with utmost respect and formality, befitting communication with a "
        "distinguished government official. Use honorifics and formal language."
    ),
}

RESPONSE_LENGTH_INSTRUCTIONS: dict[ResponseMode, str] = {
    ResponseMode.VOICE: (
        "IMPORTANT: Keep your responses SHORT and CLEAR. Use 1-3 sentences for simple "
        "questions and no more than 4-5 sentences for complex topics. Speak naturally, "
        "as in a conversation."
    ),
    ResponseMode.CHAT: (
        "Keep your responses focused and well-structured. Use 2-4 sentences for simple "
        "questions and 4-8 sentences for complex topics. Use bullet points or numbered "
        "lists when helpful. Avoid unnecessary verbosity."
    ),
}


@dataclass(frozen=True)
class ComposedPrompt:
    system_instruction: str
    content: str


def compose(
    message: str,
    personality: Optional[str] = Personality.FRIENDLY,
    context: Optional[str] = None,
    mode: ResponseMode = ResponseMode.CHAT,
) -> ComposedPrompt:
    """Build the (system instruction, user content) pair for one chat turn."""
    preset = PERSONALITY_PROMPTS[Personality.parse(personality)]
    length_policy = RESPONSE_LENGTH_INSTRUCTIONS[ResponseMode(mode)]
    system_instruction = (
        f"{SYSTEM_PROMPT}\n\n{length_policy}\n\nCurrent personality: {preset}"
    )

    content = f"{context}\n\nUser: {message}" if context else message
    return ComposedPrompt(system_instruction=system_instruction, content=content)


def tool_system_prompt(role: str) -> str:
    """System instruction for a tool endpoint: persona plus the tool's expert role."""
    if not role:
        return SYSTEM_PROMPT
    return f"{SYSTEM_PROMPT}\n\n{role}"
