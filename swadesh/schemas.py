"""
Request/response shapes for every endpoint.

Wire format is camelCase (imageBase64, isPinned, ...); snake_case field names
are accepted too.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .models.memory import MemoryCategory
from .services.prompts import Personality


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ── Chat ─────────────────────────────────────────────────────────────

class ChatRequest(CamelModel):
    message: str = Field(min_length=1)
    personality: Optional[Personality] = None
    context: Optional[str] = None


class ChatResponse(CamelModel):
    response: str


# ── Users ────────────────────────────────────────────────────────────

class UserOut(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    setup_completed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileOut(CamelModel):
    user: UserOut
    memories_count: int


class UserSettings(CamelModel):
    """Client preference document. Defaults match a fresh install."""
    theme: Literal["light", "dark"] = "dark"
    personality: Personality = Personality.FRIENDLY
    tts_speed: float = Field(default=1.0, ge=0.5, le=2.0)
    tts_pitch: float = Field(default=1.0, ge=0.5, le=2.0)
    tts_enabled: bool = True
    tts_voice_name: str = ""
    music_volume: float = Field(default=0.5, ge=0.0, le=1.0)
    music_loop: bool = True
    music_auto_play: bool = False
    language: Literal["en", "hi", "ta", "te", "bn"] = "en"
    wallpaper: Literal["gradient", "peacock", "lotus", "tricolor", "mandala"] = "gradient"
    dc_mode_auto: bool = True


# ── Memories ─────────────────────────────────────────────────────────

class MemoryCreate(CamelModel):
    content: str = Field(min_length=1)
    category: MemoryCategory = MemoryCategory.GENERAL
    tags: str = ""
    is_pinned: bool = False


class MemoryUpdate(CamelModel):
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[MemoryCategory] = None
    tags: Optional[str] = None
    is_pinned: Optional[bool] = None

    @model_validator(mode="after")
    def _has_changes(self):
        if not self.model_fields_set:
            raise ValueError("At least one of content, category, tags or isPinned is required")
        return self


class MemoryOut(CamelModel):
    id: str
    user_id: str
    content: str
    category: str
    tags: str = ""
    is_pinned: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SuccessResponse(CamelModel):
    success: bool = True


# ── Health ───────────────────────────────────────────────────────────

class HealthOut(CamelModel):
    status: str
    app: str
    version: str
    uptime: int
    db: bool
    ai: bool
    timestamp: str


# ── Tools ────────────────────────────────────────────────────────────

class ToolResult(CamelModel):
    result: str


class DocumentRequest(CamelModel):
    content: str
    action: Literal["summarize", "explain", "translate", "extract-notes", "highlight"]
    target_language: Optional[str] = None


class CodeRequest(CamelModel):
    code: str
    action: Literal["generate", "debug", "optimize", "explain"]
    language: str = "javascript"
    prompt: Optional[str] = None


class StudyRequest(CamelModel):
    topic: str
    action: Literal["ncert-solution", "mcq-generate", "long-answer", "math-solve", "explain-diagram"]
    grade: Optional[str] = None
    subject: Optional[str] = None


class LanguageRequest(CamelModel):
    text: str
    source_language: str
    target_language: str
    transliterate: bool = False


class SearchRequest(CamelModel):
    query: str
    type: Literal["general", "news", "academic"] = "general"


class ImageRequest(CamelModel):
    image_base64: str
    action: Literal["ocr", "detect-objects", "analyze-scene", "extract-text"]


class CreativeRequest(CamelModel):
    type: Literal["script", "story", "poem", "video-idea"]
    prompt: str
    language: Literal["en", "hi"] = "en"


class OcrRequest(CamelModel):
    image_base64: str = Field(min_length=1)
    mime_type: str = "image/jpeg"


class ImageGenRequest(CamelModel):
    prompt: str = Field(min_length=1)
    style: Literal["realistic", "artistic", "cartoon", "indian", "3d", "sketch"] = "realistic"


class GrammarRequest(CamelModel):
    text: str = Field(min_length=1)
    mode: Literal["check", "improve", "formal", "casual", "hindi"] = "check"


class RecipeRequest(CamelModel):
    query: str = Field(min_length=1)
    dietary: str = "any"
    cuisine: str = "Indian"


class TravelRequest(CamelModel):
    destination: str = Field(min_length=1)
    duration: str = "3 days"
    budget: str = "moderate"
    interests: str = "culture, food, sightseeing"


class ResumeRequest(CamelModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    email: str = ""
    phone: str = ""
    experience: str = ""
    skills: str = ""
    education: str = ""
    achievements: str = ""


class HealthAdviceRequest(CamelModel):
    symptom: str = "general wellness"
    age: str = "adult"
    type: Literal["symptoms", "yoga", "ayurveda", "diet"] = "symptoms"
