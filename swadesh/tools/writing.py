"""
Writing tools — documents, translation, grammar, creative content.
"""

from ..schemas import CreativeRequest, DocumentRequest, GrammarRequest, LanguageRequest
from .registry import tool

LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
    "bn": "Bengali",
}


@tool(
    name="document",
    schema=DocumentRequest,
    role="You are a document analysis expert. Provide clear, accurate and helpful analysis.",
    error="Failed to analyze document",
)
def document(req: DocumentRequest) -> str:
    prompts = {
        "summarize": "Summarize the following document concisely, highlighting key points:",
        "explain": "Explain the following document in detail, breaking down complex concepts:",
        "translate": f"Translate the following text to {req.target_language or 'Hindi'}:",
        "extract-notes": "Extract the key notes and important points from the following document in a structured format:",
        "highlight": "Identify the most important sentences and concepts in the following document:",
    }
    return f"{prompts[req.action]}\n\n{req.content}"


@tool(
    name="language",
    schema=LanguageRequest,
    role="You are a professional translator specializing in Indian languages. Provide accurate, natural translations.",
    error="Failed to translate",
)
def language(req: LanguageRequest) -> str:
    source = LANGUAGE_NAMES.get(req.source_language, req.source_language)
    target = LANGUAGE_NAMES.get(req.target_language, req.target_language)
    extra = ", and also provide Roman transliteration" if req.transliterate else ""
    return f"Translate the following {source} text to {target}{extra}:\n\n{req.text}"


@tool(
    name="grammar",
    schema=GrammarRequest,
    role="You are an expert language editor and writing assistant.",
    error="Failed to check grammar",
)
def grammar(req: GrammarRequest) -> str:
    prompts = {
        "check": "Check the following text for grammar, spelling, punctuation and style errors. List each error with its correction and an explanation:",
        "improve": "Rewrite the following text to be clearer and more professional while preserving its meaning:",
        "formal": "Convert the following text to formal English:",
        "casual": "Rewrite the following text in a friendly, casual tone:",
        "hindi": "Check the grammar of the following Hindi text and provide corrections:",
    }
    return f"{prompts[req.mode]}\n\n{req.text}"


@tool(
    name="creative",
    schema=CreativeRequest,
    role="You are a creative writer and content creator. Generate engaging, original content.",
    error="Failed to generate content",
)
def creative(req: CreativeRequest) -> str:
    poem_language = "Hindi" if req.language == "hi" else "English"
    prompts = {
        "script": f"Write a detailed video script for: {req.prompt}. Include scene descriptions, dialogue and directions.",
        "story": f"Write a creative short story based on: {req.prompt}. Include interesting characters and a satisfying ending.",
        "poem": f"Write a {poem_language} poem about: {req.prompt}. Use an appropriate rhyme scheme.",
        "video-idea": f"Generate 5 creative video ideas for: {req.prompt}. Give a title, concept and brief outline for each.",
    }
    return prompts[req.type]
