"""
Vision tools. Images travel to the model as inline attachments.
"""

from ..schemas import ImageGenRequest, ImageRequest, OcrRequest
from ..services.llm import Attachment
from .registry import ToolPrompt, tool

STYLE_GUIDES = {
    "realistic": "photorealistic, highly detailed, professional photography style",
    "artistic": "artistic, painterly, impressionist style with vibrant colors",
    "cartoon": "cartoon style, colorful, playful, animated",
    "indian": "traditional Indian folk art, Madhubani and Warli inspired, vibrant cultural motifs",
    "3d": "3D render, CGI, modern high-tech look",
    "sketch": "pencil sketch, hand-drawn, detailed line art",
}


@tool(name="image", schema=ImageRequest, error="Failed to analyze image")
def image(req: ImageRequest) -> ToolPrompt:
    prompts = {
        "ocr": "Extract all text from this image exactly as it appears.",
        "detect-objects": "Identify and list all objects visible in this image with their approximate locations.",
        "analyze-scene": "Describe this image in detail, including the scene, setting, colors and notable elements.",
        "extract-text": "Extract and organize any text, numbers or symbols from this image in a structured format.",
    }
    return ToolPrompt(
        text=prompts[req.action],
        attachments=[Attachment(data=req.image_base64)],
    )


@tool(name="ocr", schema=OcrRequest, error="Failed to extract text from image")
def ocr(req: OcrRequest) -> ToolPrompt:
    return ToolPrompt(
        text=(
            "Extract ALL text from this image exactly as it appears. Preserve formatting "
            "and line breaks. Transcribe handwriting accurately and identify each language "
            "present. Return ONLY the extracted text."
        ),
        attachments=[Attachment(data=req.image_base64, mime_type=req.mime_type)],
    )


@tool(name="image-gen", schema=ImageGenRequest, error="Failed to generate image")
def image_gen(req: ImageGenRequest) -> str:
    # Text-only: a vivid description plus a prompt for an external image model
    return (
        f'Write an extremely detailed, vivid description of this image for an artist: "{req.prompt}" '
        f"in {STYLE_GUIDES[req.style]} style. Use 3-4 sentences covering colors, composition, "
        'lighting and atmosphere. Then on a new line write "PROMPT:" followed by a concise '
        "text-to-image prompt for it."
    )
