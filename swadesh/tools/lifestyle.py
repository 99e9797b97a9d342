"""
Everyday tools — recipes, travel, resumes, health.
"""

from ..schemas import HealthAdviceRequest, RecipeRequest, ResumeRequest, TravelRequest
from .registry import tool


@tool(
    name="recipe",
    schema=RecipeRequest,
    role="You are an expert Indian chef and nutritionist, at home with traditional and fusion cuisine.",
    error="Failed to generate recipe",
)
def recipe(req: RecipeRequest) -> str:
    return (
        f'Generate a detailed recipe for "{req.query}". Dietary preference: {req.dietary}. '
        f"Cuisine: {req.cuisine}.\n"
        "Include: name, description, prep time, cook time, servings, ingredients with quantities, "
        "step-by-step instructions, tips and approximate nutrition. Format clearly with sections."
    )


@tool(
    name="travel",
    schema=TravelRequest,
    role="You are an expert travel guide with deep knowledge of India and the world.",
    error="Failed to plan travel",
)
def travel(req: TravelRequest) -> str:
    return (
        f"Create a detailed travel itinerary for {req.destination}.\n"
        f"Duration: {req.duration} | Budget: {req.budget} | Interests: {req.interests}\n"
        "Include a day-by-day plan, attractions, local food, accommodation, transport, "
        "estimated costs, etiquette and packing tips. Use clear day headings."
    )


@tool(
    name="resume",
    schema=ResumeRequest,
    role="You are an expert HR consultant and resume writer for the Indian and global job market.",
    error="Failed to build resume",
)
def resume(req: ResumeRequest) -> str:
    return (
        "Create a professional, ATS-optimized resume from this information:\n"
        f"Name: {req.name}\n"
        f"Email: {req.email}\n"
        f"Phone: {req.phone}\n"
        f"Role: {req.role}\n"
        f"Experience: {req.experience}\n"
        f"Skills: {req.skills}\n"
        f"Education: {req.education}\n"
        f"Achievements: {req.achievements}\n"
        "Include a professional summary, impact-focused experience bullets, skills and education. "
        "Use action verbs."
    )


@tool(
    name="health",
    schema=HealthAdviceRequest,
    role=(
        "You are a health and wellness advisor with knowledge of modern medicine, Ayurveda and yoga. "
        "Always state that this is general information, not medical advice, and recommend "
        "consulting a qualified doctor."
    ),
    error="Failed to get health advice",
)
def health(req: HealthAdviceRequest) -> str:
    prompts = {
        "symptoms": f"I have these symptoms: {req.symptom}. Age: {req.age}. Give possible causes, home remedies and when to see a doctor.",
        "yoga": f"Recommend yoga poses and breathing exercises for: {req.symptom}. Age: {req.age}. Include how to do each, duration and benefits.",
        "ayurveda": f"Provide Ayurvedic home remedies for: {req.symptom}. Age: {req.age}. Include herbs and dietary advice.",
        "diet": f"Create a healthy Indian diet plan for: {req.symptom}. Age: {req.age}. Cover breakfast, lunch, dinner and snacks.",
    }
    return prompts[req.type]
