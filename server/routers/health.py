from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from config import settings
from schemas import HealthOut
from store import utcnow

router = APIRouter(tags=["health"])

WELCOME = "Welcome to Lonely D&D! The server is live. Try hitting /health or /api/characters."


@router.get("/", response_class=PlainTextResponse)
def index():
    return WELCOME


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", timestamp=utcnow(), openai_configured=settings.openai_configured)
