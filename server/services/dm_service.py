import logging
from dataclasses import dataclass
from typing import Any, Optional
from config import settings
from errors import UpstreamServiceError, ValidationError
from schemas import Character, ChatRequest, ChatResponse, DMResponse
from services.narrative_service import mock_narrative
from store import GameDataStore

logger = logging.getLogger(__name__)

UNKNOWN_CHARACTER = "Unknown character"
IMAGE_TRIGGERS = ("enter", "look", "explore")

SYSTEM_PROMPT = """You are an expert Dungeon Master for a single-player D&D campaign. Create engaging, immersive responses to player actions and choices.

Current Character: {character_context}

Guidelines:
- Always stay in character as the DM and friend
- Respond to player actions with vivid descriptions
- Create opportunities for adventure and choice
- Include dialogue from NPCs when appropriate
- Describe scenes in detail to enhance immersion
- Include dice rolls and game mechanics when appropriate
- Create dynamic encounters based on player choices
- Make the story feel personal and epic

Respond in a way that moves the story forward and gives the player meaningful choices."""

IMAGE_PROMPT = (
    "Fantasy D&D scene: {message}. High quality digital art, detailed, atmospheric, "
    "cinematic lighting, fantasy art style."
)


@dataclass(frozen=True)
class NarrativeResult:
    """DM narration plus where it came from: "upstream" or "mock"."""
    message: str
    source: str


def build_character_context(character: Optional[Character]) -> str:
    if character is None:
        return UNKNOWN_CHARACTER
    return (
        f"Character: {character.name}, Level {character.level} {character.race} "
        f"{character.character_class}. HP: {character.current_hp}/{character.max_hp}, "
        f"AC: {character.armor_class}"
    )


def wants_illustration(message: str) -> bool:
    lowered = message.lower()
    return any(trigger in lowered for trigger in IMAGE_TRIGGERS)


async def _complete(client: Any, character_context: str, message: str) -> str:
    try:
        response = await client.chat.completions.create(
            model=settings.DM_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT.format(character_context=character_context)},
                {"role": "user", "content": message},
            ],
            max_tokens=settings.DM_MAX_TOKENS,
            temperature=settings.DM_TEMPERATURE,
        )
        content = response.choices[0].message.content
    except Exception as exc:
        raise UpstreamServiceError(f"Chat completion failed: {exc}") from exc
    if not content:
        raise UpstreamServiceError("Chat completion returned no content")
    return content


async def _illustrate(client: Any, message: str) -> str:
    try:
        response = await client.images.generate(
            model=settings.IMAGE_MODEL,
            prompt=IMAGE_PROMPT.format(message=message),
            n=1,
            size="1024x1024",
            quality="standard",
        )
        url = response.data[0].url
    except Exception as exc:
        raise UpstreamServiceError(f"Image generation failed: {exc}") from exc
    if not url:
        raise UpstreamServiceError("Image generation returned no URL")
    return url


async def generate_narrative(client: Any, character_context: str, message: str) -> NarrativeResult:
    if client is None:
        return NarrativeResult(message=mock_narrative(), source="mock")
    try:
        text = await _complete(client, character_context, message)
    except UpstreamServiceError as e:
        logger.warning("OpenAI API error, using mock narrative: %s", e.message)
        return NarrativeResult(message=mock_narrative(), source="mock")
    return NarrativeResult(message=text, source="upstream")


async def generate_illustration(client: Any, message: str) -> Optional[str]:
    try:
        return await _illustrate(client, message)
    except UpstreamServiceError as e:
        logger.warning("Image generation skipped: %s", e.message)
        return None


async def handle_chat(store: GameDataStore, client: Any, body: ChatRequest) -> ChatResponse:
    if not body.message:
        raise ValidationError("Message is required")

    character = store.find_character(body.character_id)
    narrative = await generate_narrative(client, build_character_context(character), body.message)

    image_url = None
    # Illustrations only accompany upstream narration.
    if narrative.source == "upstream" and wants_illustration(body.message):
        image_url = await generate_illustration(client, body.message)

    session = store.record_exchange(
        body.session_id,
        body.character_id,
        body.message,
        narrative.message,
        image_url=image_url,
    )
    logger.debug("Chat turn recorded in session %s (source=%s)", session.id, narrative.source)

    return ChatResponse(
        dm_response=DMResponse(message=narrative.message, image_url=image_url),
        session=session,
    )
