from typing import List
from fastapi import APIRouter, Depends
from errors import NotFoundError
from schemas import Character, CharacterCreate
from services.id_service import generate_id
from store import GameDataStore, get_store, utcnow

router = APIRouter(prefix="/api/characters", tags=["characters"])

# Server-assigned; never taken from the request body.
_RESERVED = ("id", "createdAt", "created_at")


@router.post("", response_model=Character, response_model_exclude_unset=True)
def create_character(body: CharacterCreate, store: GameDataStore = Depends(get_store)):
    fields = body.model_dump(exclude_unset=True)
    for key in _RESERVED:
        fields.pop(key, None)
    character = Character(id=generate_id(), created_at=utcnow(), **fields)
    return store.add_character(character)


@router.get("", response_model=List[Character], response_model_exclude_unset=True)
def list_characters(store: GameDataStore = Depends(get_store)):
    return store.list_characters()


@router.get("/{character_id}", response_model=Character, response_model_exclude_unset=True)
def get_character(character_id: str, store: GameDataStore = Depends(get_store)):
    character = store.find_character(character_id)
    if character is None:
        raise NotFoundError("Character not found")
    return character
