from typing import List
from fastapi import APIRouter, Depends
from errors import NotFoundError
from schemas import GameSession
from store import GameDataStore, get_store

router = APIRouter(tags=["sessions"])


@router.get("/api/characters/{character_id}/game-sessions", response_model=List[GameSession])
def list_character_sessions(character_id: str, store: GameDataStore = Depends(get_store)):
    return store.sessions_for_character(character_id)


@router.get("/api/game-sessions/{session_id}", response_model=GameSession)
def get_session(session_id: str, store: GameDataStore = Depends(get_store)):
    session = store.find_session(session_id)
    if session is None:
        raise NotFoundError("Session not found")
    return session
