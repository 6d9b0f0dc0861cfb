from typing import Any
from fastapi import APIRouter, Depends
from schemas import ChatRequest, ChatResponse
from services.dm_service import handle_chat
from services.llm_client import get_llm_client
from store import GameDataStore, get_store

router = APIRouter(prefix="/api/dm", tags=["dm"])


@router.post("/chat", response_model=ChatResponse)
async def dm_chat(
    body: ChatRequest,
    store: GameDataStore = Depends(get_store),
    client: Any = Depends(get_llm_client),
):
    return await handle_chat(store, client, body)
