from typing import List
from fastapi import APIRouter, Depends
from schemas import Quest, QuestCreate
from services.id_service import generate_id
from store import GameDataStore, get_store, utcnow

router = APIRouter(prefix="/api/quests", tags=["quests"])


@router.get("", response_model=List[Quest], response_model_exclude_unset=True)
def list_quests(store: GameDataStore = Depends(get_store)):
    return store.list_quests()


@router.post("", response_model=Quest, response_model_exclude_unset=True)
def create_quest(body: QuestCreate, store: GameDataStore = Depends(get_store)):
    fields = body.model_dump(exclude_unset=True)
    for key in ("id", "createdAt", "created_at"):
        fields.pop(key, None)
    quest = Quest(id=generate_id(), created_at=utcnow(), **fields)
    return store.add_quest(quest)
