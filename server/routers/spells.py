from typing import List
from fastapi import APIRouter, Depends
from schemas import Spell
from store import GameDataStore, get_store

router = APIRouter(prefix="/api/spells", tags=["spells"])


@router.get("", response_model=List[Spell])
def list_spells(store: GameDataStore = Depends(get_store)):
    return store.list_spells()
