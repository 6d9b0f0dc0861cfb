import threading
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import Request
from schemas import Character, GameSession, Message, Quest, Spell
from services.id_service import generate_id

STARTING_LOCATION = "Starting Area"
STARTING_LOCATION_DESCRIPTION = "A peaceful meadow where your adventure begins"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameDataStore:
    """In-memory collections for one process. Nothing is persisted.

    Every read and write goes through one re-entrant lock: sync routes run in
    the thread pool while the chat route runs on the event loop.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.characters: List[Character] = []
        self.sessions: List[GameSession] = []
        self.quests: List[Quest] = []
        self.spells: List[Spell] = []

    # Characters

    def add_character(self, character: Character) -> Character:
        with self._lock:
            self.characters.append(character)
        return character

    def list_characters(self) -> List[Character]:
        with self._lock:
            return list(self.characters)

    def find_character(self, character_id: Optional[str]) -> Optional[Character]:
        if not character_id:
            return None
        with self._lock:
            return next((c for c in self.characters if c.id == character_id), None)

    # Quests

    def add_quest(self, quest: Quest) -> Quest:
        with self._lock:
            self.quests.append(quest)
        return quest

    def list_quests(self) -> List[Quest]:
        with self._lock:
            return list(self.quests)

    # Spells

    def set_spells(self, spells: List[Spell]):
        with self._lock:
            self.spells = list(spells)

    def list_spells(self) -> List[Spell]:
        with self._lock:
            return list(self.spells)

    # Sessions

    def find_session(self, session_id: Optional[str]) -> Optional[GameSession]:
        if not session_id:
            return None
        with self._lock:
            return next((s for s in self.sessions if s.id == session_id), None)

    def sessions_for_character(self, character_id: str) -> List[GameSession]:
        with self._lock:
            return [s for s in self.sessions if s.character_id == character_id]

    def record_exchange(
        self,
        session_id: Optional[str],
        character_id: Optional[str],
        user_content: str,
        assistant_content: str,
        image_url: Optional[str] = None,
    ) -> GameSession:
        """Find or create the session, then append the user/assistant pair.

        Runs entirely under the store lock so two concurrent requests for the
        same unknown session id end up sharing one session.
        """
        with self._lock:
            session = self.find_session(session_id)
            if session is None:
                now = utcnow()
                session = GameSession(
                    id=session_id or generate_id(),
                    character_id=character_id,
                    messages=[],
                    current_location=STARTING_LOCATION,
                    location_description=STARTING_LOCATION_DESCRIPTION,
                    created_at=now,
                    last_updated=now,
                )
                self.sessions.append(session)

            session.messages.append(
                Message(id=generate_id(), role="user", content=user_content, timestamp=utcnow())
            )
            session.messages.append(
                Message(
                    id=generate_id(),
                    role="assistant",
                    content=assistant_content,
                    timestamp=utcnow(),
                    image_url=image_url,
                )
            )
            session.last_updated = max(session.last_updated, utcnow())
            return session


def get_store(request: Request) -> GameDataStore:
    return request.app.state.store
