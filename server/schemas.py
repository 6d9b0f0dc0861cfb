from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def reject_double_spelling(cls, data):
        # A field may arrive by alias or by name, never both
        if isinstance(data, dict):
            for name, field in cls.model_fields.items():
                if field.alias and field.alias != name and field.alias in data and name in data:
                    raise ValueError(f"'{field.alias}' and '{name}' name the same field")
        return data


class OpenRecord(CamelModel):
    """Typed core fields plus any extra attributes the caller sends."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class CharacterCreate(OpenRecord):
    name: Optional[str] = None
    character_class: Optional[str] = Field(None, alias="class")
    level: Optional[int] = None
    race: Optional[str] = None
    background: Optional[str] = None
    strength: Optional[int] = None
    dexterity: Optional[int] = None
    constitution: Optional[int] = None
    intelligence: Optional[int] = None
    wisdom: Optional[int] = None
    charisma: Optional[int] = None
    current_hp: Optional[int] = None
    max_hp: Optional[int] = None
    armor_class: Optional[int] = None
    proficiency_bonus: Optional[int] = None
    current_xp: Optional[int] = None


class Character(CharacterCreate):
    id: str
    created_at: datetime


class QuestCreate(OpenRecord):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class Quest(QuestCreate):
    id: str
    created_at: datetime


class Spell(CamelModel):
    id: str
    name: str
    level: int
    school: str
    casting_time: str
    range: str
    components: str
    duration: str
    description: str
    ritual: bool
    concentration: bool


class Message(CamelModel):
    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    image_url: Optional[str] = None

    @model_serializer(mode="wrap")
    def drop_user_image(self, handler):
        data = handler(self)
        if self.role == "user":
            data.pop("imageUrl", None)
            data.pop("image_url", None)
        return data


class GameSession(CamelModel):
    id: str
    character_id: Optional[str] = None
    messages: List[Message] = []
    current_location: str
    location_description: str
    created_at: datetime
    last_updated: datetime


class ChatRequest(CamelModel):
    message: Optional[str] = None
    character_id: Optional[str] = None
    session_id: Optional[str] = None


class DMResponse(CamelModel):
    message: str
    image_url: Optional[str] = None


class ChatResponse(CamelModel):
    dm_response: DMResponse
    session: GameSession


class HealthOut(CamelModel):
    status: str
    timestamp: datetime
    openai_configured: bool
