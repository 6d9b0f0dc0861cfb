import logging
from schemas import Character, Spell
from services.id_service import generate_id
from store import GameDataStore, utcnow

logger = logging.getLogger(__name__)


def seed_data(store: GameDataStore) -> GameDataStore:
    """Load the sample spells and starting character."""
    store.set_spells([
        Spell(
            id=generate_id(),
            name="Fireball",
            level=3,
            school="evocation",
            casting_time="1 action",
            range="150 feet",
            components="V, S, M (a tiny ball of bat guano and sulfur)",
            duration="Instantaneous",
            description=(
                "A bright streak flashes from your pointing finger to a point you choose within range "
                "and then blossoms with a low roar into an explosion of flame."
            ),
            ritual=False,
            concentration=False,
        ),
        Spell(
            id=generate_id(),
            name="Cure Wounds",
            level=1,
            school="evocation",
            casting_time="1 action",
            range="Touch",
            components="V, S",
            duration="Instantaneous",
            description=(
                "A creature you touch regains a number of hit points equal to 1d8 + your "
                "spellcasting ability modifier."
            ),
            ritual=False,
            concentration=False,
        ),
    ])

    store.add_character(Character(
        id=generate_id(),
        name="Adventurer",
        character_class="Fighter",
        level=1,
        race="Human",
        background="Soldier",
        strength=16,
        dexterity=14,
        constitution=15,
        intelligence=12,
        wisdom=13,
        charisma=10,
        current_hp=12,
        max_hp=12,
        armor_class=16,
        proficiency_bonus=2,
        current_xp=0,
        created_at=utcnow(),
    ))

    logger.info(
        "Seeded %d character(s) and %d spell(s)",
        len(store.list_characters()),
        len(store.list_spells()),
    )
    return store
