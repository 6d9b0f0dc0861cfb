import random

MOCK_RESPONSES = (
    "You find yourself standing at the entrance of a dark, mysterious cave. The air is thick with an otherworldly mist, and you can hear strange echoes coming from within. What do you do?",
    "A goblin appears from behind a tree, wielding a rusty sword! Roll for initiative! The goblin's eyes glow with malicious intent as it prepares to attack.",
    "You discover a treasure chest hidden behind some rocks. It appears to be locked with an intricate magical mechanism. Do you attempt to pick the lock, or look for another way?",
    "The tavern is bustling with activity. A hooded figure in the corner catches your eye - they seem to be watching you intently. The barkeep approaches and offers you a drink.",
    "You hear the sound of rushing water ahead. As you round the corner, you see a magnificent waterfall cascading into a crystal-clear pool. Something glitters at the bottom of the water.",
)


def mock_narrative() -> str:
    return random.choice(MOCK_RESPONSES)
