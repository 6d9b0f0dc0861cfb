#!/usr/bin/env python3
"""
Create a demo character and play one opening turn with the Dungeon Master.

Usage:
    python scripts/create_demo_character.py

Environment variables:
    SERVER_URL  - base URL of the server  (default: http://localhost:5000)

Prints the character ID, the session ID and the DM's reply.
"""

import json
import os
import sys
from urllib import request
from urllib.error import HTTPError, URLError

SERVER_URL = os.getenv("SERVER_URL", "http://localhost:5000")

CHARACTER_PAYLOAD = {
    "name": "Demo Ranger",
    "class": "Ranger",
    "level": 1,
    "race": "Half-Elf",
    "currentHp": 11,
    "maxHp": 11,
    "armorClass": 14,
}


def _post(path: str, body: dict) -> dict:
    req = request.Request(
        f"{SERVER_URL}{path}",
        data=json.dumps(body).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with request.urlopen(req, timeout=60) as resp:
            return json.loads(resp.read().decode("utf-8"))
    except HTTPError as exc:
        print(f"[error] HTTP {exc.code}: {exc.read().decode()}", file=sys.stderr)
        sys.exit(1)
    except URLError as exc:
        print(f"[error] Could not connect to server at {SERVER_URL}: {exc.reason}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    character = _post("/api/characters", CHARACTER_PAYLOAD)
    chat = _post(
        "/api/dm/chat",
        {"message": "I look around the meadow.", "characterId": character["id"]},
    )
    print(f"character: {character['id']}")
    print(f"session:   {chat['session']['id']}")
    print(chat["dmResponse"]["message"])
    if chat["dmResponse"].get("imageUrl"):
        print(chat["dmResponse"]["imageUrl"])
