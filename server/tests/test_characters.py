def test_seeded_character_listed(client):
    characters = client.get("/api/characters").json()
    assert len(characters) == 1
    seeded = characters[0]
    assert seeded["name"] == "Adventurer"
    assert seeded["class"] == "Fighter"
    assert seeded["armorClass"] == 16
    assert "createdAt" in seeded


def test_create_then_get_returns_same_record(client, character):
    assert character["id"]
    assert character["createdAt"]
    assert character["name"] == "Lyra"
    assert character["class"] == "Wizard"

    resp = client.get(f"/api/characters/{character['id']}")
    assert resp.status_code == 200
    assert resp.json() == character


def test_extra_fields_are_kept(client):
    resp = client.post(
        "/api/characters",
        json={"name": "Pip", "alignment": "Chaotic Good", "inventory": ["rope", "lantern"]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["alignment"] == "Chaotic Good"
    assert data["inventory"] == ["rope", "lantern"]
    # Only supplied fields are echoed back
    assert "race" not in data


def test_caller_cannot_choose_id(client):
    data = client.post("/api/characters", json={"id": "hijack", "name": "Mal"}).json()
    assert data["id"] != "hijack"
    assert client.get("/api/characters/hijack").status_code == 404


def test_invalid_field_type_is_rejected(client):
    resp = client.post("/api/characters", json={"name": "Bad", "level": "very high"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_unknown_character_is_404(client):
    resp = client.get("/api/characters/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Character not found"}


def test_created_character_is_listed(client, character):
    ids = [c["id"] for c in client.get("/api/characters").json()]
    assert character["id"] in ids
    assert len(ids) == 2


def test_same_field_under_two_spellings_is_rejected(client):
    resp = client.post("/api/characters", json={"class": "Wizard", "character_class": "Rogue"})
    assert resp.status_code == 400
    assert "error" in resp.json()

    resp = client.post("/api/characters", json={"currentHp": 5, "current_hp": 7})
    assert resp.status_code == 400
    assert len(client.get("/api/characters").json()) == 1


def test_snake_case_spelling_alone_is_accepted(client):
    data = client.post("/api/characters", json={"name": "Tam", "current_hp": 7}).json()
    assert data["currentHp"] == 7
