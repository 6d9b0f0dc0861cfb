from concurrent.futures import ThreadPoolExecutor
from services.id_service import generate_id
from store import GameDataStore


def test_ids_are_unique():
    ids = {generate_id() for _ in range(5000)}
    assert len(ids) == 5000
    assert all(i.isalnum() and i == i.lower() for i in ids)


def test_record_exchange_creates_then_appends():
    store = GameDataStore()
    session = store.record_exchange("s1", "c1", "hello", "welcome")
    assert session.character_id == "c1"
    assert [m.role for m in session.messages] == ["user", "assistant"]

    again = store.record_exchange("s1", "c1", "next", "onward")
    assert again is session
    assert len(session.messages) == 4
    assert session.last_updated >= session.created_at
    assert len(store.sessions) == 1


def test_record_exchange_keeps_first_character_id():
    store = GameDataStore()
    store.record_exchange("s1", "c1", "a", "b")
    session = store.record_exchange("s1", "c2", "c", "d")
    assert session.character_id == "c1"


def test_concurrent_exchanges_share_one_session():
    store = GameDataStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: store.record_exchange("shared", None, f"u{i}", f"a{i}"), range(50)))

    assert len(store.sessions) == 1
    messages = store.sessions[0].messages
    assert len(messages) == 100
    # Pairs are never interleaved
    for user, assistant in zip(messages[::2], messages[1::2]):
        assert user.role == "user" and assistant.role == "assistant"
        assert user.content[1:] == assistant.content[1:]
