import pytest

from coverletter.sessions import DEFAULT_CAPACITY, GenerationSession, SessionStore


def make_session(n: int) -> GenerationSession:
    return GenerationSession(cover_letter=f"letter {n}", bullets=f"• bullet {n}", role_title="Scientist",
                             company_name=f"Company {n}")


def test_put_and_get_round_trip():
    store = SessionStore()
    session = make_session(1)

    session_id = store.put(session)

    assert session.id == session_id
    stored = store.get(session_id)
    assert stored.cover_letter == "letter 1"
    assert stored.bullets == "• bullet 1"
    assert stored.created_at is not None


def test_missing_session_is_none():
    store = SessionStore()
    assert store.get("nonexistent") is None
    assert "nonexistent" not in store


def test_eleventh_insert_evicts_the_first():
    store = SessionStore()
    ids = [store.put(make_session(n)) for n in range(11)]

    assert DEFAULT_CAPACITY == 10
    assert len(store) == 10
    assert store.get(ids[0]) is None
    assert all(store.get(i) is not None for i in ids[1:])
    assert store.ids() == ids[1:]


def test_ids_are_unique_and_time_ordered():
    store = SessionStore(capacity=100)
    ids = [store.put(make_session(n)) for n in range(50)]

    assert len(set(ids)) == 50
    assert [int(i) for i in ids] == sorted(int(i) for i in ids)
    assert ids == sorted(ids)


def test_reads_do_not_change_eviction_order():
    store = SessionStore(capacity=2)
    first = store.put(make_session(1))
    second = store.put(make_session(2))

    # Reading the oldest entry must not protect it from eviction
    store.get(first)
    third = store.put(make_session(3))

    assert store.get(first) is None
    assert store.ids() == [second, third]


def test_custom_eviction_policy():
    evicted = []

    def evict_newest_but_keep(entries):
        key, _ = entries.popitem(last=True)
        evicted.append(key)
        return key

    store = SessionStore(capacity=1, evict=evict_newest_but_keep)
    kept = store.put(make_session(1))
    dropped = store.put(make_session(2))

    assert evicted == [dropped]
    assert store.ids() == [kept]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        SessionStore(capacity=0)
