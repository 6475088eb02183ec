import random

import pytest

from secret_santa.services.participants import ParticipantStore


def make_store(*names):
    return ParticipantStore(names, rng=random.Random(5))


def assert_non_self(store):
    mapping = store.assignment.as_dict()
    assert set(mapping) == set(store.participants)
    for giver, recipient in mapping.items():
        assert recipient in store.participants
        assert recipient != giver


def test_append_keeps_insertion_order():
    store = make_store()
    store.append("Alice")
    store.append("  Bob ")
    assert store.participants == ("Alice", "Bob")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_append_rejects_empty_names(name):
    store = make_store("Alice")
    with pytest.raises(ValueError):
        store.append(name)
    assert store.participants == ("Alice",)


def test_remove_at_shifts_following_entries():
    store = make_store("Alice", "Bob", "Carol", "Dave")
    assert store.remove_at(1) == "Bob"
    assert store.participants == ("Alice", "Carol", "Dave")


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_remove_at_out_of_range(index):
    store = make_store("Alice", "Bob", "Carol", "Dave")
    with pytest.raises(IndexError):
        store.remove_at(index)


def test_assignment_is_cached_until_mutation():
    store = make_store("Alice", "Bob", "Carol", "Dave")
    first = store.assignment
    assert store.assignment is first
    store.append("Erin")
    assert store.assignment is not first


def test_append_makes_odd_list_even():
    store = make_store("Alice", "Bob", "Carol")
    assert store.assignment.as_dict() == {"Alice": None, "Bob": None, "Carol": None}
    store.append("Dave")
    assert store.assignment.is_complete
    assert_non_self(store)


def test_remove_resets_to_unassigned():
    store = make_store("Alice", "Bob", "Carol", "Dave")
    assert store.assignment.is_complete
    store.remove_at(1)
    assert store.assignment.as_dict() == {"Alice": None, "Carol": None, "Dave": None}


def test_duplicate_names_are_kept():
    store = make_store("Sam")
    store.append("Sam")
    assert store.participants == ("Sam", "Sam")
    assert store.assignment.targets == (1, 0)


def test_round_trip_keeps_the_drawn_pairs():
    store = make_store("Alice", "Bob", "Carol", "Dave")
    drawn = store.assignment
    restored = ParticipantStore.from_dict(store.to_dict(), rng=random.Random(99))
    assert restored.assignment == drawn


def test_restore_with_mismatched_targets_redraws():
    restored = ParticipantStore.from_dict(
        {"participants": ["Alice", "Bob"], "targets": [None, None, None]},
        rng=random.Random(1),
    )
    assert restored.assignment.as_dict() == {"Alice": "Bob", "Bob": "Alice"}


def test_from_empty_session():
    store = ParticipantStore.from_dict(None)
    assert store.participants == ()
    assert store.assignment.pairs() == []


def test_append_refuses_past_the_limit():
    store = ParticipantStore(["Alice", "Bob"], max_participants=3)
    store.append("Carol")
    assert store.is_full
    with pytest.raises(ValueError):
        store.append("Dave")
    assert store.participants == ("Alice", "Bob", "Carol")


def test_no_limit_by_default():
    store = make_store(*[f"p{i}" for i in range(100)])
    assert not store.is_full
    store.append("one more")
    assert len(store) == 101
