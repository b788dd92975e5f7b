import pytest

from linkshort.core.errors import KeyspaceExhausted
from linkshort.db import repository
from linkshort.services.allocator import allocate_id


def _sequence(*values):
    it = iter(values)
    return lambda bits: next(it)


def test_allocate_returns_unused_id(db_session):
    assert allocate_id(db_session, randbits=_sequence(42)) == 42


def test_allocate_draws_32_bit_values(db_session):
    seen = []

    def randbits(bits):
        seen.append(bits)
        return 7

    allocate_id(db_session, randbits=randbits)
    assert seen == [32]


def test_allocate_retries_on_collision(db_session):
    repository.insert_link(db_session, 1, "https://example.com/one")
    repository.insert_link(db_session, 2, "https://example.com/two")

    assert allocate_id(db_session, randbits=_sequence(1, 2, 3)) == 3


def test_allocate_reuses_id_of_deleted_link(db_session):
    link = repository.insert_link(db_session, 5, "https://example.com/gone")
    repository.soft_delete(db_session, link)

    assert allocate_id(db_session, randbits=_sequence(5)) == 5


def test_allocate_gives_up_after_max_attempts(db_session):
    repository.insert_link(db_session, 9, "https://example.com/taken")

    with pytest.raises(KeyspaceExhausted):
        allocate_id(db_session, max_attempts=3, randbits=lambda bits: 9)
