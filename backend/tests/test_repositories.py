"""
Tests for the SQLAlchemy stores: locking SQL and lookups.
"""

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from hotel_booking.repositories import BookingRepository, RoomRepository
from hotel_booking.repositories.booking_repository import user_lock_statement
from tests.factories import create_booking, create_user


def test_user_lock_does_not_block_foreign_key_inserts():
    sql = str(user_lock_statement(1).compile(dialect=postgresql.dialect()))
    assert sql.rstrip().endswith("FOR NO KEY UPDATE")


def test_user_lock_renders_no_locking_clause_on_sqlite():
    sql = str(user_lock_statement(1).compile(dialect=sqlite.dialect()))
    assert "FOR UPDATE" not in sql
    assert "FOR NO KEY UPDATE" not in sql


@pytest.mark.asyncio
async def test_lock_user_and_locked_room_read(db_session, test_user, room):
    await BookingRepository(db_session).lock_user(test_user.id)
    locked = await RoomRepository(db_session).find_by_id(room.id, for_update=True)
    assert locked.id == room.id


@pytest.mark.asyncio
async def test_find_with_room_by_user_id_returns_first_booking(db_session, room, other_room):
    user = await create_user(db_session)
    first = await create_booking(db_session, user.id, room.id)
    await create_booking(db_session, user.id, other_room.id)

    booking = await BookingRepository(db_session).find_with_room_by_user_id(user.id)

    assert booking.id == first.id
    assert booking.room.id == room.id


@pytest.mark.asyncio
async def test_update_room_reloads_room_relationship(db_session, test_user, room, other_room):
    repository = BookingRepository(db_session)
    booking = await create_booking(db_session, test_user.id, room.id)
    await repository.find_with_room_by_user_id(test_user.id)

    moved = await repository.update_room(booking.id, other_room.id)

    assert moved.id == booking.id
    assert moved.room_id == other_room.id
    assert moved.room.id == other_room.id
    assert await repository.count_by_room_id(room.id) == 0
    assert await repository.count_by_room_id(other_room.id) == 1
