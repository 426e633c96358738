"""
Pydantic schemas for booking request/response validation.
Field names are camelCase on the wire.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BookingBody(BaseModel):
    room_id: int = Field(..., alias="roomId")

    @field_validator("room_id", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # Numeric strings such as "3" stay accepted; true/false do not
        if isinstance(value, bool):
            raise ValueError("roomId must be an integer")
        return value


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class BookingWithRoomResponse(BaseModel):
    id: int
    room: RoomResponse = Field(..., serialization_alias="Room")

    model_config = {"from_attributes": True}


class BookingIdResponse(BaseModel):
    booking_id: int = Field(..., serialization_alias="bookingId")
