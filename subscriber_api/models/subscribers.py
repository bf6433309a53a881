# subscriber_api/models/subscribers.py

from typing import Optional

from pydantic import BaseModel, Field


class Subscriber(BaseModel):
    id: str = Field(alias="_id")
    name: str
    subscribed_channel: str = Field(alias="subscribedChannel")

    class Config:
        populate_by_name = True


class SubscriberCreate(BaseModel):
    # Both optional here: presence is checked by the service so that a
    # missing field is a 400 with our message, not a framework 422.
    name: Optional[str] = None
    subscribed_channel: Optional[str] = Field(default=None, alias="subscribedChannel")


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    message: str
    error: str
