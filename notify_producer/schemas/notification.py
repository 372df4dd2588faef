# notify_producer/schemas/notification.py
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class Notification(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: User = Field(..., alias="from")
    recipient: User = Field(..., alias="to")
    message: str


# Responses
class MessageOut(BaseModel):
    message: str
