from typing import List

from pydantic import BaseModel, Field, field_validator

from notification_facade.notifications.factory import ChannelType


class SubscriberConfig(BaseModel):
    """A demo user subscribed to a channel at start-up."""

    name: str = Field(min_length=1)
    channel: str

    @field_validator("channel")
    @classmethod
    def _known_channel(cls, value: str) -> str:
        # Raises InvalidChannelError (a ValueError), reported by pydantic
        ChannelType.from_label(value)
        return value


def default_subscribers() -> List[SubscriberConfig]:
    return [
        SubscriberConfig(name="User1", channel="Email"),
        SubscriberConfig(name="User2", channel="SMS"),
    ]


class NotificationConfig(BaseModel):
    subscribers: List[SubscriberConfig] = Field(default_factory=default_subscribers)
