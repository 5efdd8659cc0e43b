#!/usr/bin/env python3
"""
SMS Channels - delivery of one-time codes.

Only an in-process mock is shipped: it logs the message and keeps it in
memory so flows can be exercised end to end without a provider.

Usage:
    from notification.sms import SmsChannelFactory

    channel = SmsChannelFactory.get_channel('mock')
    channel.send(phone, body)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


def _mask_phone(phone: str) -> str:
    """Keep the last four digits of a phone number for logs."""
    if len(phone) <= 4:
        return '*' * len(phone)
    return '*' * (len(phone) - 4) + phone[-4:]


class SmsChannel(ABC):
    """
    Abstract base class for SMS delivery channels.
    """

    @property
    @abstractmethod
    def channel_type(self) -> str:
        """Return the channel type identifier."""
        pass

    @abstractmethod
    def send(self, phone: str, body: str) -> bool:
        """
        Deliver a text message.

        Args:
            phone: Destination phone number
            body: Message text

        Returns:
            True if the message was accepted for delivery
        """
        pass


@dataclass
class SentMessage:
    phone: str
    body: str
    sent_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockSmsChannel(SmsChannel):
    """Logs messages instead of sending them. Always succeeds."""

    def __init__(self):
        self._lock = Lock()
        self.outbox: List[SentMessage] = []

    @property
    def channel_type(self) -> str:
        return "mock"

    def send(self, phone: str, body: str) -> bool:
        with self._lock:
            self.outbox.append(SentMessage(phone=phone, body=body))
        logger.info(f"[MOCK SMS] message queued for {_mask_phone(phone)}")
        logger.debug(f"[MOCK SMS] {phone}: {body}")
        return True

    def last_message(self, phone: str) -> SentMessage:
        with self._lock:
            for message in reversed(self.outbox):
                if message.phone == phone:
                    return message
        raise LookupError(f"No message sent to {_mask_phone(phone)}")


class SmsChannelFactory:
    """
    Factory for creating SMS channels.

    New channels are added with register_channel() without touching callers.
    """

    _channels: Dict[str, type] = {
        'mock': MockSmsChannel,
    }

    @classmethod
    def get_channel(cls, channel_type: str) -> SmsChannel:
        """
        Get an SMS channel instance by type.

        Raises:
            ValueError: If channel type is not registered
        """
        channel_class = cls._channels.get(channel_type.lower())
        if not channel_class:
            raise ValueError(f"Unknown SMS channel type: {channel_type}. "
                             f"Available: {', '.join(cls._channels.keys())}")

        return channel_class()

    @classmethod
    def register_channel(cls, channel_type: str, channel_class: type):
        if not issubclass(channel_class, SmsChannel):
            raise ValueError("Channel class must extend SmsChannel")

        cls._channels[channel_type.lower()] = channel_class
        logger.info(f"Registered new SMS channel type: {channel_type}")

    @classmethod
    def list_channels(cls) -> list:
        return list(cls._channels.keys())
