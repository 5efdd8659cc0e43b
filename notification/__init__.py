"""
Notification Module

Delivery channels for one-time verification codes.

Usage:
    from notification import SmsChannelFactory

    channel = SmsChannelFactory.get_channel('mock')
    channel.send('+15550001111', 'Your verification code is 123456')
"""

from notification.sms import (
    SmsChannel,
    MockSmsChannel,
    SentMessage,
    SmsChannelFactory,
)

__all__ = [
    'SmsChannel',
    'MockSmsChannel',
    'SentMessage',
    'SmsChannelFactory',
]
