"""
WhatsApp Action Errors

Every rejection raised before the sender is called.
Sender failures are NOT wrapped here - they propagate as raised.
"""

from typing import Optional


class WhatsAppActionError(Exception):
    """Base class for dispatcher rejections."""
    pass


class ValidationError(WhatsAppActionError):
    """Required action field missing or empty."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class FeatureDisabledError(WhatsAppActionError):
    """Action is gated off in channels.whatsapp.actions."""

    def __init__(self, message: str, feature: str):
        super().__init__(message)
        self.feature = feature


class UnknownActionError(WhatsAppActionError):
    """Action tag is not one the dispatcher knows."""

    def __init__(self, action: object):
        super().__init__(f"Unknown WhatsApp action: {action}")
        self.action = action
