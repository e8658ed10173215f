"""WhatsApp Actions - Module Exports"""

from .actions import (
    WhatsAppActionDispatcher,
    handle_whatsapp_action,
    is_action_enabled,
    resolve_reaction_emoji,
)
from .errors import (
    FeatureDisabledError,
    UnknownActionError,
    ValidationError,
    WhatsAppActionError,
)
from .normalize import parse_action_request
from .schemas import (
    ActionRequest,
    PollAction,
    PollPayload,
    ReactAction,
    ReactionOptions,
    SendResult,
)
from .sender import WhatsAppSender, WhatsAppSenderError
from .stub import StubWhatsAppSender

__all__ = [
    # Schemas
    "ActionRequest",
    "ReactAction",
    "PollAction",
    "ReactionOptions",
    "PollPayload",
    "SendResult",
    # Errors
    "WhatsAppActionError",
    "ValidationError",
    "FeatureDisabledError",
    "UnknownActionError",
    # Normalization
    "parse_action_request",
    # Sender
    "WhatsAppSender",
    "WhatsAppSenderError",
    "StubWhatsAppSender",
    # Dispatcher
    "WhatsAppActionDispatcher",
    "handle_whatsapp_action",
    "is_action_enabled",
    "resolve_reaction_emoji",
]
