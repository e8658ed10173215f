"""
WhatsApp Action Parameter Normalization

PURE CONVERSION - NO SENDING, NO CONFIG

Converts the untyped parameter object an agent tool receives into a
typed ActionRequest.
- Strings: trimmed; blank required strings are rejected
- Booleans: honoured only when they are real booleans
- Options: trimmed, blanks dropped, at least one required
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import TypeAdapter

from .errors import UnknownActionError, ValidationError
from .schemas import ActionRequest, PollAction, ReactAction

logger = logging.getLogger(__name__)

# Picks ReactAction / PollAction from the "action" tag
_ACTION_REQUEST = TypeAdapter(ActionRequest)

# Accepted spellings per field, first match wins
_ALIASES = {
    "chat_id": ("chat_id", "chatJid", "chatId"),
    "message_id": ("message_id", "messageId"),
    "from_me": ("from_me", "fromMe"),
    "account_id": ("account_id", "accountId"),
}


def _lookup(params: Mapping[str, Any], name: str) -> Any:
    for key in _ALIASES.get(name, (name,)):
        if key in params:
            return params[key]
    return None


def read_string_param(
    params: Mapping[str, Any],
    name: str,
    required: bool = False,
    allow_empty: bool = False,
) -> Optional[str]:
    """
    Read a trimmed string parameter.

    Raises:
        ValidationError: required and missing, non-string or blank
    """
    value = _lookup(params, name)
    if isinstance(value, str):
        value = value.strip()
        if value or allow_empty:
            return value
    if required:
        raise ValidationError(f"{name} required", field=name)
    return None


def read_bool_param(params: Mapping[str, Any], name: str) -> Optional[bool]:
    value = _lookup(params, name)
    return value if isinstance(value, bool) else None


def read_string_list_param(
    params: Mapping[str, Any],
    name: str,
    required: bool = False,
) -> Optional[List[str]]:
    """
    Read a list of trimmed, non-blank strings.

    Raises:
        ValidationError: required and missing, not a list, or empty after trimming
    """
    value = _lookup(params, name)
    items: List[str] = []
    if isinstance(value, Sequence) and not isinstance(value, str):
        items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    if items:
        return items
    if required:
        raise ValidationError(f"{name} required", field=name)
    return None


def parse_action_request(params: Mapping[str, Any]) -> ActionRequest:
    """
    Convert raw tool parameters into an ActionRequest.

    Args:
        params: Untyped mapping, e.g. {"action": "react", "chatJid": ..., ...}

    Returns:
        ReactAction or PollAction

    Raises:
        ValidationError: Missing or empty required field
        UnknownActionError: Unrecognised action tag
    """

    action = read_string_param(params, "action", required=True)

    if action == "react":
        return _parse_react(params)

    elif action == "poll":
        return _parse_poll(params)

    else:
        raise UnknownActionError(action)


def _parse_react(params: Mapping[str, Any]) -> ReactAction:
    """
    Parse a react request.

    Rules:
    - chat_id and message_id required
    - emoji kept as given (may be empty - that means remove)
    """

    request = _ACTION_REQUEST.validate_python(
        {
            "action": "react",
            "chat_id": read_string_param(params, "chat_id", required=True),
            "message_id": read_string_param(params, "message_id", required=True),
            "emoji": read_string_param(params, "emoji", allow_empty=True) or "",
            "remove": read_bool_param(params, "remove"),
            "from_me": read_bool_param(params, "from_me"),
            "participant": read_string_param(params, "participant"),
            "account_id": read_string_param(params, "account_id"),
        }
    )
    logger.debug(
        "Parsed react action",
        extra={"chat_id": request.chat_id, "message_id": request.message_id},
    )
    return request


def _parse_poll(params: Mapping[str, Any]) -> PollAction:
    request = _ACTION_REQUEST.validate_python(
        {
            "action": "poll",
            "chat_id": read_string_param(params, "chat_id", required=True),
            "question": read_string_param(params, "question", required=True),
            "options": read_string_list_param(params, "options", required=True),
        }
    )
    logger.debug(
        "Parsed poll action",
        extra={"chat_id": request.chat_id, "option_count": len(request.options)},
    )
    return request
