"""
WhatsApp Action Dispatcher

Validates an action request, checks its feature flag, and forwards it
to the injected sender. One call per dispatch.
No retries. No wrapping of sender errors.
"""

import logging
from typing import Any, Mapping, Optional, Union

from config import AppConfig

from .errors import FeatureDisabledError, UnknownActionError, ValidationError
from .normalize import parse_action_request
from .schemas import (
    ActionRequest,
    PollAction,
    PollPayload,
    ReactAction,
    ReactionOptions,
    SendResult,
)
from .sender import WhatsAppSender

logger = logging.getLogger(__name__)

ConfigLike = Union[AppConfig, Mapping[str, Any]]


def _get(node: Any, key: str) -> Any:
    if node is None:
        return None
    if isinstance(node, Mapping):
        return node.get(key)
    return getattr(node, key, None)


def is_action_enabled(config: Optional[ConfigLike], key: str) -> bool:
    """
    Look up channels.whatsapp.actions.<key>.

    A flag the snapshot does not mention is enabled; any falsy value disables.
    """
    actions = _get(_get(_get(config, "channels"), "whatsapp"), "actions")
    if actions is None:
        return True
    if isinstance(actions, Mapping):
        if key not in actions:
            return True
        return bool(actions[key])
    return bool(getattr(actions, key, True))


def resolve_reaction_emoji(emoji: Optional[str], remove: Optional[bool]) -> str:
    """Empty string means "clear the reaction" to the sender."""
    if remove or not emoji or not emoji.strip():
        return ""
    return emoji


class WhatsAppActionDispatcher:
    """
    Routes react/poll actions to a WhatsAppSender.

    Each dispatch is: validate -> gate -> forward.
    """

    def __init__(self, sender: WhatsAppSender):
        self.sender = sender

    async def dispatch(
        self,
        request: Union[ActionRequest, Mapping[str, Any]],
        config: Optional[ConfigLike],
    ) -> Optional[SendResult]:
        """
        Dispatch one WhatsApp action.

        Args:
            request: ReactAction / PollAction, or raw tool params
            config: Configuration snapshot (AppConfig or nested dict)

        Returns:
            SendResult for polls, None for reactions

        Raises:
            ValidationError: Required field missing or empty
            FeatureDisabledError: Action turned off in config
            UnknownActionError: Unrecognised action
        """

        if isinstance(request, Mapping):
            request = parse_action_request(request)

        if isinstance(request, ReactAction):
            return await self._react(request, config)

        elif isinstance(request, PollAction):
            return await self._poll(request, config)

        else:
            raise UnknownActionError(getattr(request, "action", request))

    async def _react(self, request: ReactAction, config: Optional[ConfigLike]) -> None:
        _require(request.chat_id, "chat_id")
        _require(request.message_id, "message_id")

        _gate(config, "reactions", "WhatsApp reactions are disabled")

        emoji = resolve_reaction_emoji(request.emoji, request.remove)
        options = ReactionOptions(
            verbose=False,
            from_me=request.from_me,
            participant=request.participant,
            account_id=request.account_id,
        )

        await self.sender.send_reaction(
            request.chat_id, request.message_id, emoji, options
        )
        logger.info(
            "WhatsApp reaction removed" if not emoji else "WhatsApp reaction sent",
            extra={
                "chat_id": request.chat_id,
                "message_id": request.message_id,
                "account_id": request.account_id,
            },
        )

    async def _poll(
        self, request: PollAction, config: Optional[ConfigLike]
    ) -> SendResult:
        _require(request.chat_id, "chat_id")
        _require(request.question, "question")
        if not any(option and option.strip() for option in request.options):
            raise ValidationError("options required", field="options")

        _gate(config, "polls", "WhatsApp polls are disabled")

        result = await self.sender.send_poll(
            request.chat_id,
            PollPayload(question=request.question, options=list(request.options)),
        )
        logger.info(
            "WhatsApp poll sent",
            extra={
                "chat_id": request.chat_id,
                "option_count": len(request.options),
            },
        )
        return result


def _require(value: Optional[str], name: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{name} required", field=name)


def _gate(config: Optional[ConfigLike], key: str, reason: str) -> None:
    enabled = is_action_enabled(config, key)
    logger.debug(
        "WhatsApp action gate checked",
        extra={"action": key, "enabled": enabled},
    )
    if not enabled:
        raise FeatureDisabledError(reason, feature=key)


async def handle_whatsapp_action(
    request: Union[ActionRequest, Mapping[str, Any]],
    config: Optional[ConfigLike],
    sender: WhatsAppSender,
) -> Optional[SendResult]:
    """One-off dispatch without keeping a dispatcher around."""
    return await WhatsAppActionDispatcher(sender).dispatch(request, config)
