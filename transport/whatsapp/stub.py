"""
Stub WhatsApp sender for testing and offline development.

Deterministic, records every call, never touches the network.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .schemas import PollPayload, ReactionOptions, SendResult
from .sender import WhatsAppSender


@dataclass
class StubWhatsAppSender(WhatsAppSender):
    """
    In-memory sender.

    Calls are appended to `reactions` / `polls` in order.
    Set `error` to make every send raise it instead.
    """

    error: Optional[Exception] = None
    reactions: List[Tuple[str, str, str, ReactionOptions]] = field(default_factory=list)
    polls: List[Tuple[str, PollPayload]] = field(default_factory=list)

    async def send_reaction(
        self,
        chat_id: str,
        message_id: str,
        emoji: str,
        options: ReactionOptions,
    ) -> None:
        if self.error is not None:
            raise self.error
        self.reactions.append((chat_id, message_id, emoji, options))

    async def send_poll(self, chat_id: str, poll: PollPayload) -> SendResult:
        if self.error is not None:
            raise self.error
        self.polls.append((chat_id, poll))
        return SendResult(
            message_id=f"poll-{len(self.polls)}",
            recipient_id=chat_id,
        )
