"""
WhatsApp Outbound Sender Boundary

Abstract interface the action dispatcher sends through.
The actual transport lives elsewhere. No retries. No logic.
"""

from abc import ABC, abstractmethod

from .schemas import PollPayload, ReactionOptions, SendResult


class WhatsAppSenderError(Exception):
    """Failed to deliver an outbound action to WhatsApp."""
    pass


class WhatsAppSender(ABC):
    """
    Abstract outbound boundary.
    Dispatcher code must depend ONLY on this interface.
    """

    @abstractmethod
    async def send_reaction(
        self,
        chat_id: str,
        message_id: str,
        emoji: str,
        options: ReactionOptions,
    ) -> None:
        """
        Set or clear a reaction on a message.

        Args:
            chat_id: Chat JID holding the message
            message_id: Target message ID
            emoji: Emoji to set. Empty string removes the reaction.
            options: Sender flags (account, participant, from_me)

        Raises:
            WhatsAppSenderError: If delivery fails
        """
        raise NotImplementedError

    @abstractmethod
    async def send_poll(self, chat_id: str, poll: PollPayload) -> SendResult:
        """
        Send a poll message.

        Args:
            chat_id: Destination chat JID
            poll: Question and ordered options

        Returns:
            SendResult with the sent message ID and resolved recipient

        Raises:
            WhatsAppSenderError: If delivery fails
        """
        raise NotImplementedError
