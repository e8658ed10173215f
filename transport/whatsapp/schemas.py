"""
WhatsApp Action Schemas

PURE DATA MODELS - NO LOGIC
Defines the contract between the action dispatcher and the outbound sender.
"""

from dataclasses import dataclass
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# ACTION REQUESTS (INPUT)
# ============================================================================

class ReactAction(BaseModel):
    """
    React to (or un-react from) a single message.

    An empty emoji, or remove=True, clears the reaction.
    """

    model_config = ConfigDict(frozen=True)

    action: Literal["react"] = "react"
    chat_id: str = Field(..., description="Chat JID, e.g. 123@s.whatsapp.net")
    message_id: str = Field(..., description="ID of the message to react to")
    emoji: str = Field("", description="Reaction emoji. Empty clears it.")
    remove: Optional[bool] = None
    from_me: Optional[bool] = Field(
        None,
        description="Whether the target message was sent by this account"
    )
    participant: Optional[str] = Field(
        None,
        description="Group participant JID that authored the target message"
    )
    account_id: Optional[str] = Field(
        None,
        description="Account to send from when several are linked"
    )


class PollAction(BaseModel):
    """Send a poll to a chat."""

    model_config = ConfigDict(frozen=True)

    action: Literal["poll"] = "poll"
    chat_id: str = Field(..., description="Chat JID, e.g. 123@s.whatsapp.net")
    question: str
    options: List[str] = Field(..., description="Selectable answers, in order")


ActionRequest = Annotated[
    Union[ReactAction, PollAction],
    Field(discriminator="action"),
]


# ============================================================================
# SENDER ARGUMENTS / RESULTS (OUTPUT)
# ============================================================================

@dataclass(frozen=True)
class ReactionOptions:
    """
    Per-call flags handed to the sender with every reaction.

    Unset fields stay None - the sender decides what that means.
    """

    verbose: bool = False
    from_me: Optional[bool] = None
    participant: Optional[str] = None
    account_id: Optional[str] = None


class PollPayload(BaseModel):
    """Poll body handed to the sender."""

    model_config = ConfigDict(frozen=True)

    question: str
    options: List[str]


class SendResult(BaseModel):
    """What the sender reports after delivering a poll."""

    model_config = ConfigDict(frozen=True)

    message_id: str = Field(..., description="WhatsApp ID of the sent message")
    recipient_id: str = Field(..., description="Resolved recipient JID")
