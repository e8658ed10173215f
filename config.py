"""
Configuration management for WhatsApp actions.

Loads environment variables from .env file and provides a typed,
read-only snapshot of the per-feature action flags.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() == "true"


class WhatsAppActionsConfig(BaseModel):
    """channels.whatsapp.actions - one flag per gated action."""

    model_config = ConfigDict(frozen=True, extra="allow")

    reactions: bool = True
    polls: bool = True


class WhatsAppConfig(BaseModel):
    """channels.whatsapp"""

    model_config = ConfigDict(frozen=True, extra="allow")

    actions: WhatsAppActionsConfig = Field(default_factory=WhatsAppActionsConfig)


class ChannelsConfig(BaseModel):
    """channels"""

    model_config = ConfigDict(frozen=True, extra="allow")

    whatsapp: WhatsAppConfig = Field(default_factory=WhatsAppConfig)


class AppConfig(BaseModel):
    """
    Configuration snapshot handed to the action dispatcher.

    Owned by the caller. The dispatcher only reads it.
    Plain nested dicts of the same shape go through AppConfig.model_validate.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    channels: ChannelsConfig = Field(default_factory=ChannelsConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Every action defaults to enabled:
        - WHATSAPP_ACTIONS_REACTIONS (default "true")
        - WHATSAPP_ACTIONS_POLLS (default "true")
        """
        return cls(
            channels=ChannelsConfig(
                whatsapp=WhatsAppConfig(
                    actions=WhatsAppActionsConfig(
                        reactions=_env_flag("WHATSAPP_ACTIONS_REACTIONS"),
                        polls=_env_flag("WHATSAPP_ACTIONS_POLLS"),
                    )
                )
            )
        )


if __name__ == "__main__":
    # Test configuration loading
    actions = AppConfig.from_env().channels.whatsapp.actions
    print("Configuration loaded:")
    print(f"  Reactions: {'✓ Enabled' if actions.reactions else '✗ Disabled'}")
    print(f"  Polls: {'✓ Enabled' if actions.polls else '✗ Disabled'}")
