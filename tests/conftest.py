"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from transport.whatsapp.stub import StubWhatsAppSender  # noqa: E402


@pytest.fixture
def stub_sender():
    """Fresh recording sender per test."""
    return StubWhatsAppSender()
