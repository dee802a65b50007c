"""Shared pytest fixtures for the age_calculator test suite.

Fixtures defined here are available to all test modules (unit, integration,
evaluation) without any import.

No AWS credentials are required; the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Ensure MODEL_ARN is set before any test module is collected.
# The module-level ``settings = Settings()`` call in config.py runs at
# collection time; create_agent() refuses to build an agent without it.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``; no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    Use this fixture in integration tests and evaluation tests to obtain a
    real agent whose tool registry, system prompt, and message list are live,
    but whose underlying model never makes a Bedrock API call.
    """
    with patch("age_calculator.agent.BedrockModel", return_value=mock_bedrock_model):
        from age_calculator import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def birth_date() -> datetime.date:
    """The birth date used by most worked examples."""
    return datetime.date(1990, 5, 15)


@pytest.fixture
def leap_day_birth_date() -> datetime.date:
    """A February 29 birth date (2000 is divisible by 400, so it is a leap year)."""
    return datetime.date(2000, 2, 29)


@pytest.fixture
def tomorrow() -> datetime.date:
    """A date guaranteed to be after today whenever the test runs."""
    return datetime.date.today() + datetime.timedelta(days=1)
