"""
Pytest configuration and shared fixtures for idcheck tests.
"""

import pytest

from idcheck.swedish.classifier import IdentifierValidator


class ListRecorder:
    """Recorder that keeps messages in memory."""

    def __init__(self):
        self.messages: list[str] = []

    def record(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def recorder() -> ListRecorder:
    """Create an in-memory recorder."""
    return ListRecorder()


@pytest.fixture
def validator(recorder: ListRecorder) -> IdentifierValidator:
    """Create a validator reporting to the in-memory recorder."""
    return IdentifierValidator(recorder)
