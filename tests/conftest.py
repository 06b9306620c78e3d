"""Test configuration and fixtures."""

from typing import Optional
from uuid import uuid4

import logfire
import pytest

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def user_payload():
    """Factory for POST /users bodies with a unique email."""

    def _payload(name: str = "Alice", email: Optional[str] = None, **overrides):
        body = {
            "name": name,
            "email": email or f"{uuid4().hex[:12]}@example.com",
            "phone": "555-0100",
            "date_of_birth": "2000-06-15",
        }
        body.update(overrides)
        return body

    return _payload
