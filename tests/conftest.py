"""Test configuration and fixtures."""

import logfire
import pytest

from tests.entities import Post, User

# Keep spans local: no console noise, nothing sent
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def alice() -> User:
    return User(id=1, name="alice")


@pytest.fixture
def bob() -> User:
    return User(id=2, name="bob")


@pytest.fixture
def post() -> Post:
    return Post(id=42, title="Polymorphic associations considered useful")
