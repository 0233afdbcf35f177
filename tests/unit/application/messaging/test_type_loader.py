"""Tests for qualified name resolution."""

import pytest

from eventgate.application import get_qualified_name, load_type
from eventgate.domain import Message
from tests.fixtures.messages import UserRegistered


def test_get_qualified_name():
    """Test that the module path and class name are joined."""
    assert get_qualified_name(Message) == "eventgate.domain.message.Message"


def test_load_type_round_trip():
    """Test that a qualified name loads back the same class."""
    assert load_type(get_qualified_name(UserRegistered)) is UserRegistered


@pytest.mark.parametrize(
    "qualified_name",
    [
        "Message",
        "..Message",
        ".domain.Message",
        "eventgate.",
        "eventgate..Message",
        "os.path",
        "eventgate.domain.message.Missing",
        "eventgate.domain.message.TIMESTAMP_FORMAT",
    ],
)
def test_load_type_errors(qualified_name):
    """Test that bad names raise ImportError."""
    with pytest.raises(ImportError):
        load_type(qualified_name)


def test_load_type_missing_module():
    """Test that a missing module propagates as ImportError."""
    with pytest.raises(ImportError):
        load_type("eventgate.nothing_here.Message")
