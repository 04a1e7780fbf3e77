"""Unit tests for the domain base exception."""

import pytest

from shareholder_voting.domain.exceptions import VotingError


def test_voting_error_is_exception() -> None:
    assert issubclass(VotingError, Exception)


def test_voting_error_message() -> None:
    with pytest.raises(VotingError, match="something failed"):
        raise VotingError("something failed")


def test_voting_error_default_message() -> None:
    assert str(VotingError()) == ""
