"""Unit tests for temporary password generation."""

import string

import pytest

from staffhub_auth.services import generate_temporary_password


def test_default_length():
    assert len(generate_temporary_password()) == 16


def test_uses_letters_and_digits_only():
    password = generate_temporary_password(64)

    assert set(password) <= set(string.ascii_letters + string.digits)


def test_successive_passwords_differ():
    assert generate_temporary_password() != generate_temporary_password()


@pytest.mark.parametrize("length", [0, -1])
def test_non_positive_length_rejected(length):
    with pytest.raises(ValueError, match="positive"):
        generate_temporary_password(length)
