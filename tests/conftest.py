"""Shared fixtures for shellquote tests."""

import pytest

import shellquote


@pytest.fixture(scope="session")
def default_opts():
    """Default split options, unlimited."""
    return shellquote.default_options()


@pytest.fixture(scope="session")
def no_escape_opts():
    """Default split options with backslash-escapes disabled."""
    return shellquote.no_escape_options()
