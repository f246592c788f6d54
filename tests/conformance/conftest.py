"""Pytest configuration for syntaxtest conformance tests."""

import pytest

from tests.conformance.fake_stack import FakeCompilerStack


@pytest.fixture
def stack():
    """Provide a fresh scripted compiler stack."""
    return FakeCompilerStack()


@pytest.fixture(params=[False, True], ids=["strict", "error-recovery"])
def error_recovery(request):
    """Parser error recovery mode.

    Conformance cases must produce the same verdict in both modes since the
    scripted stack does not depend on it.
    """
    return request.param
