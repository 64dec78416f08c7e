"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest
from django.conf import settings
from django.test import Client

pytestmark = pytest.mark.unit


class TestStaticFiles:
    def test_static_root_unset_by_default(self):
        assert settings.STATIC_ROOT is None

    def test_handler_builds_without_static_directory_warning(self, recwarn):
        Client().get("/health")
        messages = [str(w.message) for w in recwarn]
        assert not any("No directory at" in m for m in messages), messages
