from __future__ import annotations

import os

import django
import pytest


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
os.environ.setdefault("NOTIFICATIONS_TIMEOUT_SECONDS", "0.5")

pytest.register_assert_rewrite("driver")

django.setup()
