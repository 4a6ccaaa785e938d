"""Test setup for workshops."""

from __future__ import annotations

import sys
from pathlib import Path

import django
import pytest
from django.conf import settings

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_configure(config: pytest.Config) -> None:
    """Configure a minimal Django project so settings and template tags work."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["workshops"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
    django.setup()


@pytest.fixture
def workshop_source() -> str:
    """A small workshop document with a title, two parts and nested steps."""
    return (
        "# Personal Website\n"
        "\n"
        "Intro paragraph.\n"
        "\n"
        "## Part I: Setup\n"
        "\n"
        "### 1) Signing Up for GitHub\n"
        "\n"
        "Go to https://github.com and sign up.\n"
        "\n"
        "### 2) Creating Your First GitHub Repository\n"
        "\n"
        "#### A detail nobody needs in the sidebar\n"
        "\n"
        "## Part II: Publishing\n"
    )
