"""Tests for localised label sets."""

from __future__ import annotations

from datetime import datetime

import pytest

from appdocs.models import DocumentKind, Language
from appdocs.rendering.labels import labels_for


def test_french_timestamp() -> None:
    labels = labels_for(Language.FR)
    assert labels.format_timestamp(datetime(2026, 10, 19, 14, 5)) == "19 octobre 2026 à 14:05"


def test_english_timestamp_uses_twelve_hour_clock() -> None:
    labels = labels_for("en")
    assert labels.format_timestamp(datetime(2026, 10, 19, 14, 5)) == "October 19, 2026 at 2:05 PM"
    assert labels.format_timestamp(datetime(2026, 1, 2, 0, 30)) == "January 2, 2026 at 12:30 AM"


def test_document_titles_per_locale() -> None:
    assert labels_for("fr").document_title(DocumentKind.TYPES) == "Référence des types"
    assert labels_for("en").document_title(DocumentKind.ALL) == "Complete technical documentation"


def test_locales_define_the_same_keys() -> None:
    assert set(labels_for("fr").labels) == set(labels_for("en").labels)


def test_unknown_key_falls_back_to_key() -> None:
    assert labels_for("en")["missing.key"] == "missing.key"


def test_unknown_language_is_rejected() -> None:
    with pytest.raises(ValueError):
        labels_for("de")
