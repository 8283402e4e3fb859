"""Unit tests for the SQLModel option repository."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from quillnotes.models import Option


def test_insert_and_get(option_repo):
    created = option_repo.insert(Option(name="locale", value="en", is_synced=True))

    assert created.name == "locale"
    fetched = option_repo.get("locale")
    assert fetched is not None
    assert fetched.value == "en"
    assert fetched.is_synced is True
    assert fetched.utc_date_modified is not None


def test_get_missing_returns_none(option_repo):
    assert option_repo.get("missing") is None


def test_insert_duplicate_name_raises(option_repo):
    option_repo.insert(Option(name="theme", value="light"))

    with pytest.raises(IntegrityError):
        option_repo.insert(Option(name="theme", value="dark"))

    assert option_repo.get("theme").value == "light"


def test_update_value_bumps_timestamp(option_repo):
    old = datetime(2020, 1, 1, tzinfo=timezone.utc)
    option_repo.insert(Option(name="zoomFactor", value="1.0", utc_date_modified=old))

    updated = option_repo.update_value("zoomFactor", "1.2")

    assert updated is not None
    assert updated.value == "1.2"
    assert updated.utc_date_modified.replace(tzinfo=None) > old.replace(tzinfo=None)
    assert option_repo.get("zoomFactor").value == "1.2"


def test_update_missing_returns_none(option_repo):
    assert option_repo.update_value("missing", "x") is None
    assert option_repo.list_all() == []


def test_list_all(option_repo):
    option_repo.insert(Option(name="a", value="1"))
    option_repo.insert(Option(name="b", value="2", is_synced=True))

    rows = option_repo.list_all()

    assert sorted((row.name, row.value, row.is_synced) for row in rows) == [
        ("a", "1", False),
        ("b", "2", True),
    ]
