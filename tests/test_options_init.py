"""Tests for startup defaulting and new-instance bootstrap."""

from __future__ import annotations

import json

import pytest

from quillnotes.config import TestConfig
from quillnotes.services.errors import OptionAlreadyExistsError
from quillnotes.services.keyboard_actions import KeyboardAction, get_default_keyboard_actions
from quillnotes.services.options_init import (
    DEFAULT_OPTIONS,
    DerivedDefault,
    LiteralDefault,
    all_default_options,
    init_document_options,
    init_not_synced_options,
    init_startup_options,
    keyboard_default_options,
)


def _names_by_sync(service):
    return {option.name: option.is_synced for option in service.get_options()}


def test_default_table_has_unique_names():
    names = [descriptor.name for descriptor in all_default_options()]
    assert len(names) == len(set(names))


def test_startup_creates_every_default(option_service):
    created = init_startup_options(option_service)

    option_map = option_service.get_option_map()
    for descriptor in all_default_options():
        assert descriptor.name in option_map
    assert set(created) == set(option_map)
    assert option_map["revisionSnapshotTimeInterval"] == "600"
    assert option_map["locale"] == "en"


def test_startup_respects_sync_flags(option_service):
    init_startup_options(option_service)

    flags = _names_by_sync(option_service)
    assert flags["locale"] is True
    assert flags["eraseEntitiesAfterTimeInSeconds"] is True
    assert flags["maxContentWidth"] is False
    assert flags["codeBlockTheme"] is False
    assert flags["keyboardShortcutsJumpToNote"] is False


def test_startup_is_idempotent(option_service):
    init_startup_options(option_service)
    first = option_service.get_option_map()
    first_count = len(option_service.get_options())

    created = init_startup_options(option_service)

    assert created == []
    assert option_service.get_option_map() == first
    assert len(option_service.get_options()) == first_count


def test_startup_never_overwrites_existing_options(option_service):
    option_service.create_option("maxContentWidth", "900", True)
    option_service.create_option("spellCheckEnabled", "not-a-bool", False)

    created = init_startup_options(option_service)

    assert "maxContentWidth" not in created
    assert option_service.get_option("maxContentWidth") == "900"
    assert option_service.get_option("spellCheckEnabled") == "not-a-bool"
    assert _names_by_sync(option_service)["maxContentWidth"] is True


@pytest.mark.parametrize(
    "theme, expected",
    [
        ("light", "default:stackoverflow-light"),
        ("dark", "default:stackoverflow-dark"),
        ("next", "default:stackoverflow-dark"),
    ],
)
def test_code_block_theme_derives_from_theme(option_service, theme, expected):
    option_service.create_option("theme", theme, False)

    init_startup_options(option_service)

    assert option_service.get_option("codeBlockTheme") == expected


def test_code_block_theme_without_theme_option(option_service):
    init_startup_options(option_service)

    assert option_service.get_option("codeBlockTheme") == "default:stackoverflow-dark"


def test_default_variants_resolve_by_kind():
    assert LiteralDefault("x").resolve({}) == "x"
    assert DerivedDefault(lambda m: m["a"] + "!").resolve({"a": "b"}) == "b!"
    derived = [d.name for d in DEFAULT_OPTIONS if isinstance(d.default, DerivedDefault)]
    assert derived == ["codeBlockTheme"]


def test_keyboard_defaults_skip_separators():
    actions = [
        KeyboardAction(separator="Navigation"),
        KeyboardAction(action_name="jumpToNote", default_shortcuts=("CommandOrControl+J",)),
        KeyboardAction(action_name="forceSaveRevision"),
    ]

    defaults = keyboard_default_options(actions)

    assert [d.name for d in defaults] == [
        "keyboardShortcutsJumpToNote",
        "keyboardShortcutsForceSaveRevision",
    ]
    assert defaults[0].default.resolve({}) == '["CommandOrControl+J"]'
    assert defaults[1].default.resolve({}) == "[]"
    assert all(d.is_synced is False for d in defaults)


def test_startup_uses_given_keyboard_actions(option_service):
    actions = [KeyboardAction(action_name="customAction", default_shortcuts=("Alt+X", "F9"))]

    init_startup_options(option_service, keyboard_actions=actions)

    assert json.loads(option_service.get_option("keyboardShortcutsCustomAction")) == ["Alt+X", "F9"]
    assert option_service.get_option_or_null("keyboardShortcutsJumpToNote") is None


def test_registry_has_named_actions():
    named = [a.action_name for a in get_default_keyboard_actions() if a.action_name]
    assert "jumpToNote" in named
    assert len(named) == len(set(named))


def test_start_note_override(option_service, monkeypatch):
    monkeypatch.setenv("QUILLNOTES_START_NOTE_ID", "abc123")
    option_service.create_option("openNoteContexts", '[{"notePath":"root","active":true}]', False)

    init_startup_options(option_service, config=TestConfig())

    contexts = json.loads(option_service.get_option("openNoteContexts"))
    assert contexts == [{"notePath": "abc123", "active": True}]


def test_safe_mode_resets_to_root(option_service, monkeypatch):
    monkeypatch.setenv("QUILLNOTES_SAFE_MODE", "true")
    option_service.create_option("openNoteContexts", '[{"notePath":"n1","active":true}]', False)

    init_startup_options(option_service, config=TestConfig())

    contexts = json.loads(option_service.get_option("openNoteContexts"))
    assert contexts == [{"notePath": "root", "active": True}]


def test_no_override_leaves_open_note_contexts(option_service):
    option_service.create_option("openNoteContexts", '[{"notePath":"n1","active":true}]', False)

    init_startup_options(option_service, config=TestConfig())

    assert option_service.get_option("openNoteContexts") == '[{"notePath":"n1","active":true}]'


def test_init_document_options(option_service):
    init_document_options(option_service)

    document_id = option_service.get_option("documentId")
    document_secret = option_service.get_option("documentSecret")
    assert document_id and document_secret
    assert document_id != document_secret
    assert _names_by_sync(option_service) == {"documentId": False, "documentSecret": False}


def test_init_not_synced_options(option_service):
    init_not_synced_options(option_service, True, sync_server_host="https://sync.example.com")

    option_map = option_service.get_option_map()
    assert json.loads(option_map["openNoteContexts"]) == [{"notePath": "root", "active": True}]
    assert option_map["initialized"] == "true"
    assert option_map["theme"] == "next"
    assert option_map["syncServerHost"] == "https://sync.example.com"
    assert option_map["syncServerTimeout"] == "120000"
    assert option_map["syncProxy"] == ""
    assert option_map["lastSyncedPull"] == "0"
    assert option_map["lastDailyBackupDate"].endswith("Z")
    assert option_service.get_option_int("dbVersion") > 0
    assert not any(_names_by_sync(option_service).values())


def test_init_not_synced_options_for_sync_instance(option_service):
    init_not_synced_options(option_service, False)

    assert option_service.get_option_bool("initialized") is False


def test_bootstrap_twice_is_rejected(option_service):
    init_document_options(option_service)

    with pytest.raises(OptionAlreadyExistsError):
        init_document_options(option_service)


def test_bootstrap_then_startup_derives_from_bootstrap_theme(option_service):
    init_document_options(option_service)
    init_not_synced_options(option_service, True)
    created = init_startup_options(option_service)

    assert "theme" not in created
    assert option_service.get_option("codeBlockTheme") == "default:stackoverflow-dark"


def test_keyboard_action_carries_only_name_shortcuts_and_separator():
    from dataclasses import fields

    assert [f.name for f in fields(KeyboardAction)] == [
        "action_name",
        "default_shortcuts",
        "separator",
    ]
