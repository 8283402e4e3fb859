"""Default option table, startup defaulting, and new-instance bootstrap."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from .. import app_info
from ..config import BaseConfig
from ..logging_config import get_logger
from ..utils import random_secure_token, utc_now_datetime
from .keyboard_actions import KeyboardAction, get_default_keyboard_actions
from .option_names import keyboard_shortcut_option_name
from .options import OptionMap, OptionService

logger = get_logger(__name__)


@dataclass(frozen=True)
class LiteralDefault:
    """A fixed default value."""

    value: str

    def resolve(self, option_map: OptionMap) -> str:
        return self.value


@dataclass(frozen=True)
class DerivedDefault:
    """A default computed from the options present before defaulting started.

    ``derive`` may only read options that are guaranteed to exist at that
    point (those created by the bootstrap), never other derived defaults.
    """

    derive: Callable[[OptionMap], str]

    def resolve(self, option_map: OptionMap) -> str:
        return self.derive(option_map)


Default = Union[LiteralDefault, DerivedDefault]


@dataclass(frozen=True)
class DefaultOption:
    """An option to create when the store does not have it yet."""

    name: str
    default: Default
    is_synced: bool


def _to_json(value: object) -> str:
    return json.dumps(value, separators=(",", ":"))


def _literal(name: str, value: str, is_synced: bool) -> DefaultOption:
    return DefaultOption(name, LiteralDefault(value), is_synced)


def _code_block_theme(option_map: OptionMap) -> str:
    if option_map.get("theme") == "light":
        return "default:stackoverflow-light"
    return "default:stackoverflow-dark"


_CODE_NOTES_MIME_TYPES = [
    "text/x-csrc", "text/x-c++src", "text/x-csharp", "text/css", "text/x-go",
    "text/x-groovy", "text/x-haskell", "text/html", "message/http", "text/x-java",
    "application/javascript;env=frontend", "application/javascript;env=backend",
    "application/json", "text/x-kotlin", "text/x-markdown", "text/x-perl",
    "text/x-php", "text/x-python", "text/x-ruby", None, "text/x-sql",
    "text/x-sqlite;schema=quillnotes", "text/x-swift", "text/xml", "text/x-yaml",
    "text/x-sh",
]

_ALLOWED_HTML_TAGS = [
    "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "p", "a", "ul", "ol",
    "li", "b", "i", "strong", "em", "strike", "s", "del", "abbr", "code", "hr", "br", "div",
    "table", "thead", "caption", "tbody", "tfoot", "tr", "th", "td", "pre", "section", "img",
    "figure", "figcaption", "span", "label", "input", "details", "summary", "address", "aside", "footer",
    "header", "hgroup", "main", "nav", "dl", "dt", "menu", "bdi", "bdo", "dfn", "kbd", "mark", "q", "time",
    "var", "wbr", "area", "map", "track", "video", "audio", "picture", "del", "ins",
    "en-media",
    "acronym", "article", "big", "button", "cite", "col", "colgroup", "data", "dd",
    "fieldset", "form", "legend", "meter", "noscript", "option", "progress", "rp",
    "samp", "small", "sub", "sup", "template", "textarea", "tt",
]

# Created on every startup when missing, for new and upgraded databases alike.
DEFAULT_OPTIONS: tuple[DefaultOption, ...] = (
    _literal("revisionSnapshotTimeInterval", "600", True),
    _literal("revisionSnapshotNumberLimit", "-1", True),
    _literal("protectedSessionTimeout", "600", True),
    _literal("zoomFactor", "0.9" if sys.platform == "win32" else "1.0", False),
    _literal("overrideThemeFonts", "false", False),
    _literal("mainFontFamily", "theme", False),
    _literal("mainFontSize", "100", False),
    _literal("treeFontFamily", "theme", False),
    _literal("treeFontSize", "100", False),
    _literal("detailFontFamily", "theme", False),
    _literal("detailFontSize", "110", False),
    _literal("monospaceFontFamily", "theme", False),
    _literal("monospaceFontSize", "110", False),
    _literal("spellCheckEnabled", "true", False),
    _literal("spellCheckLanguageCode", "en-US", False),
    _literal("imageMaxWidthHeight", "2000", True),
    _literal("imageJpegQuality", "75", True),
    _literal("autoFixConsistencyIssues", "true", False),
    _literal("vimKeymapEnabled", "false", False),
    _literal("codeLineWrapEnabled", "true", False),
    _literal("codeNotesMimeTypes", _to_json(_CODE_NOTES_MIME_TYPES), True),
    _literal("leftPaneWidth", "25", False),
    _literal("leftPaneVisible", "true", False),
    _literal("rightPaneWidth", "25", False),
    _literal("rightPaneVisible", "true", False),
    _literal("nativeTitleBarVisible", "false", False),
    _literal("eraseEntitiesAfterTimeInSeconds", "604800", True),  # 7 days
    _literal("hideArchivedNotes_main", "false", False),
    _literal("debugModeEnabled", "false", False),
    _literal("headingStyle", "underline", True),
    _literal("autoCollapseNoteTree", "true", True),
    _literal("autoReadonlySizeText", "10000", False),
    _literal("autoReadonlySizeCode", "30000", False),
    _literal("dailyBackupEnabled", "true", False),
    _literal("weeklyBackupEnabled", "true", False),
    _literal("monthlyBackupEnabled", "true", False),
    _literal("maxContentWidth", "1200", False),
    _literal("compressImages", "true", True),
    _literal("downloadImagesAutomatically", "true", True),
    _literal("minTocHeadings", "5", True),
    _literal("highlightsList", '["bold","italic","underline","color","bgColor"]', True),
    _literal("checkForUpdates", "true", True),
    _literal("disableTray", "false", False),
    _literal("eraseUnusedAttachmentsAfterSeconds", "2592000", True),  # 30 days
    _literal("customSearchEngineName", "DuckDuckGo", True),
    _literal("customSearchEngineUrl", "https://duckduckgo.com/?q={keyword}", True),
    _literal("promotedAttributesOpenInRibbon", "true", True),
    _literal("editedNotesOpenInRibbon", "true", True),
    # Internationalization
    _literal("locale", "en", True),
    _literal("firstDayOfWeek", "1", True),
    # Code blocks
    DefaultOption("codeBlockTheme", DerivedDefault(_code_block_theme), False),
    _literal("codeBlockWordWrap", "false", True),
    # Text notes
    _literal("textNoteEditorType", "ckeditor-balloon", True),
    _literal("textNoteEditorMultilineToolbar", "false", True),
    _literal("layoutOrientation", "vertical", False),
    _literal("backgroundEffects", "false", False),
    # HTML import
    _literal("allowedHtmlTags", _to_json(_ALLOWED_HTML_TAGS), True),
)


def _open_note_contexts(note_path: str) -> str:
    return _to_json([{"notePath": note_path, "active": True}])


def keyboard_default_options(actions: Iterable[KeyboardAction]) -> list[DefaultOption]:
    """One local-only shortcut option per named keyboard action."""

    return [
        _literal(
            keyboard_shortcut_option_name(action.action_name),
            _to_json(list(action.default_shortcuts)),
            False,
        )
        for action in actions
        if action.action_name
    ]


def all_default_options(actions: Optional[Iterable[KeyboardAction]] = None) -> list[DefaultOption]:
    """Return the static table followed by the keyboard shortcut defaults."""

    if actions is None:
        actions = get_default_keyboard_actions()
    return list(DEFAULT_OPTIONS) + keyboard_default_options(actions)


def init_startup_options(
    service: OptionService,
    *,
    config: Optional[BaseConfig] = None,
    keyboard_actions: Optional[Iterable[KeyboardAction]] = None,
) -> list[str]:
    """Create every default option missing from the store.

    Runs on every startup regardless of whether the database is new. An option
    that already exists is never touched, whatever its value. Afterwards the
    start note and safe mode overrides from ``config`` reset the open note
    contexts.

    Returns:
        Names of the options created by this run.
    """
    option_map = service.get_option_map()
    created: list[str] = []

    for descriptor in all_default_options(keyboard_actions):
        if descriptor.name in option_map:
            continue
        resolved = descriptor.default.resolve(option_map)
        service.create_option(descriptor.name, resolved, descriptor.is_synced)
        created.append(descriptor.name)
        logger.info('Created option "%s" with default value "%s"', descriptor.name, resolved)

    if config is not None and (config.START_NOTE_ID or config.SAFE_MODE):
        service.set_option("openNoteContexts", _open_note_contexts(config.START_NOTE_ID or "root"))
        logger.info(
            "Reset open note contexts",
            extra={"start_note_id": config.START_NOTE_ID, "safe_mode": config.SAFE_MODE},
        )

    return created


def init_document_options(service: OptionService) -> None:
    """Create the identity tokens of a brand-new document."""

    service.create_option("documentId", random_secure_token(16), False)
    service.create_option("documentSecret", random_secure_token(16), False)


def init_not_synced_options(
    service: OptionService,
    initialized: bool,
    *,
    sync_server_host: str = "",
    sync_proxy: str = "",
) -> None:
    """Create the local-only options of a new database.

    Args:
        service: Option store to write to.
        initialized: True when a new database was fully created, False when it
            is created to be filled by sync.
        sync_server_host: Sync server entered by the user, if any.
        sync_proxy: Proxy for the sync connection, if any.
    """
    now = utc_now_datetime()

    service.create_option("openNoteContexts", _open_note_contexts("root"), False)

    service.create_option("lastDailyBackupDate", now, False)
    service.create_option("lastWeeklyBackupDate", now, False)
    service.create_option("lastMonthlyBackupDate", now, False)
    service.create_option("dbVersion", str(app_info.DB_VERSION), False)

    service.create_option("initialized", "true" if initialized else "false", False)

    service.create_option("lastSyncedPull", "0", False)
    service.create_option("lastSyncedPush", "0", False)

    service.create_option("theme", "next", False)

    service.create_option("syncServerHost", sync_server_host or "", False)
    service.create_option("syncServerTimeout", "120000", False)
    service.create_option("syncProxy", sync_proxy or "", False)


__all__ = [
    "DEFAULT_OPTIONS",
    "Default",
    "DefaultOption",
    "DerivedDefault",
    "LiteralDefault",
    "all_default_options",
    "init_document_options",
    "init_not_synced_options",
    "init_startup_options",
    "keyboard_default_options",
]
