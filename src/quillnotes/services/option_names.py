"""Registry of known option names and the type each one holds."""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Optional

from .errors import OptionParseError
from .keyboard_actions import get_default_keyboard_actions


class OptionKind(str, Enum):
    """Semantic type of an option's string value."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"


KEYBOARD_SHORTCUT_PREFIX = "keyboardShortcuts"
MIN_MAX_CONTENT_WIDTH = 640
_DECIMAL_INT = re.compile(r"-?[0-9]+")

_STRING_OPTIONS = (
    "openNoteContexts",
    "lastDailyBackupDate",
    "lastWeeklyBackupDate",
    "lastMonthlyBackupDate",
    "dbVersion",
    "theme",
    "syncServerHost",
    "syncServerTimeout",
    "syncProxy",
    "mainFontFamily",
    "treeFontFamily",
    "detailFontFamily",
    "monospaceFontFamily",
    "spellCheckLanguageCode",
    "codeNotesMimeTypes",
    "headingStyle",
    "highlightsList",
    "customSearchEngineName",
    "customSearchEngineUrl",
    "locale",
    "codeBlockTheme",
    "textNoteEditorType",
    "layoutOrientation",
    "allowedHtmlTags",
    "documentId",
    "documentSecret",
    "passwordVerificationHash",
    "passwordVerificationSalt",
    "passwordDerivedKeySalt",
    "encryptedDataKey",
    # stored as decimal text but fractional, so not an integer option
    "zoomFactor",
)

_INT_OPTIONS = (
    "lastSyncedPull",
    "lastSyncedPush",
    "revisionSnapshotTimeInterval",
    "revisionSnapshotNumberLimit",
    "protectedSessionTimeout",
    "mainFontSize",
    "treeFontSize",
    "detailFontSize",
    "monospaceFontSize",
    "imageMaxWidthHeight",
    "imageJpegQuality",
    "leftPaneWidth",
    "rightPaneWidth",
    "eraseEntitiesAfterTimeInSeconds",
    "autoReadonlySizeText",
    "autoReadonlySizeCode",
    "maxContentWidth",
    "minTocHeadings",
    "eraseUnusedAttachmentsAfterSeconds",
    "firstDayOfWeek",
)

_BOOL_OPTIONS = (
    "initialized",
    "overrideThemeFonts",
    "spellCheckEnabled",
    "autoFixConsistencyIssues",
    "vimKeymapEnabled",
    "codeLineWrapEnabled",
    "leftPaneVisible",
    "rightPaneVisible",
    "nativeTitleBarVisible",
    "hideArchivedNotes_main",
    "debugModeEnabled",
    "autoCollapseNoteTree",
    "dailyBackupEnabled",
    "weeklyBackupEnabled",
    "monthlyBackupEnabled",
    "compressImages",
    "downloadImagesAutomatically",
    "checkForUpdates",
    "disableTray",
    "promotedAttributesOpenInRibbon",
    "editedNotesOpenInRibbon",
    "codeBlockWordWrap",
    "textNoteEditorMultilineToolbar",
    "backgroundEffects",
)

OPTION_KINDS: dict[str, OptionKind] = {
    **{name: OptionKind.STRING for name in _STRING_OPTIONS},
    **{name: OptionKind.INT for name in _INT_OPTIONS},
    **{name: OptionKind.BOOL for name in _BOOL_OPTIONS},
}

# Identity and encryption material; never exposed or written through the API.
SECRET_OPTIONS = frozenset(
    {
        "documentSecret",
        "passwordVerificationHash",
        "passwordVerificationSalt",
        "passwordDerivedKeySalt",
        "encryptedDataKey",
    }
)
PROTECTED_OPTIONS = SECRET_OPTIONS | {"documentId", "dbVersion", "initialized"}


def keyboard_shortcut_option_name(action_name: str) -> str:
    """Return the option name holding the shortcuts of a keyboard action."""

    return f"{KEYBOARD_SHORTCUT_PREFIX}{action_name[:1].upper()}{action_name[1:]}"


KEYBOARD_SHORTCUT_OPTIONS = frozenset(
    keyboard_shortcut_option_name(action.action_name)
    for action in get_default_keyboard_actions()
    if action.action_name
)


def is_known_option(name: str) -> bool:
    return name in OPTION_KINDS or name in KEYBOARD_SHORTCUT_OPTIONS


def kind_of(name: str) -> OptionKind:
    """Return the registered kind of ``name``; unknown names are strings."""

    return OPTION_KINDS.get(name, OptionKind.STRING)


def parse_decimal_int(raw: str) -> Optional[int]:
    """Parse plain ASCII decimal text with an optional leading minus, else None."""

    if _DECIMAL_INT.fullmatch(raw) is None:
        return None
    return int(raw)


def encode_value(value: object) -> str:
    """Encode a typed value into its stored string form.

    Raises:
        TypeError: for None or any type other than bool, int, str, list, dict.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    raise TypeError(f"Cannot store {type(value).__name__} as an option value")


def validate_value(name: str, raw: str) -> str:
    """Check ``raw`` against the kind registered for ``name`` and return it unchanged.

    Raises:
        OptionParseError: when the text is outside the option's domain.
    """
    kind = kind_of(name)
    if kind is OptionKind.BOOL and raw not in ("true", "false"):
        raise OptionParseError(name, raw, "boolean")
    if kind is OptionKind.INT:
        parsed = parse_decimal_int(raw)
        if parsed is None:
            raise OptionParseError(name, raw, "integer")
        if name == "maxContentWidth" and parsed < MIN_MAX_CONTENT_WIDTH:
            raise OptionParseError(name, raw, f"integer >= {MIN_MAX_CONTENT_WIDTH}")
    return raw
