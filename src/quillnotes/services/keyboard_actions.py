"""Built-in keyboard actions and their default shortcuts.

Each named action gets a ``keyboardShortcuts<Action>`` option during startup
defaulting. Separator entries only group actions for display and carry no
action name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class KeyboardAction:
    """A keyboard action with the shortcuts it is bound to out of the box."""

    action_name: Optional[str] = None
    default_shortcuts: tuple[str, ...] = field(default_factory=tuple)
    separator: Optional[str] = None


def _action(name: str, shortcuts: tuple[str, ...]) -> KeyboardAction:
    return KeyboardAction(action_name=name, default_shortcuts=shortcuts)


def _separator(title: str) -> KeyboardAction:
    return KeyboardAction(separator=title)


_DEFAULT_KEYBOARD_ACTIONS: tuple[KeyboardAction, ...] = (
    _separator("Note navigation"),
    _action("backInNoteHistory", ("Alt+Left",)),
    _action("forwardInNoteHistory", ("Alt+Right",)),
    _action("jumpToNote", ("CommandOrControl+J",)),
    _action("scrollToActiveNote", ("CommandOrControl+.",)),
    _action("quickSearch", ("CommandOrControl+S",)),
    _action("searchInSubtree", ("CommandOrControl+Shift+S",)),
    _action("expandSubtree", ()),
    _action("collapseTree", ("Alt+C",)),
    _action("collapseSubtree", ("Alt+-",)),
    _action("sortChildNotes", ("Alt+S",)),
    _separator("Creating and moving notes"),
    _action("createNoteAfter", ("CommandOrControl+O",)),
    _action("createNoteInto", ("CommandOrControl+P",)),
    _action("createNoteIntoInbox", ("global:CommandOrControl+Alt+P",)),
    _action("deleteNotes", ("Delete",)),
    _action("moveNoteUp", ("CommandOrControl+Up",)),
    _action("moveNoteDown", ("CommandOrControl+Down",)),
    _action("moveNoteUpInHierarchy", ("CommandOrControl+Left",)),
    _action("moveNoteDownInHierarchy", ("CommandOrControl+Right",)),
    _action("editNoteTitle", ("Enter",)),
    _action("editBranchPrefix", ("F2",)),
    _action("cloneNotesTo", ()),
    _action("moveNotesTo", ()),
    _separator("Note clipboard"),
    _action("copyNotesToClipboard", ("CommandOrControl+C",)),
    _action("pasteNotesFromClipboard", ("CommandOrControl+V",)),
    _action("cutNotesToClipboard", ("CommandOrControl+X",)),
    _action("selectAllNotesInParent", ("CommandOrControl+A",)),
    _action("addNoteAboveToSelection", ("Shift+Up",)),
    _action("addNoteBelowToSelection", ("Shift+Down",)),
    _action("duplicateSubtree", ()),
    _separator("Tabs and windows"),
    _action("openNewTab", ("CommandOrControl+T",)),
    _action("closeActiveTab", ("CommandOrControl+W",)),
    _action("reopenLastTab", ("CommandOrControl+Shift+T",)),
    _action("activateNextTab", ("CommandOrControl+Tab", "CommandOrControl+PageDown")),
    _action("activatePreviousTab", ("CommandOrControl+Shift+Tab", "CommandOrControl+PageUp")),
    _action("openNewWindow", ()),
    _action("toggleTray", ()),
    _separator("Dialogs"),
    _action("showNoteSource", ()),
    _action("showOptions", ()),
    _action("showRevisions", ()),
    _action("showRecentChanges", ()),
    _action("showSQLConsole", ("Alt+O",)),
    _action("showBackendLog", ()),
    _action("showHelp", ("F1",)),
    _separator("Text note operations"),
    _action("addLinkToText", ("CommandOrControl+L",)),
    _action("followLinkUnderCursor", ("CommandOrControl+Enter",)),
    _action("insertDateTimeToText", ("Alt+T",)),
    _action("pasteMarkdownIntoText", ()),
    _action("cutIntoNote", ()),
    _action("addIncludeNoteToText", ()),
    _action("editReadOnlyNote", ()),
    _separator("Attributes (labels & relations)"),
    _action("addNewLabel", ("Alt+L",)),
    _action("addNewRelation", ("Alt+R",)),
    _separator("Other"),
    _action("toggleNoteHoisting", ("Alt+H",)),
    _action("unhoist", ("Alt+U",)),
    _action("reloadFrontendApp", ("F5", "CommandOrControl+R")),
    _action("openDevTools", ("CommandOrControl+Shift+I",)),
    _action("findInText", ("CommandOrControl+F",)),
    _action("toggleLeftPane", ("CommandOrControl+Alt+B",)),
    _action("toggleFullscreen", ("F11",)),
    _action("zoomOut", ("CommandOrControl+-",)),
    _action("zoomIn", ("CommandOrControl+=",)),
    _action("zoomReset", ("CommandOrControl+0",)),
    _action("copyWithoutFormatting", ("CommandOrControl+Alt+C",)),
    _action("forceSaveRevision", ()),
)


def get_default_keyboard_actions() -> list[KeyboardAction]:
    """Return the built-in keyboard actions, separators included."""

    return list(_DEFAULT_KEYBOARD_ACTIONS)


__all__ = ["KeyboardAction", "get_default_keyboard_actions"]
