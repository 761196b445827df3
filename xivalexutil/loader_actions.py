"""Actions understood by the loader program, and their command-line names."""

from __future__ import annotations

from enum import Enum
from typing import Union


class LoaderAction(Enum):
    AUTO = "auto"
    ASK = "ask"
    LOAD = "load"
    UNLOAD = "unload"
    LAUNCHER = "launcher"
    UPDATE_CHECK = "update-check"
    INTERNAL_UPDATE_STEP2_REPLACE_FILES = "_internal_update_step2_replacefiles"
    INTERNAL_UPDATE_STEP3_CLEANUP_FILES = "_internal_update_step3_cleanupfiles"
    INTERNAL_INJECT_HOOK_ENTRY_POINT = "_internal_inject_hookentrypoint"
    INTERNAL_INJECT_LOAD_IMMEDIATELY = "_internal_inject_loadxivalexanderimmediately"
    INTERNAL_CLEANUP_HANDLE = "_internal_cleanup_handle"


def loader_action_name(action: Union[LoaderAction, int]) -> str:
    """Command-line name of ``action`` (or of its index); ``"<invalid>"`` otherwise."""
    if isinstance(action, LoaderAction):
        return action.value
    members = list(LoaderAction)
    if isinstance(action, int) and not isinstance(action, bool) and 0 <= action < len(members):
        return members[action].value
    return "<invalid>"


def parse_loader_action(text: str) -> LoaderAction:
    """Find the first action whose name agrees with ``text`` over their common length.

    Matching ignores case, so abbreviations such as ``"up"`` are accepted.
    """
    lowered = text.lower()
    for action in LoaderAction:
        name = action.value
        if all(a == b for a, b in zip(lowered, name)):
            return action
    raise ValueError("invalid LoaderAction")