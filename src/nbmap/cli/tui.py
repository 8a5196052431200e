"""Terminal UI utilities for picking mapping entries."""

from __future__ import annotations

import questionary

from nbmap.cli.common.output import out
from nbmap.core.models import EntryDescriptor

_MAX_KEY_WIDTH = 48


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _entry_choice_title(entry: EntryDescriptor, *, key_width: int) -> str:
    """Format one entry choice as `<raw key>  (<token>)` with aligned token column."""
    short_key = _truncate(entry.raw_key, _MAX_KEY_WIDTH)
    return f"{short_key.ljust(key_width)}  ({entry.token})"


def select_entries(entries: list[EntryDescriptor]) -> list[EntryDescriptor]:
    """Display a checkbox prompt to select entries from a list.

    Args:
        entries: Entries to choose from.

    Returns:
        The selected entries, or an empty list if none selected.
    """
    shown_keys = [_truncate(e.raw_key, _MAX_KEY_WIDTH) for e in entries]
    key_width = max((len(k) for k in shown_keys), default=0)

    choices = [
        questionary.Choice(
            title=_entry_choice_title(entry, key_width=key_width),
            value=entry,
        )
        for entry in entries
    ]
    return out.select_many("Select entries:", choices)
