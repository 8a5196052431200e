from types import SimpleNamespace

import pytest
import questionary

from nbmap.cli.tui import _MAX_KEY_WIDTH, _entry_choice_title, _truncate, select_entries
from nbmap.core.models import EntryDescriptor, EntryKind


def _entry(raw_key: str) -> EntryDescriptor:
    return EntryDescriptor(
        kind=EntryKind.RESOURCE, raw_key=raw_key, token="netbox:index/x:X"
    )


def test_entry_choice_title_shows_key_before_token_and_aligns():
    first = _entry_choice_title(_entry("netbox_vrf"), key_width=20)
    second = _entry_choice_title(_entry("netbox_ip_address"), key_width=20)

    assert first.startswith("netbox_vrf")
    assert second.startswith("netbox_ip_address")
    assert first.index("(netbox:") == second.index("(netbox:")


def test_entry_choice_title_truncates_long_keys():
    long_key = "netbox_" + "x" * (_MAX_KEY_WIDTH + 10)
    rendered = _entry_choice_title(_entry(long_key), key_width=_MAX_KEY_WIDTH)

    assert "..." in rendered
    assert "(netbox:index/x:X)" in rendered
    assert _truncate(long_key, _MAX_KEY_WIDTH).endswith("...")


def test_select_entries_retries_without_icons_on_older_questionary(monkeypatch):
    seen = []

    def checkbox(message, choices, **kwargs):
        seen.append(sorted(kwargs))
        if "pointer" in kwargs:
            raise TypeError("unexpected keyword argument 'pointer'")
        return SimpleNamespace(ask=lambda: [c.value for c in choices])

    monkeypatch.setattr(questionary, "checkbox", checkbox)
    entries = [_entry("netbox_vrf"), _entry("netbox_vlan")]

    assert select_entries(entries) == entries
    assert "pointer" in seen[0]
    assert "pointer" not in seen[1] and "checked_icon" not in seen[1]


def test_select_entries_skips_prompt_without_entries(monkeypatch):
    monkeypatch.setattr(questionary, "checkbox", lambda *a, **kw: pytest.fail("prompted"))

    assert select_entries([]) == []
