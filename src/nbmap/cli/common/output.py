"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import questionary
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from nbmap.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from nbmap.core.tokens import split_token

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)


def _overrides_summary(overrides: Iterable[Any]) -> str:
    """Render overrides as `field(lang=Name, env=VAR)` fragments."""
    parts = []
    for o in overrides:
        bits = [f"{lang}={name}" for lang, name in (o.names or {}).items()]
        bits += [f"env={var}" for var in o.env_vars]
        parts.append(f"{o.field}({', '.join(bits)})" if bits else o.field)
    return ", ".join(parts)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "checked_icon", "unchecked_icon"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be nbmap consistent."""
        return f"[nbmap] {message}"

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def select_many(self, message: str, choices: list[Any]) -> list[Any]:
        """
        Prompt the user to select multiple items from a list.

        `choices` may be plain strings or `questionary.Choice` objects.
        Returns a list of selected values.
        """
        if not choices:
            return []

        prompt = self._q_try(
            questionary.checkbox,
            self._q(message),
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            instruction="Use ↑/↓, space, a (all), i (invert), enter",
            pointer="❯",
            checked_icon="▣",
            unchecked_icon="▢",
        )
        picked = prompt.ask()
        return list(picked or [])

    def entries_table(self, entries: Iterable[Any], title: str = "Entries") -> None:
        """
        Expects objects with .raw_key .token .overrides
        (like nbmap.core.models.EntryDescriptor)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Key", style="ok", no_wrap=True)
        t.add_column("Token")
        t.add_column("Overrides", style="meta")

        for e in entries:
            t.add_row(e.raw_key, e.token, _overrides_summary(e.overrides))

        console.print(t)

    def config_table(
        self, config_types: Mapping[str, str], overrides: Iterable[Any], title: str = "Config"
    ) -> None:
        """
        Render provider config keys with their type and env-var defaults.

        `overrides` are objects with `.field` and `.env_vars`.
        """
        env_by_key = {o.field: ", ".join(o.env_vars) for o in overrides}
        t = Table(title=title, show_lines=False)
        t.add_column("Key", style="ok", no_wrap=True)
        t.add_column("Type", style="meta")
        t.add_column("Default from env")

        keys = list(config_types) + [k for k in env_by_key if k not in config_types]
        for key in keys:
            t.add_row(key, config_types.get(key, ""), env_by_key.get(key, ""))

        console.print(t)

    def entry_detail(self, entry: Any) -> None:
        """Print one entry with its token parts and overrides."""
        parts = split_token(entry.token)
        self.header(f"{entry.kind.label} {entry.raw_key}")
        self.kv(
            {
                "token": entry.token,
                "package": parts.package,
                "module": parts.module_path,
                "name": parts.name,
            }
        )
        for o in entry.overrides:
            self.kv({f"override {o.field}": _overrides_summary([o])})


out = Out()
