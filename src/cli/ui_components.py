"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same panels and tables.
"""

from __future__ import annotations

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def build_response_panel(payload: dict[str, Any]) -> Panel:
    """Panel for a rendered response (`to_payload` output)."""

    status = payload["statusCode"]
    body = payload["body"]
    success = 200 <= status < 300
    color = "green" if success else ("red" if status >= 500 else "yellow")

    title = Text(f"HTTP {status}", style=f"bold {color}")
    text = Text()
    if success and isinstance(body, dict):
        for key, value in body.items():
            if key == "password":
                value = "********"
            text.append(f"{key}: ", style="bold")
            text.append(f"{value}\n")
    elif isinstance(body, dict):
        text.append(str(body.get("message", "")), style=color)
    else:
        text.append(str(body))

    return Panel(text, title=title, border_style=color)


def build_settings_table(settings: AppSettings) -> Table:
    """Table with the effective configuration."""

    table = Table(title="signup-api settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    return table
