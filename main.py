"""Unterrichtskarte — CLI.

Verwendung:
  python main.py config init                   Standard-Konfiguration anlegen
  python main.py config show                   Konfiguration anzeigen
  python main.py classify --date 2024-03-01    Eine Kartenzelle auswerten
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config_or_abort(path: Optional[str]):
    """Lädt die Konfiguration (oder Defaults) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager(Path(path) if path else None)
    try:
        return mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--path", default=None, help="Pfad der YAML-Datei.")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(path: Optional[str], force: bool):
    """Schreibt die Standard-Konfiguration."""
    from config.defaults import default_config
    from config.manager import ConfigManager

    mgr = ConfigManager(Path(path) if path else None)
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {mgr.path}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    target = mgr.save(default_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")


@cmd_config.command("show")
@click.option("--path", default=None, help="Pfad der YAML-Datei.")
def config_show(path: Optional[str]):
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config_or_abort(path)

    table = Table(title="Unterrichtskarte", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for k, v in config.model_dump(mode="json").items():
        table.add_row(k, str(v))
    console.print(table)


# ─── CLASSIFY ─────────────────────────────────────────────────────────────────

@click.command("classify")
@click.option("--date", "date_", type=click.DateTime(), default=None,
              help="Datum der Stunde (ohne Angabe: leere Zelle).")
@click.option("--attended", is_flag=True, default=False,
              help="Schüler war anwesend.")
@click.option("--replaced", is_flag=True, default=False,
              help="Stunde wurde verlegt.")
@click.option("--replacement-date", type=click.DateTime(), default=None,
              help="Ersatztermin der verlegten Stunde.")
@click.option("--config", "config_path", default=None,
              help="Pfad der YAML-Konfiguration.")
def cmd_classify(date_: Optional[datetime], attended: bool, replaced: bool,
                 replacement_date: Optional[datetime], config_path: Optional[str]):
    """Wertet eine einzelne Kartenzelle aus."""
    from models.lesson_card import LessonCardEntry
    from models.cell_state import (
        CellKind, InconsistentEntryError, classify,
    )

    config = _load_config_or_abort(config_path)
    entry = LessonCardEntry(attended=attended, replaced=replaced,
                            replacement_date=replacement_date)
    if date_ is not None:
        entry.date = date_

    try:
        state = classify(entry, config)
    except InconsistentEntryError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    if state.kind == CellKind.EMPTY:
        body = "[dim]Leere Zelle[/dim]"
    elif state.kind == CellKind.SCHEDULED:
        mark = "[green]✓ anwesend[/green]" if state.attended else "[red]✗ abwesend[/red]"
        body = f"[bold]{state.date.isoformat()}[/bold]  {mark}"
    else:
        mark = "[green]✓ anwesend[/green]" if state.attended else "[red]✗ abwesend[/red]"
        body = (
            f"[strike]{state.original_date.isoformat()}[/strike]  {mark}\n"
            f"verlegt auf [bold]{state.new_date.isoformat()}[/bold]"
        )
    console.print(Panel(body, title=f"Zelle ({state.kind.value})", border_style="cyan"))


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe.")
def cli(verbose: bool):
    """Unterrichtskarte: Anwesenheitszellen auswerten."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig ändert nichts, wenn der Root-Logger schon Handler hat
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_classify)


if __name__ == "__main__":
    cli()
