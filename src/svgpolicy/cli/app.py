"""Root CLI application for inspecting and exporting the SVG allowlist."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from svgpolicy.core.config import load_config
from svgpolicy.core.logging_config import setup_logging
from svgpolicy.core.models import AppConfig, AttributeGroup
from svgpolicy.policy.builder import ElementAllowlist, build
from svgpolicy.policy.elements import BLOCKED_ELEMENTS, DEPRECATED_ELEMENTS, ELEMENT_SPECS
from svgpolicy.policy.errors import PolicyError
from svgpolicy.policy.groups import ATTRIBUTE_GROUPS, event_handler_attributes
from svgpolicy.web.sanitize import sanitize_svg

console = Console()
app = typer.Typer(
    name="svgpolicy",
    help="SVG sanitizer allowlist: which elements and attributes survive sanitization.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
) -> None:
    try:
        cfg = load_config(config)
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    setup_logging(cfg.log_level)
    ctx.obj = cfg


def _build(ctx: typer.Context) -> ElementAllowlist:
    cfg: AppConfig = ctx.obj
    try:
        return build(ELEMENT_SPECS, cfg.policy)
    except PolicyError as exc:
        console.print(f"[red]Policy error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


def _strip_reason(name: str) -> str:
    if name in BLOCKED_ELEMENTS:
        return "blocked"
    if name in DEPRECATED_ELEMENTS:
        return "deprecated"
    return "unknown"


@app.command()
def groups(
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Show one group's attributes"),
) -> None:
    """List attribute groups, or the attributes of one group."""
    if group:
        try:
            gid = AttributeGroup(group)
        except ValueError:
            console.print(f"[red]Unknown group:[/red] {group}")
            raise typer.Exit(1)
        for name in ATTRIBUTE_GROUPS[gid]:
            console.print(name)
        return

    table = Table(title="Attribute Groups")
    table.add_column("Group", style="cyan")
    table.add_column("Attributes", justify="right")
    for gid, names in ATTRIBUTE_GROUPS.items():
        table.add_row(gid.value, str(len(names)))
    console.print(table)


@app.command()
def elements(ctx: typer.Context) -> None:
    """List allowed elements and how many attributes each accepts."""
    allowlist = _build(ctx)
    handlers = event_handler_attributes()

    table = Table(title="Allowed SVG Elements")
    table.add_column("Element", style="cyan")
    table.add_column("Attributes", justify="right")
    table.add_column("Event handlers", justify="right")
    for name in sorted(allowlist):
        attrs = allowlist.allowed_attributes_for(name)
        table.add_row(name, str(len(attrs)), str(len(attrs & handlers)))
    console.print(table)


@app.command()
def show(ctx: typer.Context, element: str = typer.Argument(..., help="Element name, e.g. rect")) -> None:
    """Print the attributes allowed on an element."""
    allowlist = _build(ctx)
    if not allowlist.is_element_allowed(element):
        console.print(f"[red]<{element}> is not allowed[/red] ({_strip_reason(element)})")
        raise typer.Exit(1)
    attrs = allowlist.ordered_attributes(element)
    if not attrs:
        console.print(f"[dim]<{element}> is allowed with no attributes[/dim]")
    for name in attrs:
        console.print(name)


@app.command()
def check(
    ctx: typer.Context,
    element: str = typer.Argument(..., help="Element name"),
    attribute: Optional[str] = typer.Argument(None, help="Attribute name"),
) -> None:
    """Report whether an element (and optionally one attribute) is kept."""
    allowlist = _build(ctx)
    if not allowlist.is_element_allowed(element):
        console.print(f"[red]strip[/red] <{element}> ({_strip_reason(element)})")
        raise typer.Exit(1)
    if attribute is None:
        console.print(f"[green]keep[/green] <{element}>")
        return
    if allowlist.is_attribute_allowed(element, attribute):
        console.print(f"[green]keep[/green] <{element} {attribute}>")
    else:
        console.print(f"[red]strip[/red] <{element} {attribute}>")
        raise typer.Exit(1)


@app.command()
def export(
    ctx: typer.Context,
    fmt: str = typer.Option("json", "--format", "-f", help="json or yaml"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to a file instead of stdout"),
) -> None:
    """Export the allowlist as element -> sorted attribute list."""
    allowlist = _build(ctx)
    data = allowlist.to_dict()
    if fmt == "json":
        text = json.dumps(data, indent=2) + "\n"
    elif fmt == "yaml":
        text = yaml.safe_dump(data, sort_keys=True)
    else:
        console.print(f"[red]Unsupported format:[/red] {fmt}")
        raise typer.Exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
        console.print(f"Wrote [cyan]{len(data)}[/cyan] elements to [cyan]{output}[/cyan]")
    else:
        typer.echo(text, nl=False)


@app.command()
def validate(ctx: typer.Context) -> None:
    """Build the policy and report a summary."""
    cfg: AppConfig = ctx.obj
    allowlist = _build(ctx)
    handlers = event_handler_attributes()
    exposed = [n for n in allowlist if allowlist.allowed_attributes_for(n) & handlers]

    console.print("\n[bold]SVG Allowlist[/bold]")
    console.print(f"  Elements: [cyan]{len(allowlist)}[/cyan]")
    console.print(f"  Attribute groups: [cyan]{len(ATTRIBUTE_GROUPS)}[/cyan]")
    if cfg.policy.blocked_elements:
        console.print(f"  Blocked by config: [cyan]{', '.join(cfg.policy.blocked_elements)}[/cyan]")
    if exposed:
        console.print(
            f"\n  [yellow]Event handler attributes are allowed on {len(exposed)} elements.[/yellow]"
            " Set [cyan]policy.strip_event_handlers[/cyan] to remove them."
        )
    else:
        console.print("\n  [green]No event handler attributes are allowed.[/green]")
    console.print("\n[bold green]Policy OK[/bold green]")


@app.command()
def sanitize(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="SVG file to sanitize"),
) -> None:
    """Print a sanitized copy of an SVG file."""
    allowlist = _build(ctx)
    typer.echo(sanitize_svg(path.read_text(), allowlist))
