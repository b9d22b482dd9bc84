"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpost.config import CONFIG_FILE, Settings, default_config_text, load_config
from mdpost.core.emit import to_json
from mdpost.core.errors import ParseError
from mdpost.core.models import BatchReport
from mdpost.core.parse import parse_file
from mdpost.core.pipeline import run_check
from mdpost.core.validate import validate
from mdpost.logging import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _report_json(report: BatchReport) -> dict:
    return {
        "ok": report.ok,
        "parsed": report.parsed,
        "failed": report.failed,
        "flagged": report.flagged,
        "files": [
            {
                "path": f.path,
                "error": f.error,
                "findings": [finding.model_dump(mode="json") for finding in f.findings],
            }
            for f in report.files
        ],
    }


def _echo_report(report: BatchReport) -> None:
    """Print failed and flagged files, then a summary line."""
    for f in report.files:
        if f.error:
            typer.echo(f"  ERROR {f.error}")
        for finding in f.findings:
            typer.echo(f"  {f.path}: [{finding.code.value}] {finding.message}")
    typer.echo(
        f"Checked {len(report.files)} file(s) - "
        f"{report.parsed} parsed, "
        f"{report.failed} failed, "
        f"{report.flagged} flagged"
    )


def main_callback(
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="-v for INFO, -vv for DEBUG")] = 0,
    ):
    """Parse and validate front-matter Markdown posts."""
    configure_logging(verbose)


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    layouts: Annotated[Optional[list[str]], typer.Option("--layout", help="Allowed layout (repeatable)")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Threads used for the batch")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full report as JSON")] = False,
    ):
    """Parse and validate every post under PATH. Exits 1 on any error or finding."""
    settings = _settings(overrides={"layouts": layouts or None, "workers": workers})
    if not Path(path).exists():
        _fail(f"Path not found: {path}")

    report = run_check(path, settings)
    if not report.files:
        typer.echo(f"No matching files found under {path}.")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(_report_json(report), indent=2))
    else:
        _echo_report(report)
    if not report.ok:
        raise typer.Exit(1)


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Post to parse", exists=True, dir_okay=False, readable=True)],
    body: Annotated[bool, typer.Option("--body/--no-body", help="Include the body text")] = True,
    ):
    """Print a single post's front matter, identity, and findings as JSON."""
    settings = _settings()
    try:
        doc = parse_file(path)
    except ParseError as e:
        _fail("Could not parse front matter", e)
    except UnicodeDecodeError as e:
        _fail(f"{path} is not UTF-8 text", e)
    except OSError as e:
        _fail(f"Cannot read {path}", e)

    data = to_json(doc, include_body=body)
    result = validate(doc, settings.layouts, settings.title_required)
    data["findings"] = [f.model_dump(mode="json") for f in result.findings]
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config file")] = False,
    ):
    """Write a config.yaml holding the default settings to the current directory."""
    target = Path(CONFIG_FILE)
    if target.exists() and not force:
        _fail(f"{CONFIG_FILE} already exists; use --force to overwrite")
    target.write_text(default_config_text(), encoding="utf-8")
    typer.echo(f"Wrote {target}")
