"""CLI command: cssatom atomize -- rewrite stylesheets into atomic rules."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssatom.config import AtomizerConfig
from cssatom.engine import atomize as run_atomize


@click.command()
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "-o",
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for output files (default: next to each input).",
)
@click.option("--uglify", is_flag=True, help="Replace class names with short tokens.")
@click.option("--prefix", default="rp__", show_default=True, help="Class name prefix.")
@click.option("--compress", is_flag=True, help="Write rules without whitespace.")
@click.option("--quiet", is_flag=True, help="Only print errors.")
def atomize(
    files: tuple[str, ...],
    out_dir: str | None,
    uglify: bool,
    prefix: str,
    compress: bool,
    quiet: bool,
) -> None:
    """Atomize one or more CSS files.

    Writes <name>.atomic.css and <name>.classmap.json for every input. Files
    that fail to parse are reported and skipped; the exit code is 1 if any
    file failed.
    """
    failed: list[str] = []

    for file in files:
        css_path = Path(file)
        errors: list[str] = []

        def collect(message: str, detail: object, _errors: list[str] = errors) -> None:
            _errors.append(f"{message}: {detail}" if detail is not None else message)

        config = AtomizerConfig(
            verbose=True,
            class_prefix=prefix,
            compress=compress,
            custom_logger=collect,
        )
        result = run_atomize(config, css_path.read_text(encoding="utf-8"), uglify)

        if errors:
            for error in errors:
                click.echo(f"{css_path.name}: {error}", err=True)
            failed.append(css_path.name)
            continue

        target_dir = Path(out_dir) if out_dir else css_path.parent
        target_dir.mkdir(parents=True, exist_ok=True)
        css_out = target_dir / f"{css_path.stem}.atomic.css"
        map_out = target_dir / f"{css_path.stem}.classmap.json"
        css_out.write_text(result.output + "\n", encoding="utf-8")
        map_out.write_text(json.dumps(result.class_map, indent=2) + "\n", encoding="utf-8")

        if not quiet:
            click.echo(
                f"OK: {css_path.name} -> {css_out.name}, {map_out.name} "
                f"({len(result.class_map)} selector(s))"
            )

    if failed:
        click.echo(f"Failed: {len(failed)} of {len(files)} file(s)", err=True)
        sys.exit(1)
