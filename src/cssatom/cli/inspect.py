"""CLI command: cssatom inspect -- show how each rule would be treated."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssatom.config import AtomizerConfig
from cssatom.engine.classify import classify
from cssatom.parser import ParseError, parse_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Parse a CSS file and list its rules with their classification.

    Class-targeted selectors are atomized; everything else passes through.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_css(AtomizerConfig(verbose=False), source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    click.echo()
    for rule in stylesheet.rules:
        for selector in rule.selectors:
            kind = classify(selector.primary)
            parts = [f"  [{kind.value}]", selector.original]
            if selector.pseudo is not None:
                parts.append(f"pseudo={selector.pseudo.name}")
            parts.append(f"declarations={len(rule.declarations)}")
            click.echo("  ".join(parts))
