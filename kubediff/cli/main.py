"""Click commands for kubediff.

Example:
    $ kubediff name deployment.yaml
    $ kubediff diff live.yaml desired.yaml
    $ kubediff diff live.yaml desired.yaml --summarize
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import click
import yaml

from kubediff import __version__
from kubediff.config import load_config
from kubediff.diff import FilteredStream, KubeDiffError, compute_diff, format_name, summarize_diff
from kubediff.models.config import KubeDiffConfig
from kubediff.observability.logging import get_logger, setup_logging

_logger = get_logger("cli")


def _load_manifests(path: Path) -> list[dict[str, Any]]:
    """Every mapping document in the YAML file at *path*."""
    try:
        with path.open(encoding="utf-8") as fh:
            documents = list(yaml.safe_load_all(fh))
    except yaml.YAMLError as exc:
        raise click.ClickException(f"{path}: invalid YAML: {exc}") from exc
    return [doc for doc in documents if isinstance(doc, dict)]


def _dump(manifest: dict[str, Any]) -> str:
    return yaml.safe_dump(manifest, sort_keys=True, default_flow_style=False)


@click.group()
@click.version_option(version=__version__, prog_name="kubediff")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """kubediff - show what applying Kubernetes manifests would change."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(config.log.level)
    ctx.obj = config


@cli.command("name")
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def name_command(manifest_file: Path) -> None:
    """Print the comparison filename of every manifest in MANIFEST_FILE."""
    for manifest in _load_manifests(manifest_file):
        click.echo(format_name(manifest))


@cli.command("diff")
@click.argument("live_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("desired_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--summarize",
    is_flag=True,
    default=False,
    help="Print a diffstat(1) summary instead of the full diff.",
)
@click.option(
    "--filter-stderr",
    "filters",
    multiple=True,
    metavar="REGEX",
    help="Drop comparison-tool stderr lines matching REGEX. Repeatable.",
)
@click.pass_obj
def diff_command(
    config: KubeDiffConfig,
    live_file: Path,
    desired_file: Path,
    summarize: bool,
    filters: tuple[str, ...],
) -> None:
    """Diff the manifests in LIVE_FILE against those in DESIRED_FILE.

    Manifests are paired by apiVersion, kind, namespace and name. A desired
    manifest without a live counterpart is compared against nothing.
    Nothing is printed when there are no differences.
    """
    live = {format_name(m): m for m in _load_manifests(live_file)}
    desired = _load_manifests(desired_file)

    patterns = [*config.stderr_filters, *filters]
    try:
        stderr = FilteredStream(patterns) if patterns else None
    except re.error as exc:
        raise click.BadParameter(f"invalid pattern: {exc}", param_hint="--filter-stderr") from exc

    rendered: list[str] = []
    try:
        for manifest in desired:
            name = format_name(manifest)
            live_manifest = live.get(name)
            live_text = _dump(live_manifest) if live_manifest is not None else ""
            text = compute_diff(name, live_text, _dump(manifest), config=config.tools, stderr=stderr)
            _logger.debug("manifest_compared", name=name, changed=text != "")
            if text:
                rendered.append(text)

        output = "".join(rendered)
        if summarize and output:
            output = summarize_diff(output, config.tools)
    except KubeDiffError as exc:
        raise click.ClickException(str(exc)) from exc

    if output:
        click.echo(output, nl=not output.endswith("\n"))
