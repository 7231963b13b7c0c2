# === FILE: sitemap_batcher/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for sitemap_batcher.

Commands:
  run       Discover product URLs, batch them and export the artifact once
  config    Show the effective configuration

Global options:
  --config PATH       Path to the YAML/JSON config (default: configs/default.yaml)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format string

run options:
  --bucket NAME       Override the destination bucket
  --keyword KW        Override the child sitemap keyword
  --batch-size N      Override the batch size
  --local DIR         Write to a local directory instead of S3
  --pretty            Indent the printed JSON result

Example:
  sitemap-batcher --config configs/default.yaml run --local exports --pretty
"""
import json
import sys
from pathlib import Path

import click

from sitemap_batcher import __version__
from sitemap_batcher.config import load_config
from sitemap_batcher.engine import Engine
from sitemap_batcher.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="sitemap-batcher, version %(version)s")
@click.option(
    "--config", "-c", "config_path",
    default="configs/default.yaml",
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the configuration file.",
)
@click.option(
    "--log-level", "log_level",
    default="INFO", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Logging level",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help="Log file path (stderr when omitted)",
)
@click.option(
    "--log-format", "log_format",
    default="%(asctime)s %(levelname)s %(name)s %(message)s",
    show_default=True,
    help="Logging format string",
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """sitemap-batcher command group."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command("run", context_settings=CONTEXT_SETTINGS)
@click.option("--bucket", "-b", "bucket_name", default=None, help="Destination bucket name")
@click.option("--keyword", "-k", "keyword", default=None, help="Child sitemap keyword")
@click.option("--batch-size", "-n", "batch_size", type=click.IntRange(min=1), default=None, help="URLs per batch")
@click.option(
    "--local", "-l", "local_root",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Store the artifact under this directory instead of S3",
)
@click.option("--pretty", is_flag=True, help="Indent the JSON result (2 spaces)")
@click.pass_context
def run(ctx, bucket_name, keyword, batch_size, local_root, pretty):
    """Run the pipeline once and print the result."""
    overrides = {"bucket_name": bucket_name, "keyword": keyword, "batch_size": batch_size}
    if local_root is not None:
        overrides.update(storage="local", local_root=local_root)
    try:
        cfg = load_config(ctx.obj["config_path"], **overrides)
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")

    try:
        result = Engine(cfg).run()
    except Exception as e:
        print_error(f"Pipeline failed: {e}")

    click.echo(json.dumps(result.to_dict(), indent=2 if pretty else None))
    if result.failed_sitemaps:
        click.secho(f"{len(result.failed_sitemaps)} sitemap(s) skipped after errors", fg="yellow", err=True)


@cli.command("config", context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    try:
        cfg = load_config(ctx.obj["config_path"])
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
