"""CLI module for MKV Remux."""

import logging
import sys
from pathlib import Path

import click

from mkv_remux import __version__
from mkv_remux.cli.exit_codes import ExitCode
from mkv_remux.config import ConfigError, ConfigSource, load_config
from mkv_remux.introspector import ProbeError
from mkv_remux.logging import configure_logging
from mkv_remux.workflow import plan_remux

logger = logging.getLogger(__name__)

BANNER = f"MKV Remux v{__version__}"


class RemuxCommandLine(click.Command):
    """click.Command that reports usage errors with ExitCode.USAGE_ERROR."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(BANNER, err=True)
            click.echo(ctx.get_usage(), err=True)
            click.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
            click.echo(f"\nError: {e.format_message()}", err=True)
            ctx.exit(ExitCode.USAGE_ERROR)


@click.command("mkv-remux", cls=RemuxCommandLine)
@click.version_option(version=__version__, prog_name="mkv-remux")
@click.argument("input_file", type=click.Path())
@click.argument("output_file", type=click.Path())
@click.option(
    "-lang",
    "--lang",
    "lang",
    default=None,
    metavar="CODE",
    help="Original (video) language. Overrides detection from the video stream.",
)
@click.option(
    "--target-language",
    default=None,
    metavar="CODE",
    help="Preferred audio/subtitle language (default: rus).",
)
@click.option(
    "--default-language",
    default=None,
    metavar="CODE",
    help="Fallback language (default: eng).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["shell", "json"]),
    default="shell",
    help="Print the command as a shell string or a JSON argument list.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.mkv-remux/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Also write logs to this file.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
def main(
    input_file: str,
    output_file: str,
    lang: str | None,
    target_language: str | None,
    default_language: str | None,
    output_format: str,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Print an ffmpeg command that remuxes INPUT_FILE into OUTPUT_FILE.

    Keeps the first video stream, one audio and one subtitle stream for each
    of the target, original and default languages, drops chapters and global
    metadata, and tags every stream with its language.
    """
    cli_source = ConfigSource(
        target_language=target_language,
        default_language=default_language,
        logging_level=log_level,
        logging_format="json" if log_json else None,
        logging_file=log_file,
    )
    try:
        config = load_config(config_path, cli_source)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)

    try:
        plan = plan_remux(input_file, output_file, config, lang_override=lang)
    except ProbeError as e:
        click.echo(f"Error: Unable to probe file: {input_file}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PROBE_ERROR)

    if output_format == "json":
        click.echo(plan.command.to_json())
    else:
        click.echo(plan.command.to_shell())
