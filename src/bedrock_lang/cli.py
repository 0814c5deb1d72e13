"""
Command-line tools for plugin authors using click.

    bedrock-lang validate lang/
    bedrock-lang list -c lang.yaml
    bedrock-lang translate de_DE greet.hello -d lang/ -p "{name}=Alex"
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .bootstrap import build_manager
from .config.loader import load_config
from .config.schema import LoggingConfig
from .errors import LangError
from .loading.loader import load_language_dir
from .logging import configure_logging

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3


def _parse_placeholders(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated TOKEN=VALUE options into a placeholder mapping."""
    placeholders: dict[str, str] = {}
    for item in values:
        token, sep, value = item.partition("=")
        if not sep or not token:
            raise click.BadParameter(f"expected TOKEN=VALUE, got '{item}'", param_hint="-p")
        placeholders[token] = value
    return placeholders


def _load_manager(config: Path | None, directory: Path | None):
    """Load configuration and build the manager, exiting on errors."""
    try:
        app_config = load_config(config_path=config, cli_args={"directory": directory})
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    configure_logging(app_config.logging)

    try:
        return build_manager(app_config)
    except LangError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILED)


@click.group()
@click.version_option(version=__version__, prog_name="bedrock-lang")
def main() -> None:
    """bedrock-lang - Translation files for Minecraft Bedrock server plugins."""
    pass


@main.command()
@click.argument("directory", type=click.Path(path_type=Path))
@click.option("--lenient", is_flag=True, help="Skip broken files instead of failing")
@click.option("--no-locale-check", is_flag=True, help="Accept file names that are not official locales")
def validate(directory: Path, lenient: bool, no_locale_check: bool) -> None:
    """Validate every language file in DIRECTORY."""
    configure_logging(LoggingConfig(level="warn"))

    try:
        languages = load_language_dir(
            directory,
            strict=not lenient,
            validate_locale=not no_locale_check,
        )
    except LangError as e:
        click.echo(f"Invalid language files: {e}", err=True)
        sys.exit(EXIT_FAILED)

    if not languages:
        click.echo(f"No language files found in {directory}", err=True)
        sys.exit(EXIT_FAILED)

    click.echo(f"Valid language files ({len(languages)}):")
    for lang in languages:
        click.echo(f"  {lang.locale:<8} {lang.name} ({len(lang)} keys)")


@main.command("list")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option("-d", "--directory", type=click.Path(path_type=Path), help="Language directory")
def list_languages(config: Path | None, directory: Path | None) -> None:
    """List loaded languages. The default is marked with *."""
    manager = _load_manager(config, directory)
    default = manager.default

    click.echo("Languages:")
    for lang in manager.languages():
        marker = " *" if default is not None and lang.locale == default.locale else ""
        click.echo(f"  {lang.locale:<8} {lang.name}{marker}")


@main.command()
@click.argument("locale")
@click.argument("key")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option("-d", "--directory", type=click.Path(path_type=Path), help="Language directory")
@click.option(
    "-p",
    "--placeholder",
    "placeholders",
    multiple=True,
    help="Placeholder as TOKEN=VALUE, e.g. -p '{name}=Alex' (repeatable)",
)
def translate(
    locale: str,
    key: str,
    config: Path | None,
    directory: Path | None,
    placeholders: tuple[str, ...],
) -> None:
    """Print the translation of KEY for LOCALE."""
    parsed = _parse_placeholders(placeholders)
    manager = _load_manager(config, directory)
    click.echo(manager.translate_locale(locale, key, parsed))


if __name__ == "__main__":
    main()
