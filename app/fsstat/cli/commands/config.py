"""Config command for inspecting and creating the configuration file."""

import json
from typing import Annotated

import typer

from fsstat.core.config import get_default_config, load_config, save_config
from fsstat.core.errors import ConfigError, ConfigNotFoundError
from fsstat.core.paths import ensure_config_dir, get_config_path
from fsstat.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Inspect and create the fsstat configuration.",
    no_args_is_help=True,
)


@app.command("show")
def show_config() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except ConfigNotFoundError:
        print_info(f"No config file at {config_path}, showing defaults.")
        config = get_default_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print_json(json.dumps(config.model_dump()))


@app.command("init")
def init_config(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ensure_config_dir()
        saved = save_config(get_default_config(), config_path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
