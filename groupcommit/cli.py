# -----------------------------------------------------------------------------
# groupcommit - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of groupcommit.
#
# groupcommit is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


from pathlib import Path

import typer
from colorama import init
from loguru import logger

from groupcommit.commands import commit, config, plan
from groupcommit.context import GlobalConfig, GlobalContext
from groupcommit.core.config.config_loader import ConfigLoader
from groupcommit.core.exceptions import handle_groupcommit_exception
from groupcommit.core.logging.logging import setup_logger
from groupcommit.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

init(autoreset=True)

app = typer.Typer(
    help="groupcommit: split your changes into one commit per project scope",
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="commit")(commit.main)
app.command(name="plan")(plan.main)
app.command(name="config")(config.main)

# these manage settings themselves and must work outside a repository
NO_CONTEXT_COMMANDS = frozenset({"config"})


def load_global_config(
    overrides: dict, custom_config: str | None
) -> tuple[GlobalConfig, list[str]]:
    loader = ConfigLoader(GlobalConfig, config.ENV_PREFIX)
    resolved = loader.load(
        overrides,
        local_path=Path(config.CONFIG_FILENAME),
        global_path=config.global_config_path(),
        custom_path=Path(custom_config) if custom_config else None,
    )
    return resolved.config, resolved.sources


@app.callback(invoke_without_command=True)
@handle_groupcommit_exception
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_dir: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show the directory groupcommit writes its logs to and exit",
    ),
    repo_path: str = typer.Option(
        ".", "--repo", help="Repository to operate on."
    ),
    custom_config: str | None = typer.Option(
        None, "--custom-config", help="Extra TOML config file, overrides local and global config."
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        help="provider:model used to write commit messages (e.g. openai:gpt-4o-mini), 'no-model' for heuristics.",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", help="API key for the model provider."
    ),
    temperature: float | None = typer.Option(
        None, "--temperature", help="Model temperature between 0.0 and 1.0."
    ),
    commit_style: str | None = typer.Option(
        None, "--commit-style", help="conventional or emoji."
    ),
    verbose: bool | None = typer.Option(
        None, "--verbose", "-v", help="Show debug output."
    ),
    silent: bool | None = typer.Option(
        None, "--silent", "-s", help="Only print errors and confirmation prompts."
    ),
    auto_accept: bool | None = typer.Option(
        None, "--yes", "-y", help="Commit every group without asking."
    ),
) -> None:
    """
    Runs before every command: sets up logging, merges the configuration
    layers and builds the shared GlobalContext.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    command = ctx.invoked_subcommand
    setup_logger(command, debug=bool(verbose), silent=bool(silent))

    if command in NO_CONTEXT_COMMANDS:
        return

    overrides = {
        key: value
        for key, value in {
            "model": model,
            "api_key": api_key,
            "temperature": temperature,
            "commit_style": commit_style,
            "verbose": verbose,
            "silent": silent,
            "auto_accept": auto_accept,
        }.items()
        if value is not None
    }
    global_config, sources = load_global_config(overrides, custom_config)

    # config files may change verbosity
    setup_logger(command, debug=global_config.verbose, silent=global_config.silent)
    logger.debug(f"Configuration built from: {sources or ['defaults']}")

    ctx.obj = GlobalContext.from_global_config(global_config, Path(repo_path))


def run_app():
    ensure_utf8_output()
    setup_signal_handlers()
    app(prog_name="gcm")


if __name__ == "__main__":
    run_app()
