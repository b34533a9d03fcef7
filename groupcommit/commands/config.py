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


import json
from dataclasses import MISSING, fields
from pathlib import Path
from textwrap import shorten
from typing import Any

import typer
from colorama import Fore, Style, init
from platformdirs import user_config_dir

from ..context import GlobalConfig
from ..core.config.config_loader import ConfigLoader

init(autoreset=True)

CONFIG_FILENAME = "groupcommitconfig.toml"
ENV_PREFIX = "groupcommit_"
SCOPES = ("local", "global", "env")
SENSITIVE_KEYS = frozenset({"api_key"})

DESCRIPTIONS = {
    "model": "LLM used for commit messages, provider:model (e.g. openai:gpt-4o-mini)",
    "api_key": "API key for the LLM provider",
    "temperature": "LLM temperature (0.0-1.0)",
    "prompt_style": "Prompt template: default, detailed, minimal or custom",
    "custom_prompt": "Template for prompt_style=custom, {diff} and {scope} are filled in",
    "commit_style": "Commit message style: conventional or emoji",
    "push": "Push to origin after committing",
    "verbose": "Show debug output",
    "silent": "Only print errors and confirmation prompts",
    "auto_accept": "Commit every group without asking",
}


def global_config_path() -> Path:
    return Path(user_config_dir("groupcommit")) / CONFIG_FILENAME


def _defaults() -> dict[str, Any]:
    return {
        f.name: None if f.default is MISSING else f.default for f in fields(GlobalConfig)
    }


def _show(key: str, value: Any) -> str:
    text = str(value)
    if key in SENSITIVE_KEYS and value is not None and len(text) > 8:
        return f"{text[:4]}...{text[-4:]}"
    return text


def print_rows(rows: list[tuple[str, str, str]], width: int = 50) -> None:
    """Each setting on two lines: name and description, then value and where it came from."""
    for key, value, origin in rows:
        print(
            f"{Fore.CYAN}{Style.BRIGHT}{key}{Style.RESET_ALL}: "
            f"{DESCRIPTIONS.get(key, '')}"
        )
        print(
            f"  {Fore.GREEN}{shorten(value, width=width, placeholder='...')}{Style.RESET_ALL} "
            f"{Fore.YELLOW}({origin}){Style.RESET_ALL}\n"
        )


def _fail(message: str) -> None:
    print(f"{Fore.RED}Error:{Style.RESET_ALL} {message}")
    raise typer.Exit(1)


def _require_known_key(key: str) -> None:
    if key in DESCRIPTIONS:
        return

    print(f"{Fore.RED}Error:{Style.RESET_ALL} Unknown configuration key '{key}'\n")
    print(f"{Style.BRIGHT}Available configuration options:{Style.RESET_ALL}\n")
    print_rows([(k, str(v), "Default") for k, v in sorted(_defaults().items())])
    raise typer.Exit(1)


def _coerce(key: str, raw: str) -> Any:
    """Values arrive as text; store booleans and numbers with their TOML type."""
    default = _defaults()[key]
    lowered = raw.strip().lower()

    if isinstance(default, bool):
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        _fail(f"{key} expects true or false, got '{raw}'")
    if isinstance(default, float):
        try:
            return float(raw)
        except ValueError:
            _fail(f"{key} expects a number, got '{raw}'")
    return raw


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    # a JSON string literal is a valid TOML basic string
    return json.dumps(str(value), ensure_ascii=False)


def write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"{key} = {_toml_value(value)}" for key, value in data.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def set_value(key: str, raw: str, scope: str) -> None:
    if scope == "env":
        variable = f"{ENV_PREFIX}{key}".upper()
        print(f"{Fore.GREEN}Set it as an environment variable:{Style.RESET_ALL}")
        print(f"  Linux/macOS: export {variable}='{raw}'")
        print(f"  Windows (PowerShell): $env:{variable}='{raw}'")
        return

    path = global_config_path() if scope == "global" else Path(CONFIG_FILENAME)
    data = ConfigLoader.read_file(path)
    data[key] = _coerce(key, raw)
    write_config_file(path, data)

    print(f"{Fore.GREEN}Set {key} = {_show(key, data[key])} ({scope}){Style.RESET_ALL}")
    print(f"Config file: {path.absolute()}")


def show_values(key: str | None, scope: str | None) -> None:
    layers: list[tuple[str, dict[str, Any]]] = []
    if scope in (None, "local"):
        layers.append(("Local Config", ConfigLoader.read_file(Path(CONFIG_FILENAME))))
    if scope in (None, "env"):
        layers.append(("Environment", ConfigLoader(GlobalConfig, ENV_PREFIX).read_env()))
    if scope in (None, "global"):
        layers.append(("Global Config", ConfigLoader.read_file(global_config_path())))

    defaults = _defaults()
    rows = []
    for name in [key] if key else sorted(DESCRIPTIONS):
        origin, value = next(
            ((label, data[name]) for label, data in layers if name in data),
            ("Default", defaults[name]),
        )
        rows.append((name, _show(name, value), origin))

    print_rows(rows)


def main(
    key: str | None = typer.Argument(None, help="Setting to show or change."),
    value: str | None = typer.Argument(None, help="New value; omit to show the current one."),
    scope: str | None = typer.Option(
        None,
        "--scope",
        help="local, global or env. Setting defaults to local, showing to all.",
    ),
) -> None:
    """
    Show or change groupcommit settings.

    Priority order: command-line options > custom config > local config > environment variables > global config

    Examples:
        # Show every setting and where its value comes from
        gcm config

        # Write commit messages with an LLM in this repository
        gcm config model "openai:gpt-4o-mini"

        # Emoji commit types everywhere
        gcm config commit_style emoji --scope global
    """
    if scope is not None and scope not in SCOPES:
        _fail(f"--scope must be one of: {', '.join(SCOPES)}")

    if key is not None:
        _require_known_key(key)

    if value is None:
        show_values(key, scope)
    else:
        set_value(key, value, scope or "local")
