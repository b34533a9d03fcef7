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


"""
Layered configuration.

Every source is a flat mapping of setting name to raw value. Sources are
ordered from most to least important and the first source that defines a
setting wins; whatever is left unset falls back to the dataclass default.
The merged mapping is validated once with pydantic.
"""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, NamedTuple

from loguru import logger
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class ConfigSource:
    name: str
    values: dict[str, Any]

    def redacted(self) -> dict[str, Any]:
        # api keys and the like never reach the log file
        return {k: ("***" if "key" in k else v) for k, v in self.values.items()}


class ResolvedConfig(NamedTuple):
    config: Any
    sources: list[str]
    used_defaults: bool


class ConfigLoader:
    def __init__(self, config_model: type, env_prefix: str):
        self.config_model = config_model
        self.env_prefix = env_prefix.lower()
        self.adapter = TypeAdapter(config_model)
        self.keys = frozenset(f.name for f in fields(config_model))

    @staticmethod
    def read_file(path: Path) -> dict[str, Any]:
        """TOML contents of path; a missing, unreadable or malformed file counts as empty."""
        if not path.is_file():
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Ignoring malformed config file {path}: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}

    def read_env(self) -> dict[str, Any]:
        """Settings given as environment variables, e.g. GROUPCOMMIT_MODEL -> model."""
        cut = len(self.env_prefix)
        return {
            name[cut:].lower(): value
            for name, value in os.environ.items()
            if name.lower().startswith(self.env_prefix)
        }

    def collect_sources(
        self,
        cli_args: dict[str, Any],
        local_path: Path,
        global_path: Path,
        custom_path: Path | None = None,
    ) -> list[ConfigSource]:
        sources = [ConfigSource("Input Args", cli_args)]
        if custom_path is not None:
            sources.append(ConfigSource("Custom Config", self.read_file(custom_path)))
        sources += [
            ConfigSource("Local Config", self.read_file(local_path)),
            ConfigSource("Environment Variables", self.read_env()),
            ConfigSource("Global Config", self.read_file(global_path)),
        ]
        return sources

    def resolve(self, sources: list[ConfigSource]) -> ResolvedConfig:
        merged: dict[str, Any] = {}
        contributors: list[str] = []

        for source in sources:
            logger.debug(f"Config source {source.name}: {source.redacted()}")
            fresh = {
                k: v for k, v in source.values.items() if k in self.keys and k not in merged
            }
            if fresh:
                merged.update(fresh)
                contributors.append(source.name)

        try:
            config = self.adapter.validate_python(merged)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration value", str(e)) from e

        return ResolvedConfig(config, contributors, merged.keys() != self.keys)

    def load(
        self,
        cli_args: dict[str, Any],
        local_path: Path,
        global_path: Path,
        custom_path: Path | None = None,
    ) -> ResolvedConfig:
        """Read every source and build the config model, highest priority first."""
        return self.resolve(
            self.collect_sources(cli_args, local_path, global_path, custom_path)
        )
