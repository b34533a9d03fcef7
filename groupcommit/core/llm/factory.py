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
Chat model construction.

Provider integrations are optional extras, so each one is imported only when
it is actually requested. A missing package or API key is reported as a
groupcommitError instead of an ImportError deep inside LangChain.
"""

import importlib
import os
from dataclasses import dataclass

from langchain_core.language_models.chat_models import BaseChatModel
from loguru import logger

from ..exceptions import AIServiceError, ConfigurationError, api_key_missing


@dataclass
class ModelConfig:
    provider: str
    model_name: str
    api_key: str | None = None
    temperature: float = 0.7
    max_tokens: int | None = 500


@dataclass(frozen=True)
class ProviderSpec:
    label: str
    module: str
    class_name: str
    package: str
    key_env: str | None  # None: no key needed (local models)
    key_kwarg: str | None
    tokens_kwarg: str


PROVIDERS: dict[str, ProviderSpec] = {
    "openai": ProviderSpec(
        "OpenAI", "langchain_openai", "ChatOpenAI", "langchain-openai",
        "OPENAI_API_KEY", "api_key", "max_tokens",
    ),
    "gemini": ProviderSpec(
        "Gemini", "langchain_google_genai", "ChatGoogleGenerativeAI", "langchain-google-genai",
        "GEMINI_API_KEY", "google_api_key", "max_output_tokens",
    ),
    "anthropic": ProviderSpec(
        "Anthropic", "langchain_anthropic", "ChatAnthropic", "langchain-anthropic",
        "ANTHROPIC_API_KEY", "api_key", "max_tokens",
    ),
    "ollama": ProviderSpec(
        "Ollama", "langchain_ollama", "ChatOllama", "langchain-ollama",
        None, None, "num_predict",
    ),
}

PROVIDER_ALIASES = {"google": "gemini", "claude": "anthropic"}

OLLAMA_DEFAULT_URL = "http://localhost:11434"


def _provider_spec(name: str) -> ProviderSpec:
    key = PROVIDER_ALIASES.get(name.lower(), name.lower())
    if key not in PROVIDERS:
        raise ConfigurationError(
            f"Unsupported LLM provider: {name}",
            f"Supported providers: {', '.join(PROVIDERS)}",
        )
    return PROVIDERS[key]


def _load_chat_class(spec: ProviderSpec) -> type[BaseChatModel]:
    try:
        module = importlib.import_module(spec.module)
    except ImportError as e:
        raise AIServiceError(
            f"{spec.package} is not installed",
            f"Install it with: pip install {spec.package}",
        ) from e
    return getattr(module, spec.class_name)


def create_llm_model(config: ModelConfig) -> BaseChatModel:
    """
    Build the LangChain chat model described by config.

    Raises:
        ConfigurationError: unknown provider or missing API key
        AIServiceError: the provider's integration package is not installed
    """
    spec = _provider_spec(config.provider)
    chat_class = _load_chat_class(spec)

    kwargs = {
        "model": config.model_name,
        "temperature": config.temperature,
        spec.tokens_kwarg: config.max_tokens,
    }

    if spec.key_env is not None:
        api_key = config.api_key or os.getenv(spec.key_env)
        if not api_key:
            raise api_key_missing(spec.label)
        kwargs[spec.key_kwarg] = api_key
    else:
        kwargs["base_url"] = os.getenv("OLLAMA_BASE_URL", OLLAMA_DEFAULT_URL)

    logger.debug(f"Creating chat model {spec.class_name}(model={config.model_name})")
    return chat_class(**kwargs)


def parse_model_arg(model_arg: str) -> tuple[str, str]:
    """'provider:model', or a bare model name whose provider is obvious from it."""
    provider, sep, model_name = model_arg.partition(":")
    if sep:
        return provider, model_name

    lowered = model_arg.lower()
    if "gpt" in lowered or lowered.startswith(("o1", "o3", "o4")):
        return "openai", model_arg
    if "gemini" in lowered:
        return "gemini", model_arg
    if "claude" in lowered:
        return "anthropic", model_arg

    raise ConfigurationError(
        f"Cannot infer provider from model '{model_arg}'",
        "Use provider:model, e.g. openai:gpt-4o-mini",
    )


def try_create_model(
    model_arg: str | None, api_key_arg: str | None, temperature: float
) -> BaseChatModel | None:
    """None when no model is configured; commit messages then come from heuristics."""
    if model_arg in (None, "", "no-model"):
        logger.debug("No model configured, using heuristic commit messages")
        return None

    provider, model_name = parse_model_arg(model_arg)
    return create_llm_model(
        ModelConfig(provider, model_name, api_key=api_key_arg, temperature=temperature)
    )
