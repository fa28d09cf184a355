"""Static provider/model catalog and read-only lookups over it.

The table below is built once at import time into a ``ProviderCatalog`` and
never mutated afterwards. Dynamically discovered models (Ollama) and
user-defined providers are layered on by callers as separate state.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from modelcatalog.core.errors import (
    CatalogIntegrityError,
    UnknownModelError,
    UnknownProviderError,
)
from modelcatalog.core.types import ModelConfig, ProviderConfig, ProviderType, SelectedModel
from modelcatalog.utils.log import get_logger

logger = get_logger()

ProviderKey = Union[ProviderType, str]


class ProviderCatalog:
    """Ordered, read-only index over provider descriptors."""

    def __init__(self, providers: Sequence[ProviderConfig], default: SelectedModel) -> None:
        if not providers:
            raise CatalogIntegrityError("Provider catalog cannot be empty")
        index: Dict[ProviderType, ProviderConfig] = {}
        for provider in providers:
            if provider.id in index:
                raise CatalogIntegrityError(f"Duplicate provider id '{provider.id.value}'")
            index[provider.id] = provider
        self._providers: Tuple[ProviderConfig, ...] = tuple(providers)
        self._index = index
        self._models: Dict[str, ModelConfig] = {
            model.full_id: model for provider in self._providers for model in provider.models
        }

        default_model = self.get_model(default.provider, default.model)
        if default_model is None:
            raise CatalogIntegrityError(
                f"Default model '{default.model}' not found under provider '{default.provider.value}'"
            )
        self._default = default
        self._default_model = default_model
        logger.debug(
            "[catalog] Built provider catalog",
            extra={"providers": len(self._providers), "models": len(self._models)},
        )

    @property
    def providers(self) -> List[ProviderConfig]:
        """Return providers in display order."""
        return list(self._providers)

    @property
    def default(self) -> SelectedModel:
        return self._default

    def provider_ids(self) -> List[ProviderType]:
        return [provider.id for provider in self._providers]

    def get_provider(self, provider: ProviderKey) -> Optional[ProviderConfig]:
        """Look up a provider; unknown or unregistered ids return None."""
        key = ProviderType.coerce(provider)
        if key is None:
            return None
        return self._index.get(key)

    def get_model(self, provider: ProviderKey, model_id: str) -> Optional[ModelConfig]:
        """Look up a model by short id or full id under ``provider``."""
        entry = self.get_provider(provider)
        if entry is None:
            return None
        prefix = f"{entry.id.value}/"
        if model_id.startswith(prefix):
            model_id = model_id[len(prefix):]
        elif "/" in model_id:
            return None
        return entry.get_model(model_id)

    def find_model(self, full_id: str) -> Optional[ModelConfig]:
        return self._models.get(full_id)

    def models(self, provider: Optional[ProviderKey] = None) -> List[ModelConfig]:
        """Return models in display order, optionally for a single provider."""
        if provider is None:
            return list(self._models.values())
        entry = self.get_provider(provider)
        return list(entry.models) if entry else []

    def default_model_config(self) -> ModelConfig:
        return self._default_model

    def api_key_env_var(self, provider: ProviderKey) -> Optional[str]:
        entry = self.get_provider(provider)
        return entry.api_key_env_var if entry else None

    def base_url(self, provider: ProviderKey) -> Optional[str]:
        entry = self.get_provider(provider)
        return entry.base_url if entry else None

    def require_provider(self, provider: ProviderKey) -> ProviderConfig:
        entry = self.get_provider(provider)
        if entry is None:
            raise UnknownProviderError(str(getattr(provider, "value", provider)))
        return entry

    def require_model(self, provider: ProviderKey, model_id: str) -> ModelConfig:
        entry = self.require_provider(provider)
        model = self.get_model(entry.id, model_id)
        if model is None:
            raise UnknownModelError(entry.id.value, model_id)
        return model


def _model(
    provider: ProviderType,
    model_id: str,
    display_name: str,
    context_window: int,
    supports_vision: bool,
) -> ModelConfig:
    return ModelConfig(
        id=model_id,
        display_name=display_name,
        provider=provider,
        context_window=context_window,
        supports_vision=supports_vision,
    )


def _glm_models(provider: ProviderType) -> Tuple[ModelConfig, ...]:
    """GLM lineup shared by the Z.AI pay-as-you-go and coding-plan endpoints."""
    rows: Iterable[Tuple[str, str, int, bool]] = (
        ("glm-4.7", "GLM-4.7", 204_000, False),
        ("glm-4.6", "GLM-4.6", 204_000, False),
        ("glm-4.5", "GLM-4.5", 131_000, False),
        ("glm-4.5-flash", "GLM-4.5 Flash", 131_000, False),
        ("glm-4.5-air", "GLM-4.5 Air", 131_000, False),
        ("glm-4.5v", "GLM-4.5V", 64_000, True),
        ("glm-4.6v", "GLM-4.6V", 128_000, True),
    )
    return tuple(_model(provider, *row) for row in rows)


DEFAULT_PROVIDERS: Tuple[ProviderConfig, ...] = (
    ProviderConfig(
        id=ProviderType.ANTHROPIC,
        name="Anthropic",
        requires_api_key=True,
        api_key_env_var="ANTHROPIC_API_KEY",
        models=(
            _model(ProviderType.ANTHROPIC, "claude-haiku-4-5", "Claude Haiku 4.5", 200_000, True),
            _model(ProviderType.ANTHROPIC, "claude-sonnet-4-5", "Claude Sonnet 4.5", 200_000, True),
            _model(ProviderType.ANTHROPIC, "claude-opus-4-5", "Claude Opus 4.5", 200_000, True),
        ),
    ),
    ProviderConfig(
        id=ProviderType.OPENAI,
        name="OpenAI",
        requires_api_key=True,
        api_key_env_var="OPENAI_API_KEY",
        models=(
            _model(ProviderType.OPENAI, "gpt-5-codex", "GPT 5 Codex", 1_000_000, True),
        ),
    ),
    ProviderConfig(
        id=ProviderType.GOOGLE,
        name="Google AI",
        requires_api_key=True,
        api_key_env_var="GOOGLE_GENERATIVE_AI_API_KEY",
        models=(
            _model(ProviderType.GOOGLE, "gemini-3-pro-preview", "Gemini 3 Pro", 2_000_000, True),
            _model(ProviderType.GOOGLE, "gemini-3-flash-preview", "Gemini 3 Flash", 1_000_000, True),
        ),
    ),
    ProviderConfig(
        id=ProviderType.XAI,
        name="xAI",
        requires_api_key=True,
        api_key_env_var="XAI_API_KEY",
        base_url="https://api.x.ai",
        models=(
            _model(ProviderType.XAI, "grok-4", "Grok 4", 256_000, True),
            _model(ProviderType.XAI, "grok-3", "Grok 3", 131_000, False),
        ),
    ),
    ProviderConfig(
        id=ProviderType.ZAI,
        name="Z.AI",
        requires_api_key=True,
        api_key_env_var="ZHIPU_API_KEY",
        base_url="https://api.z.ai/api/paas/v4",
        models=_glm_models(ProviderType.ZAI),
    ),
    ProviderConfig(
        id=ProviderType.ZAI_CODING_PLAN,
        name="Z.AI Coding Plan",
        requires_api_key=True,
        api_key_env_var="ZHIPU_API_KEY",
        base_url="https://api.z.ai/api/coding/paas/v4",
        models=_glm_models(ProviderType.ZAI_CODING_PLAN),
    ),
)

DEFAULT_MODEL = SelectedModel(
    provider=ProviderType.ANTHROPIC,
    model="anthropic/claude-opus-4-5",
)

_CATALOG = ProviderCatalog(DEFAULT_PROVIDERS, DEFAULT_MODEL)


def get_catalog() -> ProviderCatalog:
    """Return the process-wide catalog."""
    return _CATALOG


def list_providers() -> List[ProviderConfig]:
    return _CATALOG.providers


def get_provider(provider: ProviderKey) -> Optional[ProviderConfig]:
    """Look up a provider; ``ollama``, ``custom`` and unknown ids return None."""
    return _CATALOG.get_provider(provider)


def get_model(provider: ProviderKey, model_id: str) -> Optional[ModelConfig]:
    return _CATALOG.get_model(provider, model_id)


def find_model(full_id: str) -> Optional[ModelConfig]:
    """Look up a model by ``provider/model`` full id."""
    return _CATALOG.find_model(full_id)


def list_models(provider: Optional[ProviderKey] = None) -> List[ModelConfig]:
    return _CATALOG.models(provider)


def get_default_model() -> SelectedModel:
    return _CATALOG.default


def require_provider(provider: ProviderKey) -> ProviderConfig:
    return _CATALOG.require_provider(provider)


def require_model(provider: ProviderKey, model_id: str) -> ModelConfig:
    return _CATALOG.require_model(provider, model_id)
