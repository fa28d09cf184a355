"""Provider and model descriptors shared by the catalog, config and CLI."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"


class ProviderType(str, Enum):
    """Known provider identifiers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    XAI = "xai"
    ZAI = "zai"
    ZAI_CODING_PLAN = "zai-coding-plan"
    OLLAMA = "ollama"
    CUSTOM = "custom"

    @classmethod
    def coerce(cls, value: object) -> Optional["ProviderType"]:
        """Return the member for ``value`` or None when it names no provider."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class ModelConfig(BaseModel):
    """A model offered by a provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str
    provider: ProviderType
    context_window: Optional[int] = Field(default=None, gt=0)
    max_output_tokens: Optional[int] = Field(default=None, gt=0)
    supports_vision: Optional[bool] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_id(self) -> str:
        return f"{self.provider.value}/{self.id}"

    @property
    def has_vision(self) -> bool:
        """Unknown vision support counts as unsupported."""
        return self.supports_vision is True


class ProviderConfig(BaseModel):
    """A provider entry and the models it exposes in display order."""

    model_config = ConfigDict(frozen=True)

    id: ProviderType
    name: str
    models: Tuple[ModelConfig, ...] = ()
    requires_api_key: bool
    api_key_env_var: Optional[str] = None
    base_url: Optional[str] = None

    @model_validator(mode="after")
    def _check_models(self) -> "ProviderConfig":
        seen: set[str] = set()
        for model in self.models:
            if model.provider != self.id:
                raise ValueError(
                    f"Model '{model.id}' declares provider '{model.provider.value}' "
                    f"but is listed under '{self.id.value}'"
                )
            if model.id in seen:
                raise ValueError(f"Duplicate model id '{model.id}' under '{self.id.value}'")
            seen.add(model.id)
        if self.requires_api_key and not (self.api_key_env_var or "").strip():
            raise ValueError(f"Provider '{self.id.value}' requires an API key env var name")
        return self

    def get_model(self, model_id: str) -> Optional[ModelConfig]:
        for model in self.models:
            if model.id == model_id:
                return model
        return None

    def model_ids(self) -> List[str]:
        return [model.id for model in self.models]


class SelectedModel(BaseModel):
    """A user or session choice of provider and model.

    ``model`` holds a full id such as ``anthropic/claude-sonnet-4-5``. For the
    Ollama provider it names a model discovered on the server at ``base_url``
    rather than one from the static catalog.
    """

    model_config = ConfigDict(frozen=True)

    provider: ProviderType
    model: str
    base_url: Optional[str] = None


class OllamaModelInfo(BaseModel):
    """A model reported by a local Ollama server."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str
    size: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_id(self) -> str:
        return f"{ProviderType.OLLAMA.value}/{self.id}"


class OllamaConfig(BaseModel):
    """Ollama server settings plus the result of the last discovery probe.

    Instances are refreshed by whoever probes the server; the static catalog
    never stores them.
    """

    base_url: str = DEFAULT_OLLAMA_BASE_URL
    enabled: bool = False
    # Epoch milliseconds of the last successful probe.
    last_validated: Optional[int] = None
    models: Optional[List[OllamaModelInfo]] = None

    def find_model(self, model_id: str) -> Optional[OllamaModelInfo]:
        """Find a discovered model by short id or ``ollama/`` full id."""
        prefix = f"{ProviderType.OLLAMA.value}/"
        if model_id.startswith(prefix):
            model_id = model_id[len(prefix):]
        for info in self.models or ():
            if info.id == model_id:
                return info
        return None
