"""Persisted user state for modelcatalog.

The static catalog is never written to disk. This module stores the state a
consumer layers on top of it: the selected model and the Ollama server
settings, in ``~/.modelcatalog.json``.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from modelcatalog.core.errors import UnknownModelError
from modelcatalog.core.selection import resolve_selected_model
from modelcatalog.core.types import OllamaConfig, SelectedModel
from modelcatalog.utils.log import get_logger


logger = get_logger()


class CatalogConfig(BaseModel):
    """User configuration stored in ~/.modelcatalog.json"""

    selected_model: Optional[SelectedModel] = None
    ollama: OllamaConfig = Field(default_factory=OllamaConfig)

    @field_validator("selected_model", mode="wrap")
    @classmethod
    def _drop_unreadable_selection(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Optional[SelectedModel]:
        """An unreadable stored selection is dropped instead of failing the whole file."""
        try:
            return handler(value)
        except ValidationError as e:
            logger.warning(
                "[config] Ignoring unreadable stored model selection",
                extra={"selected_model": value, "errors": e.error_count()},
            )
            return None


class ConfigManager:
    """Loads, caches and saves the user configuration."""

    def __init__(self) -> None:
        self.config_path = Path.home() / ".modelcatalog.json"
        self._config: Optional[CatalogConfig] = None

    def get_config(self) -> CatalogConfig:
        """Load and return the configuration."""
        if self._config is None:
            if self.config_path.exists():
                try:
                    data = json.loads(self.config_path.read_text(encoding="utf-8"))
                    self._config = CatalogConfig(**data)
                    logger.debug(
                        "[config] Loaded configuration",
                        extra={
                            "path": str(self.config_path),
                            "has_selection": self._config.selected_model is not None,
                        },
                    )
                except (
                    json.JSONDecodeError,
                    OSError,
                    UnicodeDecodeError,
                    ValueError,
                    TypeError,
                ) as e:
                    logger.warning(
                        "Error loading config: %s: %s",
                        type(e).__name__,
                        e,
                        extra={"error": str(e), "path": str(self.config_path)},
                    )
                    self._config = CatalogConfig()
            else:
                self._config = CatalogConfig()
                logger.debug(
                    "[config] Config not found; using defaults",
                    extra={"path": str(self.config_path)},
                )
        return self._config

    def save_config(self, config: CatalogConfig) -> None:
        """Save configuration; the cached copy changes only once the write succeeds."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
        self._config = config
        logger.debug(
            "[config] Saved configuration",
            extra={
                "path": str(self.config_path),
                "selected_model": config.selected_model.model if config.selected_model else None,
            },
        )

    def get_selected_model(self) -> SelectedModel:
        """Return the stored selection, or the default when it no longer resolves."""
        config = self.get_config()
        return resolve_selected_model(config.selected_model, config.ollama)

    def set_selected_model(self, selection: SelectedModel) -> CatalogConfig:
        """Persist ``selection`` if it resolves; raise UnknownModelError otherwise."""
        config = self.get_config()
        resolved = resolve_selected_model(selection, config.ollama)
        if resolved.provider != selection.provider or resolved.model != selection.model:
            raise UnknownModelError(selection.provider.value, selection.model)
        updated = config.model_copy(update={"selected_model": resolved})
        self.save_config(updated)
        return updated

    def update_ollama_config(self, ollama: OllamaConfig) -> CatalogConfig:
        """Store the latest Ollama settings and discovery results."""
        updated = self.get_config().model_copy(update={"ollama": ollama})
        self.save_config(updated)
        return updated


# Global instance
config_manager = ConfigManager()


def get_config() -> CatalogConfig:
    return config_manager.get_config()


def save_config(config: CatalogConfig) -> None:
    config_manager.save_config(config)


def get_selected_model() -> SelectedModel:
    """Convenience wrapper returning the effective model selection."""
    return config_manager.get_selected_model()


def set_selected_model(selection: SelectedModel) -> CatalogConfig:
    return config_manager.set_selected_model(selection)


def update_ollama_config(ollama: OllamaConfig) -> CatalogConfig:
    return config_manager.update_ollama_config(ollama)
