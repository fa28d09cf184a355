"""Core catalog types, static data and lookups."""

from modelcatalog.core.catalog import (
    DEFAULT_MODEL,
    DEFAULT_PROVIDERS,
    ProviderCatalog,
    find_model,
    get_catalog,
    get_default_model,
    get_model,
    get_provider,
    list_models,
    list_providers,
    require_model,
    require_provider,
)
from modelcatalog.core.errors import (
    CatalogError,
    CatalogIntegrityError,
    UnknownModelError,
    UnknownProviderError,
)
from modelcatalog.core.types import (
    ModelConfig,
    OllamaConfig,
    OllamaModelInfo,
    ProviderConfig,
    ProviderType,
    SelectedModel,
)

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_PROVIDERS",
    "CatalogError",
    "CatalogIntegrityError",
    "ModelConfig",
    "OllamaConfig",
    "OllamaModelInfo",
    "ProviderCatalog",
    "ProviderConfig",
    "ProviderType",
    "SelectedModel",
    "UnknownModelError",
    "UnknownProviderError",
    "find_model",
    "get_catalog",
    "get_default_model",
    "get_model",
    "get_provider",
    "list_models",
    "list_providers",
    "require_model",
    "require_provider",
]
