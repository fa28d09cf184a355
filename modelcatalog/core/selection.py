"""Full-id helpers and the fallback policy for stored model selections."""

from __future__ import annotations

from typing import Optional, Tuple

from modelcatalog.core.catalog import ProviderCatalog, ProviderKey, get_catalog
from modelcatalog.core.types import OllamaConfig, ProviderType, SelectedModel
from modelcatalog.utils.log import get_logger

logger = get_logger()


def make_full_id(provider: ProviderKey, model_id: str) -> str:
    value = getattr(provider, "value", provider)
    return f"{value}/{model_id}"


def split_full_id(full_id: str) -> Optional[Tuple[str, str]]:
    """Split ``provider/model`` on the first slash.

    Returns None when either half is empty. Only the first slash separates,
    so model ids keep any later slashes or tags (``ollama/qwen3:latest``).
    """
    if not full_id or "/" not in full_id:
        return None
    provider, model_id = full_id.split("/", 1)
    if not provider or not model_id:
        return None
    return provider, model_id


def is_static_selection_valid(
    selection: SelectedModel, catalog: Optional[ProviderCatalog] = None
) -> bool:
    """True when ``selection`` names a catalog model under its own provider."""
    catalog = catalog or get_catalog()
    parsed = split_full_id(selection.model)
    if parsed is None or parsed[0] != selection.provider.value:
        return False
    return catalog.get_model(selection.provider, selection.model) is not None


def _resolve_ollama(selection: SelectedModel, ollama: Optional[OllamaConfig]) -> Optional[SelectedModel]:
    parsed = split_full_id(selection.model)
    if parsed is None or parsed[0] != ProviderType.OLLAMA.value:
        return None
    base_url = selection.base_url
    if ollama is not None:
        if not ollama.enabled:
            return None
        if ollama.models is not None and ollama.find_model(parsed[1]) is None:
            return None
        base_url = base_url or ollama.base_url
    if not base_url:
        return None
    if base_url == selection.base_url:
        return selection
    return selection.model_copy(update={"base_url": base_url})


def _resolve_custom(selection: SelectedModel) -> Optional[SelectedModel]:
    if selection.base_url and selection.model.strip():
        return selection
    return None


def resolve_selected_model(
    selection: Optional[SelectedModel],
    ollama: Optional[OllamaConfig] = None,
    catalog: Optional[ProviderCatalog] = None,
) -> SelectedModel:
    """Return ``selection`` when it still resolves, otherwise the catalog default.

    Static providers must reference a catalog model. Ollama selections need a
    server URL and, when discovery results are available, a discovered model.
    Custom providers need a base URL.
    """
    catalog = catalog or get_catalog()
    if selection is None:
        return catalog.default

    resolved: Optional[SelectedModel]
    if selection.provider == ProviderType.OLLAMA:
        resolved = _resolve_ollama(selection, ollama)
    elif selection.provider == ProviderType.CUSTOM:
        resolved = _resolve_custom(selection)
    elif is_static_selection_valid(selection, catalog):
        resolved = selection
    else:
        resolved = None

    if resolved is None:
        logger.warning(
            "[selection] Stored model selection no longer resolves; using default",
            extra={
                "provider": selection.provider.value,
                "model": selection.model,
                "default": catalog.default.model,
            },
        )
        return catalog.default
    return resolved
