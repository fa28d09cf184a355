"""Tests for the static provider catalog and its lookups."""

import pytest

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
    CatalogIntegrityError,
    UnknownModelError,
    UnknownProviderError,
)
from modelcatalog.core.types import ModelConfig, ProviderConfig, ProviderType, SelectedModel


def test_provider_ids_are_unique_and_ordered():
    ids = [provider.id for provider in list_providers()]
    assert len(ids) == len(set(ids))
    assert [p.value for p in ids] == [
        "anthropic",
        "openai",
        "google",
        "xai",
        "zai",
        "zai-coding-plan",
    ]


def test_models_belong_to_their_provider():
    for provider in list_providers():
        model_ids = [model.id for model in provider.models]
        assert len(model_ids) == len(set(model_ids))
        for model in provider.models:
            assert model.provider == provider.id
            assert model.full_id == f"{provider.id.value}/{model.id}"


def test_default_model_resolves_to_opus():
    default = get_default_model()
    assert default is DEFAULT_MODEL
    assert default.provider == ProviderType.ANTHROPIC
    assert default.model == "anthropic/claude-opus-4-5"

    model = get_model(default.provider, default.model)
    assert model is not None
    assert model.display_name == "Claude Opus 4.5"
    assert model.context_window == 200_000
    assert model.supports_vision is True
    assert get_catalog().default_model_config() == model


def test_every_provider_requires_an_api_key():
    for provider in list_providers():
        assert provider.requires_api_key is True
        assert provider.api_key_env_var


def test_api_key_env_vars():
    catalog = get_catalog()
    assert catalog.api_key_env_var("anthropic") == "ANTHROPIC_API_KEY"
    assert catalog.api_key_env_var("openai") == "OPENAI_API_KEY"
    assert catalog.api_key_env_var("google") == "GOOGLE_GENERATIVE_AI_API_KEY"
    assert catalog.api_key_env_var("xai") == "XAI_API_KEY"
    assert catalog.api_key_env_var("zai") == "ZHIPU_API_KEY"
    assert catalog.api_key_env_var("zai-coding-plan") == "ZHIPU_API_KEY"
    assert catalog.api_key_env_var("ollama") is None


def test_base_url_overrides():
    assert get_provider("xai").base_url == "https://api.x.ai"
    assert get_provider(ProviderType.ZAI).base_url == "https://api.z.ai/api/paas/v4"
    assert get_provider("zai-coding-plan").base_url == "https://api.z.ai/api/coding/paas/v4"
    for provider_id in ("anthropic", "openai", "google"):
        assert get_provider(provider_id).base_url is None


@pytest.mark.parametrize("provider_id", ["ollama", "custom", "mistral", "", ProviderType.OLLAMA])
def test_unregistered_provider_lookup_returns_none(provider_id):
    assert get_provider(provider_id) is None
    assert get_model(provider_id, "anything") is None
    assert list_models(provider_id) == []


def test_model_lookup_by_short_and_full_id():
    by_short = get_model("xai", "grok-3")
    by_full = get_model("xai", "xai/grok-3")
    assert by_short is not None
    assert by_short == by_full
    assert by_short.context_window == 131_000
    assert by_short.supports_vision is False
    assert by_short.has_vision is False


def test_full_id_under_other_provider_is_a_miss():
    assert get_model("zai", "zai-coding-plan/glm-4.7") is None
    assert get_model("anthropic", "openai/gpt-5-codex") is None
    assert get_model("anthropic", "claude-unknown") is None


def test_shared_glm_lineup_is_distinct_per_provider():
    zai = find_model("zai/glm-4.5v")
    coding = find_model("zai-coding-plan/glm-4.5v")
    assert zai is not None and coding is not None
    assert zai.provider == ProviderType.ZAI
    assert coding.provider == ProviderType.ZAI_CODING_PLAN
    assert zai.context_window == coding.context_window == 64_000
    assert get_provider("zai").model_ids() == get_provider("zai-coding-plan").model_ids()
    assert len(get_provider("zai").models) == 7


def test_find_model_misses():
    assert find_model("anthropic") is None
    assert find_model("ollama/qwen3:latest") is None
    assert find_model("") is None


def test_list_models_keeps_display_order():
    models = list_models()
    assert models[0].full_id == "anthropic/claude-haiku-4-5"
    assert len(models) == sum(len(p.models) for p in DEFAULT_PROVIDERS)
    assert [m.id for m in list_models("google")] == [
        "gemini-3-pro-preview",
        "gemini-3-flash-preview",
    ]


def test_no_static_model_declares_max_output_tokens():
    assert all(model.max_output_tokens is None for model in list_models())


def test_providers_property_returns_a_copy():
    providers = list_providers()
    providers.clear()
    assert len(list_providers()) == len(DEFAULT_PROVIDERS)


def test_require_helpers_raise_catalog_errors():
    assert require_provider("openai").name == "OpenAI"
    assert require_model("openai", "openai/gpt-5-codex").context_window == 1_000_000

    with pytest.raises(UnknownProviderError) as provider_exc:
        require_provider("ollama")
    assert provider_exc.value.error_code == "unknown_provider"
    assert provider_exc.value.provider == "ollama"

    with pytest.raises(UnknownModelError) as model_exc:
        require_model("openai", "gpt-4")
    assert model_exc.value.error_code == "unknown_model"
    assert model_exc.value.model == "gpt-4"


def _provider(provider_id: ProviderType, *model_ids: str) -> ProviderConfig:
    return ProviderConfig(
        id=provider_id,
        name=provider_id.value,
        requires_api_key=False,
        models=tuple(
            ModelConfig(id=model_id, display_name=model_id, provider=provider_id)
            for model_id in model_ids
        ),
    )


def test_catalog_rejects_empty_provider_list():
    with pytest.raises(CatalogIntegrityError):
        ProviderCatalog([], DEFAULT_MODEL)


def test_catalog_rejects_duplicate_providers():
    providers = [
        _provider(ProviderType.OPENAI, "a"),
        _provider(ProviderType.OPENAI, "b"),
    ]
    default = SelectedModel(provider=ProviderType.OPENAI, model="openai/a")
    with pytest.raises(CatalogIntegrityError, match="Duplicate provider"):
        ProviderCatalog(providers, default)


def test_catalog_rejects_dangling_default():
    providers = [_provider(ProviderType.OPENAI, "a")]
    with pytest.raises(CatalogIntegrityError, match="Default model"):
        ProviderCatalog(providers, SelectedModel(provider=ProviderType.OPENAI, model="openai/b"))
    with pytest.raises(CatalogIntegrityError):
        ProviderCatalog(providers, SelectedModel(provider=ProviderType.XAI, model="xai/a"))


def test_default_model_config_is_resolved_at_build_time():
    providers = [_provider(ProviderType.OPENAI, "a", "b")]
    catalog = ProviderCatalog(providers, SelectedModel(provider=ProviderType.OPENAI, model="openai/b"))
    model = catalog.default_model_config()
    assert model.full_id == "openai/b"
    assert model is catalog.get_model("openai", "b")
