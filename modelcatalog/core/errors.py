"""Catalog error types with stable error codes."""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base catalog exception with a stable error code."""

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class CatalogIntegrityError(CatalogError):
    """The provider table violates one of its invariants."""

    def __init__(self, message: str) -> None:
        super().__init__("catalog_integrity", message)


class UnknownProviderError(CatalogError):
    """Requested provider has no entry in the catalog."""

    def __init__(self, provider: str) -> None:
        super().__init__("unknown_provider", f"Provider '{provider}' is not in the catalog")
        self.provider = provider


class UnknownModelError(CatalogError):
    """Requested model does not resolve under its provider."""

    def __init__(self, provider: Optional[str], model: str) -> None:
        where = f"provider '{provider}'" if provider else "any provider"
        super().__init__("unknown_model", f"Model '{model}' is not available under {where}")
        self.provider = provider
        self.model = model
