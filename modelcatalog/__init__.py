"""
modelcatalog - provider and model catalog for multi-provider AI clients

A read-only registry of AI model providers (API-key requirements, base URLs)
and the models each exposes (context window, output limits, vision support),
plus the default model selection.

Quick Start:
    pip install -e .
    modelcatalog models --provider anthropic
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
