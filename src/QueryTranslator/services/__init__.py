"""Service layer for QueryTranslator.

Provides the translation pipeline and factory functions for component
creation from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from QueryTranslator.services.translate import QueryTranslationService, parse_query, translate

if TYPE_CHECKING:
    from QueryTranslator.config import AppConfig


def create_translation_service(config: AppConfig) -> QueryTranslationService:
    """Create a translation service targeting the configured fields.

    Args:
        config: Application configuration containing field settings.

    Returns:
        Configured QueryTranslationService instance.
    """
    return QueryTranslationService(text_field=config.fields.text, year_field=config.fields.year)


__all__ = [
    "QueryTranslationService",
    "create_translation_service",
    "parse_query",
    "translate",
]
