"""Target index field names used by the document emitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryTranslator.config.common import expect_str, get_section, reject_unknown_keys
from QueryTranslator.emitters.elasticsearch import TEXT_FIELD, YEAR_FIELD

_KEYS = {"text", "year"}


@dataclass(frozen=True, slots=True)
class FieldsConfig:
    """Field searched by term/phrase clauses and field filtered by decades."""

    text: str = TEXT_FIELD
    year: str = YEAR_FIELD


def load_fields(raw: Mapping[str, Any]) -> FieldsConfig:
    """Load the ``fields`` section."""
    section = get_section(raw, "fields")
    reject_unknown_keys(section, _KEYS, "fields")
    return FieldsConfig(
        text=expect_str(section.get("text", TEXT_FIELD), "fields.text").strip(),
        year=expect_str(section.get("year", YEAR_FIELD), "fields.year").strip(),
    )


def check_fields(config: FieldsConfig) -> None:
    """Validate field names.

    Raises:
        ValueError: If a field name is empty.
    """
    if not config.text:
        raise ValueError("fields.text must not be empty")
    if not config.year:
        raise ValueError("fields.year must not be empty")
