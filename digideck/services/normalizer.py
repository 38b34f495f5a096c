"""
Response normalizer.

Maps raw lookup-service records onto CreatureRecord / CardRecord.

The card service has renamed fields across API versions; each target field
lists its source fields in preference order and the first non-empty one wins.
Normalization never raises: anything missing simply becomes None.
"""

import logging
from collections.abc import Iterable
from typing import Any, assert_never

from digideck.config import settings
from digideck.models.category import Category
from digideck.models.records import CardRecord, CreatureRecord, Foreground, NormalizedRecord

logger = logging.getLogger(__name__)

# Color badges with these backgrounds need light text
DARK_BACKGROUND_COLORS = frozenset({"Black", "Purple", "Blue", "Red", "Green"})

# Target field -> source fields, current API name first
CARD_FIELD_SOURCES: dict[str, tuple[str, ...]] = {
    "name": ("name",),
    "id": ("id",),
    "legacy_card_number": ("cardnumber",),
    "stage": ("stage",),
    "color": ("color",),
    "main_effect": ("main_effect", "maineffect"),
    "source_effect": ("source_effect", "soureeffect"),
}


def _first_present(raw: dict[str, Any], sources: Iterable[str]) -> str | None:
    """Return the first source field holding a non-empty value, as a string."""
    for source in sources:
        value = raw.get(source)
        if value is None:
            continue
        text = str(value)
        if text:
            return text
    return None


def foreground_for(color: str | None) -> Foreground:
    """Text color for a card color badge."""
    if color in DARK_BACKGROUND_COLORS:
        return Foreground.LIGHT
    return Foreground.DEFAULT


def card_image_url(card_id: str | None) -> str | None:
    """Image URL for a card id, or None when there is no id to build one from."""
    if not card_id:
        return None
    return settings.card_image_url_template.format(id=card_id)


def normalize_creature(raw: dict[str, Any]) -> CreatureRecord:
    """Normalize a creature lookup record."""
    return CreatureRecord(
        name=_first_present(raw, ("name",)) or "",
        image_url=_first_present(raw, ("img",)) or "",
        level=_first_present(raw, ("level",)) or "",
    )


def normalize_card(raw: dict[str, Any]) -> CardRecord:
    """
    Normalize a card lookup record.

    The legacy card number is only kept when the record has no id.
    """
    fields = {target: _first_present(raw, sources) for target, sources in CARD_FIELD_SOURCES.items()}

    card_id = fields["id"]
    color = fields["color"]

    return CardRecord(
        name=fields["name"] or "",
        id=card_id,
        legacy_card_number=None if card_id else fields["legacy_card_number"],
        image_url=card_image_url(card_id),
        stage=fields["stage"],
        color=color,
        main_effect=fields["main_effect"],
        source_effect=fields["source_effect"],
        foreground=foreground_for(color),
    )


def normalize(raw: dict[str, Any], category: Category) -> NormalizedRecord:
    """
    Normalize one raw record for a category.

    Args:
        raw: Record as decoded from the lookup service
        category: Which service the record came from

    Returns:
        CreatureRecord or CardRecord
    """
    match category:
        case Category.CREATURE:
            return normalize_creature(raw)
        case Category.CARD:
            return normalize_card(raw)
        case _:
            assert_never(category)


def normalize_all(payload: Iterable[Any], category: Category) -> list[NormalizedRecord]:
    """
    Normalize a decoded response body, preserving order.

    Entries that are not JSON objects are skipped.
    """
    records: list[NormalizedRecord] = []
    for position, raw in enumerate(payload):
        if not isinstance(raw, dict):
            logger.warning(
                "Skipping %s record at position %d: expected object, got %s",
                category.value,
                position,
                type(raw).__name__,
            )
            continue
        records.append(normalize(raw, category))
    return records
