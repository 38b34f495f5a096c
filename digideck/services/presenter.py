"""
Result presenter.

Turns normalized records into display cards for a results tab. This is the
only place that decides what the user sees: placeholder text, card numbers,
badge colors and which effect line to show.
"""

import logging
from collections.abc import Sequence
from typing import assert_never

from pydantic import BaseModel, Field

from digideck.config import NO_IMAGE_PLACEHOLDER, NO_RESULTS_MESSAGE
from digideck.models.category import Category, parse_category
from digideck.models.failure import ContainerMissingError
from digideck.models.records import CardRecord, CreatureRecord, Foreground, NormalizedRecord

logger = logging.getLogger(__name__)

MAIN_EFFECT_LABEL = "Main Effect"
SOURCE_EFFECT_LABEL = "Inherited/Security Effect"


class DisplayEffect(BaseModel):
    """One labelled effect line."""

    label: str
    text: str


class DisplayCard(BaseModel):
    """A rendered result card."""

    title: str
    number: str | None = Field(default=None, description="Card number, e.g. '#BT1-010'")
    image_url: str | None = None
    image_placeholder: str | None = Field(
        default=None,
        description="Text shown instead of the image when there is none",
    )
    level: str | None = Field(default=None, description="Creature level or card stage")
    color: str | None = None
    text_color: str | None = Field(default=None, description="'white' on dark color badges")
    effect: DisplayEffect | None = None


class RenderedResults(BaseModel):
    """Everything a results tab needs."""

    category: Category
    cards: list[DisplayCard] = Field(default_factory=list)
    message: str | None = None


def render_creature(record: CreatureRecord) -> DisplayCard:
    """Display card for a creature."""
    return DisplayCard(
        title=record.name,
        image_url=record.image_url or None,
        image_placeholder=None if record.image_url else NO_IMAGE_PLACEHOLDER,
        level=record.level or None,
    )


def render_card(record: CardRecord) -> DisplayCard:
    """
    Display card for a trading card.

    Only one effect is shown: the main effect when there is one, otherwise
    the inherited/security effect.
    """
    effect = None
    if record.main_effect:
        effect = DisplayEffect(label=MAIN_EFFECT_LABEL, text=record.main_effect)
    elif record.source_effect:
        effect = DisplayEffect(label=SOURCE_EFFECT_LABEL, text=record.source_effect)

    return DisplayCard(
        title=record.name,
        number=f"#{record.card_number}",
        image_url=record.image_url,
        image_placeholder=None if record.image_url else NO_IMAGE_PLACEHOLDER,
        level=record.stage,
        color=record.color,
        text_color="white" if record.foreground == Foreground.LIGHT else None,
        effect=effect,
    )


def render_record(record: NormalizedRecord) -> DisplayCard:
    """Display card for either record shape."""
    match record:
        case CreatureRecord():
            return render_creature(record)
        case CardRecord():
            return render_card(record)
        case _:
            assert_never(record)


def resolve_container(tab: str | Category) -> Category:
    """
    Category behind a results tab.

    Raises:
        ContainerMissingError: If no such tab exists
    """
    if isinstance(tab, Category):
        return tab
    category = parse_category(tab)
    if category is None:
        logger.error("Container not found: %s-results", tab)
        raise ContainerMissingError(tab)
    return category


def render_results(records: Sequence[NormalizedRecord], tab: str | Category) -> RenderedResults:
    """
    Render search results for a tab.

    Args:
        records: Normalized records, in display order
        tab: Tab name or category

    Returns:
        RenderedResults; an empty result set carries the "no results" message

    Raises:
        ContainerMissingError: If the tab does not exist
    """
    category = resolve_container(tab)

    if not records:
        return RenderedResults(category=category, message=NO_RESULTS_MESSAGE)

    return RenderedResults(
        category=category,
        cards=[render_record(record) for record in records],
    )
