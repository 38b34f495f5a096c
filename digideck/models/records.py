from dataclasses import dataclass
from enum import Enum

CARD_NUMBER_SENTINEL = "N/A"


class Foreground(str, Enum):
    """Text color needed on top of a card's color badge."""

    DEFAULT = "default"
    LIGHT = "light"


@dataclass(frozen=True, slots=True)
class CreatureRecord:
    """
    A creature as returned by the creature lookup service.

    Attributes:
        name: Creature name (e.g., "Agumon")
        image_url: Artwork URL
        level: Evolution level (e.g., "Rookie")
    """

    name: str
    image_url: str
    level: str


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    A trading card, reconciled across API versions.

    Attributes:
        name: Card name
        id: Card number from the current API (e.g., "BT1-010")
        legacy_card_number: Card number from the old API, kept only when id is absent
        image_url: Image URL built from id; None when there is no id
        stage: Evolution stage (e.g., "Rookie")
        color: Card color (e.g., "Red")
        main_effect: Main effect text
        source_effect: Inherited/security effect text
        foreground: Text color for the color badge
    """

    name: str
    id: str | None = None
    legacy_card_number: str | None = None
    image_url: str | None = None
    stage: str | None = None
    color: str | None = None
    main_effect: str | None = None
    source_effect: str | None = None
    foreground: Foreground = Foreground.DEFAULT

    @property
    def card_number(self) -> str:
        """Displayable card number: id, then legacy number, then the N/A sentinel."""
        return self.id or self.legacy_card_number or CARD_NUMBER_SENTINEL


NormalizedRecord = CreatureRecord | CardRecord
