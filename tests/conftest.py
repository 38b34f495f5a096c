from typing import Any

import pytest


@pytest.fixture
def creature_payload() -> list[dict[str, Any]]:
    """Creature lookup response for 'Agumon'."""
    return [
        {
            "name": "Agumon",
            "img": "https://digimon.shadowsmith.com/img/agumon.jpg",
            "level": "Rookie",
        },
    ]


@pytest.fixture
def level_payload() -> list[dict[str, Any]]:
    """Creature lookup response for level 'Rookie'."""
    return [
        {
            "name": "Agumon",
            "img": "https://digimon.shadowsmith.com/img/agumon.jpg",
            "level": "Rookie",
        },
        {
            "name": "Gabumon",
            "img": "https://digimon.shadowsmith.com/img/gabumon.jpg",
            "level": "Rookie",
        },
    ]


@pytest.fixture
def card_payload() -> list[dict[str, Any]]:
    """Card lookup response mixing current and legacy field names."""
    return [
        {
            "name": "Omnimon",
            "id": "BT1-084",
            "stage": "Mega",
            "color": "Red",
            "main_effect": "<When Digivolving> Delete 1 of your opponent's Digimon.",
        },
        {
            "name": "Omnimon",
            "cardnumber": "P-016",
            "stage": "Mega",
            "color": "Yellow",
            "soureeffect": "<Security> Play this card without paying its memory cost.",
        },
    ]
