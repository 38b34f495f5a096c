"""
Command-line search.

Usage:
    digideck search digimon Agumon
    digideck search digimon Agumon --level Rookie
    digideck search cards Omnimon --type Digimon
"""

import argparse
import asyncio
import logging
import sys

from digideck.models.category import Category
from digideck.models.failure import KnownError
from digideck.services.orchestrator import SearchOrchestrator
from digideck.services.presenter import DisplayCard, render_results
from digideck.services.remote import create_client
from digideck.services.session import SearchSession

logger = logging.getLogger(__name__)


def format_card(card: DisplayCard) -> str:
    """One line of text for a display card."""
    parts = [card.title]
    if card.number:
        parts.append(card.number)
    if card.level:
        parts.append(card.level)
    if card.color:
        parts.append(card.color)
    parts.append(card.image_url or card.image_placeholder or "")
    line = " | ".join(part for part in parts if part)
    if card.effect:
        line += f"\n    {card.effect.label}: {card.effect.text}"
    return line


async def run_search(category: Category, term: str, filter_value: str | None) -> list[str]:
    """
    Search one tab and return printable lines.

    Raises:
        KnownError: On a blank term or a lookup-service failure
    """
    async with create_client() as client:
        session = SearchSession(SearchOrchestrator(client))
        await session.switch_tab(category)
        if filter_value is not None:
            await session.change_filter(category, filter_value)
        outcome = await session.submit(term)

    rendered = render_results(outcome.records, outcome.category)
    if rendered.message:
        return [rendered.message]
    return [format_card(card) for card in rendered.cards]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="digideck", description="Search Digimon and cards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search one tab")
    search.add_argument("tab", choices=[c.value for c in Category], help="Tab to search")
    search.add_argument("term", help="Search term")
    search.add_argument("--level", default=None, help="Creature level (digimon tab)")
    search.add_argument("--type", dest="card_type", default=None, help="Card type (cards tab)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    category = Category(args.tab)
    filter_value = args.level if category == Category.CREATURE else args.card_type

    try:
        lines = asyncio.run(run_search(category, args.term, filter_value))
    except KnownError as e:
        logger.error("%s", e.message)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
