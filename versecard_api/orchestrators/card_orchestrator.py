"""
Card orchestrator.

Coordinates verse selection and formatting for the HTTP layer:
1. Draw the next index from the shuffled rotation
2. Format the verse (falling back to plain word wrapping on failure)
3. Render the card in text, line and <br> forms
"""

from __future__ import annotations

from versecard.logging_config import get_logger
from versecard.utils.markup import split_lines, to_card_markup

from ..factories.service_factory import ServiceContainer
from ..models import CardResponse, FormatResponse

logger = get_logger("orchestrator")


class EmptyVerseStoreError(RuntimeError):
    """Raised when a card is requested but no verses are loaded."""


class CardOrchestrator:
    """
    Orchestrates card creation over a service container.
    """

    def __init__(self, services: ServiceContainer):
        self.services = services

    def format_text(self, text: str, max_length: int) -> FormatResponse:
        """
        Format arbitrary text for a card.

        Args:
            text: Verse text, may contain <br> markup
            max_length: Maximum characters per line

        Returns:
            FormatResponse with text, lines and markup
        """
        formatted, fallback_used = self.services.formatter.format_safe(text, max_length)
        return FormatResponse(
            formatted=formatted,
            lines=split_lines(formatted),
            html=to_card_markup(formatted),
            fallback_used=fallback_used,
        )

    def next_card(self) -> CardResponse:
        """
        Draw and format the next verse of the rotation.

        Raises:
            EmptyVerseStoreError: If the verse store is empty
        """
        verses = self.services.verses
        if not verses:
            raise EmptyVerseStoreError("No verses are loaded")

        index = self.services.shuffle.next_index(len(verses))
        verse = verses[index]
        card = self.format_text(verse.content, self.services.config.card_max_length)
        logger.info(f"Card drawn: #{index} {verse.reference}")

        return CardResponse(
            index=index,
            reference=verse.reference,
            content=verse.content,
            **card.model_dump(),
        )
