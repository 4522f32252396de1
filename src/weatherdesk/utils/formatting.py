"""Text and number formatting utilities."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (12.5 -> 13, -2.5 -> -3)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_temperature(temp: float, unit: str = "°C") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string rounded to a whole degree
    """
    return f"{round_half_up(temp)}{unit}"

def format_percentage(value: float) -> str:
    """Format an already-scaled percentage (0-100)."""
    return f"{round_half_up(value)}%"

def capitalize_words(text: str) -> str:
    """Title-case each whitespace separated word.

    ``"new   YORK"`` becomes ``"New York"``; empty input is returned as is.
    """
    if not text:
        return text
    return " ".join(word[0].upper() + word[1:].lower() for word in text.split())
