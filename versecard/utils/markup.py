# versecard/utils/markup.py
"""
Renderer boundary: conversion between formatted text and card markup.
"""
from typing import List

from .text_normalization import strip_break_markup


def to_card_markup(formatted: str) -> str:
    """
    Convert newline-separated card text to <br> markup for display.

    Args:
        formatted: Output of the line formatter

    Returns:
        HTML fragment with <br> between lines
    """
    return formatted.replace('\n', '<br>')


def split_lines(formatted: str) -> List[str]:
    """Split formatted text into its non-empty lines."""
    return [line for line in formatted.split('\n') if line]


def from_card_markup(markup: str) -> str:
    """Inverse of ``to_card_markup`` followed by markup-stripping normalization."""
    return strip_break_markup(markup.replace('<br>', ' '))
