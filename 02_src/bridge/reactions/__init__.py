"""Reactions module."""

from .extractor import EMOJI_ALIASES, convert_reaction_emoji, extract_reaction

__all__ = ["EMOJI_ALIASES", "convert_reaction_emoji", "extract_reaction"]
