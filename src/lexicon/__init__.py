"""Word lists for Boggle word validation."""

from .lexicon import Lexicon

__all__ = ["Lexicon"]
