"""ABOUTME: Matchup scoring and team composition engine.
ABOUTME: Subpackages: utils (type chart), engine (scoring, composition), tools (roster analysis tables)."""

__version__ = "0.1.0"
