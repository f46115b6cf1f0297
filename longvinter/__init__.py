"""Gameplay rules for a survival role-playing game: items, crafting, chat and HUD state."""

__version__ = "0.1.0"