"""File-system and subprocess infrastructure."""
