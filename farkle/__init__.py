"""Farkle rules engine: optimal dice scoring and a turn-based game reducer."""
