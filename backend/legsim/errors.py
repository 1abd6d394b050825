class SetupError(ValueError):
    """Raised when the simulation cannot be assembled (no seats, no parties, empty word lists)."""
