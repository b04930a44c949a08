class InvalidInput(ValueError):
    """Request data is missing, empty, too short or of the wrong type."""
