class ThingServiceError(Exception):
    """Raised when a thing service cannot complete a lookup."""
