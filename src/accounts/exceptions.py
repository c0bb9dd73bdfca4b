class ConflictError(Exception):
    """Raised when a write would violate a uniqueness rule (e.g. an email that is already registered)."""
