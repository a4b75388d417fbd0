class ExtractionError(Exception):
    """Raised when an upstream response is missing a field it is expected to carry."""
