# src/pillengine/errors.py


class RequestDecodeError(ValueError):
    """Raised when an incoming calculation payload cannot be decoded."""
