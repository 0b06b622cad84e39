# search_server/errors.py


class InvalidArgumentError(ValueError):
    """Bad document id, bad token, malformed minus-term or invalid stop word."""


class DocumentNotFoundError(LookupError):
    """Referenced document id (or ordinal position) is not in the catalog."""
