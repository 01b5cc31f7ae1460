class QAScannerError(Exception):
    """Base class for scanner errors."""


class DocumentUnavailableError(QAScannerError):
    """The page could not be fetched, rendered or parsed, so no report can be produced."""
