"""Report serialization error."""


class ReportSerializationError(Exception):
    """Raised when a report cannot be encoded as JSON."""
