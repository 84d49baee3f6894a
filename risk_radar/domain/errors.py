from __future__ import annotations


GENERIC_FAILURE_NOTICE = "Failed to analyze contract. Please ensure your API key is configured correctly."


class UnknownRegionError(LookupError):
    pass


class ValidationError(ValueError):
    pass


class AnalysisError(RuntimeError):
    """Base for every failure of the external analysis call.

    ``kind`` only feeds logs and diagnostics; callers show users a single
    generic message regardless of it.
    """

    kind = "analysis"


class ConfigurationError(AnalysisError):
    kind = "configuration"


class EmptyResponseError(AnalysisError):
    kind = "empty_response"


class ParseError(AnalysisError):
    kind = "parse"


class TransportError(AnalysisError):
    kind = "transport"


class ExportFallback(RuntimeError):
    pass
