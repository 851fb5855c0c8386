from __future__ import annotations


class QuoteEngineError(Exception):
    """Base class for every error raised by the quoting engine."""


class ConfigurationError(QuoteEngineError):
    """A tax regime or rate entry is missing or invalid."""


class CommissionLookupError(QuoteEngineError, LookupError):
    """No commission tier or period column covers the requested input."""


class ProposalIdParseError(QuoteEngineError, ValueError):
    """A proposal identifier does not follow the ``{prefix}_{NNN}_v{N}`` format."""


class InvalidIdentifierError(ProposalIdParseError):
    """The identifier passed to a versioning operation cannot be parsed."""
