"""Exception hierarchy for fuzzbridge.

Every error raised on purpose by the library derives from
:class:`FuzzBridgeError`. The concrete classes also derive from
``ValueError`` so callers that only catch ``ValueError`` keep working.
"""


class FuzzBridgeError(Exception):
    """Base class for all fuzzbridge errors."""


class EditScriptError(FuzzBridgeError, ValueError):
    """An edit-operation or opcode list cannot be replayed.

    Raised for unknown operation kinds, positions outside the source or
    target string, and descriptions that move backwards in the source.
    """


class UnknownScorerError(FuzzBridgeError, ValueError):
    """The requested scorer name is not registered."""


class UnknownMetricError(FuzzBridgeError, ValueError):
    """The requested distance metric is not registered."""


class UnsupportedOperationError(FuzzBridgeError, ValueError):
    """The metric cannot produce the requested edit description."""
