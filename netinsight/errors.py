"""Exception hierarchy for the graph studio core."""

from __future__ import annotations


class NetInsightError(Exception):
    """Base class for all netinsight errors."""


class GraphInvariantError(NetInsightError, AssertionError):
    """Raised when an operation would corrupt the graph store.

    These are programming errors (an edge to a missing node, a click on a node
    that is not in the graph), not user-facing failures.
    """


class InvalidParameterError(NetInsightError, ValueError):
    """Raised when a generator receives out-of-range or malformed parameters."""


class UnknownTopologyError(InvalidParameterError):
    """Raised when a topology name is not registered."""


class GenerationError(NetInsightError, RuntimeError):
    """Raised when a randomized construction cannot complete."""
