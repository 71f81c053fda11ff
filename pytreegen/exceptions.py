"""Failures raised while building trees.

Every input problem is a :class:`TreeConstructionError`, which is a
``ValueError`` so callers can keep catching bad arguments the usual way.
A broken postcondition is an :class:`InternalInconsistencyError` instead: it
points at a bug in this package rather than at the caller's input.
"""


class TreeConstructionError(ValueError):
    """Base class for precondition violations during tree construction."""


class CycleDetectedError(TreeConstructionError):
    """An edge would join two vertices that are already connected."""


class InvalidSizeError(TreeConstructionError):
    """A vertex count or size-like parameter is non-positive or too large."""


class InvalidVertexError(TreeConstructionError):
    """A vertex label or index lies outside the tree."""


class DisconnectedGraphError(TreeConstructionError):
    """A query that needs a single component was made on a forest."""


class GenerationLimitExceededError(TreeConstructionError):
    """A rejection-sampling generator ran out of its iteration budget."""


class InternalInconsistencyError(AssertionError):
    """A postcondition of a construction step does not hold."""
