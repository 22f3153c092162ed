"""Exceptions raised by netalgo graph algorithms.

Input validation errors derive from ``ValueError`` as well as from
``NetAlgoError`` so callers can catch either. Every check runs before an
algorithm allocates its auxiliary state.
"""

from __future__ import annotations

from typing import Any, Optional


class NetAlgoError(Exception):
    """Base class for all netalgo errors."""


class InvalidIndexError(NetAlgoError, ValueError):
    """A vertex or edge reference falls outside its declared bounds.

    Attributes:
        index: The offending value.
        bound: Exclusive upper bound of the valid range ``[0, bound)``.
        kind: What the index refers to ("vertex", "edge", "left vertex", ...).
        message: Human-readable error message.
    """

    def __init__(
        self,
        index: Any,
        bound: int,
        kind: str = "vertex",
        message: Optional[str] = None,
    ) -> None:
        self.index = index
        self.bound = bound
        self.kind = kind
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.bound <= 0:
            return f"Invalid {self.kind} index {self.index!r}: no {self.kind}s declared"
        return (
            f"Invalid {self.kind} index {self.index!r}: "
            f"expected an integer in [0, {self.bound})"
        )


class InvalidCapacityError(NetAlgoError, ValueError):
    """A weight or capacity is negative where the algorithm requires >= 0.

    Attributes:
        value: The offending weight or capacity.
        edge: Logical edge index carrying the value, if known.
        message: Human-readable error message.
    """

    def __init__(
        self,
        value: Any,
        edge: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        self.value = value
        self.edge = edge
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        where = f" on edge {self.edge}" if self.edge is not None else ""
        return f"Invalid capacity {self.value!r}{where}: must be non-negative"


class DisconnectedGraphError(NetAlgoError):
    """The graph has more than one connected component.

    Only raised when a caller explicitly asks for a single spanning tree;
    otherwise disconnection is reported through result fields.

    Attributes:
        component_count: Number of connected components found.
        message: Human-readable error message.
    """

    def __init__(self, component_count: int, message: Optional[str] = None) -> None:
        self.component_count = component_count
        self.message = message or (
            f"Graph is disconnected: {component_count} components, "
            "no spanning tree exists"
        )
        super().__init__(self.message)
