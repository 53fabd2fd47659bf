"""Core abstractions: casters, matchers, cast nodes, and the cast registry.

This module owns every *interface* in the package.  Nothing here depends on a
concrete caster; the concrete classes live in the ``casters`` sub-package,
the reusable predicates in ``matchers``, and the wiring in ``factory``.

Two failure levels run through the whole package::

    Caster.load(value)  →  converted value      (match)
                        →  None                 (soft failure: "not mine")
                        →  raise ConversionError (hard failure: no fallback left)

Dispatch flow (``CastRegistry.load`` entry point)::

    value (arbitrary Python object)
      │
      ▼
    for node in nodes by priority desc:
        node.matcher.matches(value)?       ← predicate
            result = node.load(value)      ← constructor
            result is not None → return    ← first hit wins
            node.exclusive     → return None
      │
      ▼
    None                                   ← soft failure, caller decides
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Signature of a node's constructor: returns the converted value, or ``None``
#: when the value cannot be converted (soft failure).
LoadFn = Callable[[Any], Any]


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


_NO_VALUE = object()


class ConversionError(TypeError):
    """Hard failure: every alternative for converting *value* was exhausted.

    Attributes:
        target: Name of the type the value was meant to become.
        value:  The offending input (omitted from the message when not given).
    """

    def __init__(self, target: str, value: Any = _NO_VALUE, message: Optional[str] = None) -> None:
        self.target = target
        self.value = None if value is _NO_VALUE else value
        if message is None:
            message = f"cannot convert input to {target}"
            if value is not _NO_VALUE:
                message += f": {value!r}"
        super().__init__(message)


class UnknownNameError(ConversionError, LookupError):
    """Raised by enum name parsing when *value* is not a recognised name."""

    def __init__(self, target: str, value: Any) -> None:
        super().__init__(target, value, f"unknown {target} name: {value!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Caster
# ─────────────────────────────────────────────────────────────────────────────


class Caster(ABC, Generic[T]):
    """Bidirectional converter between Python values and one internal type.

    Class attributes (set in subclass)::

        name: str  – target type name, used in error messages and logs
    """

    name: str = "value"

    @abstractmethod
    def load(self, src: Any) -> Optional[T]:
        """Convert *src*.  Return ``None`` when *src* is not convertible."""

    @abstractmethod
    def cast(self, value: T) -> Any:
        """Project *value* back onto the narrowest matching Python type."""

    def __call__(self, src: Any) -> T:
        """Convert *src* or raise ``ConversionError`` (hard failure)."""
        value = self.load(src)
        if value is None:
            raise ConversionError(self.name, src)
        return value


# ─────────────────────────────────────────────────────────────────────────────
# Matcher
# ─────────────────────────────────────────────────────────────────────────────


class ValueMatcher(ABC):
    """Predicate: does *value* belong to the given registry node?

    Examples::

        IsBool()      → isinstance(value, (bool, numpy.bool_))
        IsInteger()   → isinstance(value, numbers.Integral)
    """

    @abstractmethod
    def matches(self, value: Any) -> bool: ...


# ─────────────────────────────────────────────────────────────────────────────
# CastNode / CastRegistry: ordered (predicate, constructor) dispatch
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class CastNode:
    """Single ``(predicate, constructor)`` pair in a ``CastRegistry``.

    ``matcher=None`` means the node is tried for every value.

    ``exclusive`` controls what happens when the matcher fires but ``load``
    returns ``None``:

    * ``True`` (default) – the value was claimed by this node; stop and
      report a soft failure.
    * ``False`` – fall through to the next candidate.
    """

    name: str
    priority: int
    load: LoadFn
    matcher: Optional[ValueMatcher] = None
    exclusive: bool = True


class CastRegistry:
    """Explicit, ordered list of candidate converters.

    Nodes are walked by descending priority; nodes with equal priority keep
    their registration order.  The walk order is the dispatch contract, so it
    is exposed through ``nodes()`` and can be tested directly.

    ``select``
        Return the first node whose matcher fires (no conversion attempted).

    ``load``
        Try every matching node until one produces a value, honouring
        ``exclusive``.
    """

    def __init__(self, name: str = "value") -> None:
        self.name = name
        self._nodes: List[CastNode] = []

    # -- registration -------------------------------------------------------

    def register(self, node: CastNode) -> None:
        """Add a node to this registry."""
        self._nodes.append(node)

    # -- dispatch -----------------------------------------------------------

    def select(self, value: Any) -> Optional[CastNode]:
        """Return the first node (by priority) whose matcher accepts *value*."""
        for node in self.nodes():
            if node.matcher is None or node.matcher.matches(value):
                return node
        return None

    def load(self, value: Any) -> Any:
        """Convert *value* through the first node that accepts it.

        Returns ``None`` if no node produced a result.
        """
        for node in self.nodes():
            if node.matcher is not None and not node.matcher.matches(value):
                continue
            result = node.load(value)
            if result is not None:
                logger.debug("%s: %r converted by node %r", self.name, value, node.name)
                return result
            if node.exclusive:
                logger.debug("%s: node %r claimed %r but could not convert it", self.name, node.name, value)
                return None
        logger.debug("%s: no node accepted %r", self.name, value)
        return None

    # -- introspection ------------------------------------------------------

    def nodes(self) -> List[CastNode]:
        """Return nodes sorted by descending priority."""
        return sorted(self._nodes, key=lambda n: n.priority, reverse=True)
