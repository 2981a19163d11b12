# MIT License (see LICENSE)
"""
Registry of the live charged bodies.

The registry is an explicitly owned container: the force solver, field
evaluator and line tracer receive it as an argument instead of reading a
process-wide list. Only the host (spawn/destroy) mutates it, and only
between read passes.

Structure:
    - register() / deregister() are called by the host on creation/destruction.
    - reading() opens a read pass. While any pass is open, structural
      mutation raises RuntimeError so a pairwise loop never sees a body
      appear or vanish halfway through.
"""
from __future__ import annotations
import logging
from contextlib import contextmanager, nullcontext
from typing import ContextManager, Iterable, Iterator, Union

from .types import ChargedBody

logger = logging.getLogger(__name__)


class ChargeRegistry:
    """
    Insertion-ordered set of ChargedBody instances keyed by assigned id.

    Example:
        registry = ChargeRegistry()
        a = ChargedBody(charge=+1.0, position=(0, 0, 0))
        registry.register(a)
        with registry.reading():
            for body in registry:
                ...
    """

    def __init__(self) -> None:
        self._bodies: dict[int, ChargedBody] = {}
        self._next_id = 1
        self._readers = 0

    def register(self, body: ChargedBody) -> int:
        """
        Add a body and assign it a unique id.

        Args:
            body: The body to add. Must not already be registered here.

        Returns:
            The assigned id.

        Raises:
            TypeError: If body is None or not a ChargedBody.
            ValueError: If the body is already registered (here or elsewhere).
            RuntimeError: If called during a read pass.
        """
        if not isinstance(body, ChargedBody):
            raise TypeError(f"Expected a ChargedBody, got {type(body).__name__}")
        self._check_writable("register")
        if body in self:
            raise ValueError(f"{body.label} is already registered")
        if body.id != -1:
            raise ValueError(f"{body.label} belongs to another registry")

        body.id = self._next_id
        self._next_id += 1
        self._bodies[body.id] = body
        logger.debug("registered %s (q=%g, static=%s)", body.label, body.charge, body.is_static)
        return body.id

    def deregister(self, body: ChargedBody) -> None:
        """
        Remove a body. Its id is reset to -1 and never reused.

        Raises:
            ValueError: If the body is not registered here.
            RuntimeError: If called during a read pass.
        """
        self._check_writable("deregister")
        if body not in self:
            raise ValueError(f"{getattr(body, 'label', body)!s} is not registered")
        logger.debug("deregistered %s", body.label)
        del self._bodies[body.id]
        body.id = -1

    def get(self, body_id: int) -> ChargedBody | None:
        return self._bodies.get(body_id)

    def all_bodies(self) -> tuple[ChargedBody, ...]:
        """Snapshot of all registered bodies in registration order."""
        return tuple(self._bodies.values())

    def clear(self) -> None:
        self._check_writable("clear")
        for body in self._bodies.values():
            body.id = -1
        self._bodies.clear()

    @contextmanager
    def reading(self) -> Iterator[tuple[ChargedBody, ...]]:
        """
        Open a read pass and yield the snapshot of bodies.

        Passes may nest (a tick pass that also evaluates fields).
        """
        self._readers += 1
        try:
            yield self.all_bodies()
        finally:
            self._readers -= 1

    @property
    def in_pass(self) -> bool:
        return self._readers > 0

    def _check_writable(self, op: str) -> None:
        if self._readers:
            raise RuntimeError(f"Cannot {op} bodies while a read pass is in progress")

    def __contains__(self, body: object) -> bool:
        if not isinstance(body, ChargedBody):
            return False
        return self._bodies.get(body.id) is body

    def __iter__(self) -> Iterator[ChargedBody]:
        return iter(self.all_bodies())

    def __len__(self) -> int:
        return len(self._bodies)

    def __repr__(self) -> str:
        return f"ChargeRegistry(n={len(self)})"


BodySource = Union[ChargeRegistry, Iterable[ChargedBody]]


def read_pass(source: BodySource) -> ContextManager[tuple[ChargedBody, ...]]:
    """
    Open a read pass over a registry, or wrap a plain iterable of bodies.

    Lets the numeric functions accept either a ChargeRegistry or an ad hoc
    list of bodies (handy in tests and for one-off queries).
    """
    if isinstance(source, ChargeRegistry):
        return source.reading()
    return nullcontext(tuple(source))
