"""Push-based derivation graph ordered with graphlib.

Sources are plain cells assigned from outside. Derived nodes declare the
names they read and a pure compute function over those values. On every
update the graph:

    1. assigns all changed sources at once,
    2. recomputes the dependants of those sources in topological order,
       skipping nodes none of whose inputs actually changed,
    3. commits the new values together,
    4. notifies subscribers of every node whose value changed.

Subscribers therefore never see a mix of old and new upstream values. A
listener may write to the graph; pending deliveries of values its write
replaced are dropped, so the last value a subscriber sees is the committed one.

Usage:
    graph = DerivationGraph()
    graph.add_source("a", 1)
    graph.add_derived("double", lambda a: a * 2, inputs=("a",))
    graph.subscribe("double", print)   # prints 2
    graph.set("a", 5)                  # prints 10
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from graphlib import TopologicalSorter
from typing import Any, Callable, Iterable, Mapping

from ..exceptions import DerivationError, UnknownNodeError

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class Derivation:
    """A derived node: ``compute(*values_of(inputs))``."""

    name: str
    compute: Callable[..., Any]
    inputs: tuple[str, ...]


def _unchanged(old: Any, new: Any) -> bool:
    if old is new:
        return True
    try:
        return bool(old == new)
    except Exception:
        return False


class DerivationGraph:
    """Holds source cells, derived nodes and their subscribers.

    Thread-safe: updates are serialized by a re-entrant lock and listeners
    are called outside of it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._sources: set[str] = set()
        self._derivations: dict[str, Derivation] = {}
        self._dependants: dict[str, list[str]] = {}
        self._values: dict[str, Any] = {}
        self._order: list[str] | None = None
        self._listeners: dict[str, list[Listener]] = {}

    # -----------------------------------------------------------------
    # Wiring
    # -----------------------------------------------------------------

    def add_source(self, name: str, initial: Any = None) -> None:
        """Register a mutable cell."""
        with self._lock:
            self._check_new_name(name)
            self._sources.add(name)
            self._dependants[name] = []
            self._values[name] = initial
            self._order = None

    def add_derived(
        self, name: str, compute: Callable[..., Any], inputs: Iterable[str]
    ) -> None:
        """Register a derived node and compute its initial value."""
        inputs = tuple(inputs)
        with self._lock:
            self._check_new_name(name)
            for upstream in inputs:
                if upstream not in self._dependants:
                    raise UnknownNodeError(upstream)
            derivation = Derivation(name=name, compute=compute, inputs=inputs)
            initial = self._compute(derivation, self._values)

            self._derivations[name] = derivation
            self._dependants[name] = []
            for upstream in inputs:
                self._dependants[upstream].append(name)
            self._values[name] = initial
            self._order = None

    def _check_new_name(self, name: str) -> None:
        if name in self._dependants:
            raise DerivationError(f"Node '{name}' is already registered", node=name)

    @property
    def order(self) -> list[str]:
        """Derived node names in dependency order."""
        with self._lock:
            if self._order is None:
                self._order = self._resolve_order()
            return list(self._order)

    def _resolve_order(self) -> list[str]:
        ts: TopologicalSorter[str] = TopologicalSorter()
        for name, derivation in self._derivations.items():
            ts.add(name, *derivation.inputs)
        return [name for name in ts.static_order() if name in self._derivations]

    # -----------------------------------------------------------------
    # Reading
    # -----------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._dependants

    def get(self, name: str) -> Any:
        with self._lock:
            if name not in self._values:
                raise UnknownNodeError(name)
            return self._values[name]

    def snapshot(self) -> dict[str, Any]:
        """Current value of every node, read under the lock."""
        with self._lock:
            return dict(self._values)

    # -----------------------------------------------------------------
    # Writing
    # -----------------------------------------------------------------

    def set(self, name: str, value: Any) -> set[str]:
        """Assign one source. See :meth:`update`."""
        return self.update({name: value})

    def update(self, changes: Mapping[str, Any]) -> set[str]:
        """Assign several sources atomically and propagate.

        Returns:
            Names of every node whose value changed.

        Raises:
            UnknownNodeError: If a name is not registered
            DerivationError: If a name is a derived node, or a compute fails
        """
        with self._lock:
            for name in changes:
                if name not in self._dependants:
                    raise UnknownNodeError(name)
                if name not in self._sources:
                    raise DerivationError(f"Cannot assign derived node '{name}'", node=name)

            pending = dict(self._values)
            changed: set[str] = set()
            for name, value in changes.items():
                if not _unchanged(pending[name], value):
                    pending[name] = value
                    changed.add(name)

            if changed:
                recomputed = 0
                for name in self.order:
                    derivation = self._derivations[name]
                    if not changed.intersection(derivation.inputs):
                        continue
                    new_value = self._compute(derivation, pending)
                    recomputed += 1
                    if not _unchanged(pending[name], new_value):
                        pending[name] = new_value
                        changed.add(name)
                logger.debug(
                    "Propagated %s: %d recomputed, %d changed",
                    ", ".join(sorted(changes)),
                    recomputed,
                    len(changed),
                )

            self._values = pending
            notifications = [
                (name, pending[name], list(self._listeners.get(name, ())))
                for name in self._notify_order(changed)
            ]

        for name, value, listeners in notifications:
            for listener in listeners:
                if not self._is_current(name, value):
                    # superseded by a nested update
                    break
                self._call_listener(name, listener, value)
        return changed

    def _is_current(self, name: str, value: Any) -> bool:
        with self._lock:
            return self._values.get(name) is value

    def _notify_order(self, changed: set[str]) -> list[str]:
        sources = sorted(name for name in changed if name in self._sources)
        return sources + [name for name in self.order if name in changed]

    def _compute(self, derivation: Derivation, values: Mapping[str, Any]) -> Any:
        args = [values[name] for name in derivation.inputs]
        try:
            return derivation.compute(*args)
        except Exception as exc:
            raise DerivationError(
                f"Failed to compute '{derivation.name}': {exc}", node=derivation.name
            ) from exc

    # -----------------------------------------------------------------
    # Subscribers
    # -----------------------------------------------------------------

    def subscribe(self, name: str, listener: Listener) -> Unsubscribe:
        """Call ``listener`` with the current value now and on every change."""
        with self._lock:
            if name not in self._values:
                raise UnknownNodeError(name)
            self._listeners.setdefault(name, []).append(listener)
            current = self._values[name]

        self._call_listener(name, listener, current)

        def unsubscribe() -> None:
            with self._lock:
                try:
                    self._listeners.get(name, []).remove(listener)
                except ValueError:
                    pass

        return unsubscribe

    @staticmethod
    def _call_listener(name: str, listener: Listener, value: Any) -> None:
        try:
            listener(value)
        except Exception:
            logger.warning("Subscriber of '%s' failed", name, exc_info=True)
