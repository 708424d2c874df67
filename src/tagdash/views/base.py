"""
View capability contract and base classes.

A view is any object exposing ``filter`` and ``update``:

- ``filter(records)`` returns the subset of ``records`` consistent with the view's own
  selection. It has no side effects and returns its input unchanged (the same object)
  when nothing is selected.
- ``update(data, filtered_data, data_changed)`` asks the view to re-render against
  ``filtered_data``; ``data_changed`` says whether the full dataset itself changed
  since the last call, so dataset-wide state (domains, layouts) can be recomputed
  only when needed.

Views that own a selection also expose ``selection_changed``, a SelectionChanged
signal the FilterCoordinator subscribes to once per registered view.

Notes:
    - FilterCoordinator only relies on the View protocol; it never inspects
      concrete view classes.
    - Selection state belongs to the view that produced it. The coordinator reads
      it through ``filter`` and never mutates it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, runtime_checkable

from tagdash.core.records import Record

__all__ = [
    "View",
    "SelectionChanged",
    "BaseView",
    "SelectableView",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class View(Protocol):
    """Structural type of everything the FilterCoordinator can drive."""

    def filter(self, records: Sequence[Record]) -> Sequence[Record]: ...

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None: ...


Listener = Callable[["View"], None]


class SelectionChanged:
    """Minimal synchronous signal carrying the view whose selection changed.

    Listeners run in connection order, on the caller's thread, before ``emit``
    returns. Connecting the same listener twice is a no-op.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def disconnect(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def emit(self, view: View) -> None:
        for listener in list(self._listeners):
            listener(view)

    def __len__(self) -> int:
        return len(self._listeners)


class BaseView:
    """
    Base class for dashboard views.

    Keeps the last full dataset and the last effective subset handed over by
    ``update``. The default filter is the identity: a view without a selection never
    restricts other views.

    Attributes:
        name (str): Display name (used in logs and the dashboard shell).
        data (tuple[Record, ...]): Last full dataset.
        filtered_data (Sequence[Record]): Last effective subset.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        self.data: Sequence[Record] = ()
        self.filtered_data: Sequence[Record] = ()
        self.selection_changed = SelectionChanged()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None:
        if data_changed:
            self.data = data
        self.filtered_data = filtered_data

    def filter(self, records: Sequence[Record]) -> Sequence[Record]:
        return records

    def filter_changed(self) -> None:
        """Signal listeners (the coordinator) that this view's selection changed."""
        self.selection_changed.emit(self)


class SelectableView(BaseView):
    """A view whose selection is a set of tag names.

    ``filter`` keeps the records whose tag is selected; an empty selection means no
    restriction.
    """

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._selection: frozenset[str] = frozenset()

    @property
    def selection(self) -> frozenset[str]:
        return self._selection

    def select(self, tags: Iterable[str]) -> bool:
        """Replace the selection; emit ``selection_changed`` when it actually changed.

        The view refreshes its own selection state after listeners ran, since the
        coordinator does not call back into the view that initiated a pass.

        Returns:
            bool: True if the selection changed.
        """
        new = frozenset(tags)
        if new == self._selection:
            return False
        self._selection = new
        logger.debug("%s selection -> %d tag(s)", self.name, len(new))
        self.filter_changed()
        self.on_selection_changed()
        return True

    def clear_selection(self) -> bool:
        return self.select(())

    def on_selection_changed(self) -> None:
        """Hook for subclasses to refresh selection-dependent state."""

    def filter(self, records: Sequence[Record]) -> Sequence[Record]:
        selected = self._selection
        if not selected:
            return records
        return [r for r in records if r.tag_name in selected]
