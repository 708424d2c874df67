"""
Cross-filter coordination between registered views.

FilterCoordinator owns the canonical dataset and the ordered list of views. When a
view's selection changes, every other view receives the dataset folded through the
filters of all views except itself, in registration order:

    effective(V) = F_n(...F_2(F_1(data)))  for all F_k with k != V

A view is never filtered by its own selection, so a selection never shrinks the
context the user needs to adjust it. The initiating view is skipped during the pass;
it refreshes its own selection state directly.

Each pass is O(V^2) filter applications for V views. Filters are trusted: results are
not checked for being subsets of their input.

Concurrency: single logical thread. A notification raised while a pass is running
(a view changing its selection inside ``update``) is queued and handled after the
current pass completes.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence

from tagdash.core.records import Record

from .base import View

__all__ = ["FilterCoordinator"]

logger = logging.getLogger(__name__)


class FilterCoordinator:
    """
    Compose per-view filters and dispatch updates.

    Args:
        records (Iterable[Record]): Optional initial dataset. Views registered later
            only see it once ``load_or_refresh_dataset`` is called.

    Examples:
        >>> from tagdash.views import FilterCoordinator, SelectableView
        >>> coord = FilterCoordinator()
        >>> a, b = SelectableView("a"), SelectableView("b")
        >>> coord.register_view(a); coord.register_view(b)
        >>> coord.views == [a, b]
        True
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._data: tuple[Record, ...] = tuple(records)
        self._views: list[View] = []
        self._pending: deque[View | None] = deque()
        self._dispatching = False

    @property
    def data(self) -> tuple[Record, ...]:
        return self._data

    @property
    def views(self) -> list[View]:
        return list(self._views)

    # ----------------------------
    # Registration
    # ----------------------------

    def register_view(self, view: View) -> None:
        """Append ``view`` and subscribe to its selection signal (once per view)."""
        if any(v is view for v in self._views):
            return
        self._views.append(view)
        signal = getattr(view, "selection_changed", None)
        if signal is not None:
            signal.connect(self.notify_filter_changed)
        logger.debug("registered %r (%d views)", view, len(self._views))

    def unregister_view(self, view: View) -> None:
        self._views = [v for v in self._views if v is not view]
        signal = getattr(view, "selection_changed", None)
        if signal is not None:
            signal.disconnect(self.notify_filter_changed)

    def close(self) -> None:
        """Disconnect from every registered view and forget them."""
        for view in list(self._views):
            self.unregister_view(view)
        self._pending.clear()

    # ----------------------------
    # Coordination
    # ----------------------------

    def effective_subset(self, view: View) -> Sequence[Record]:
        """Fold every other registered view's filter over the dataset."""
        effective: Sequence[Record] = self._data
        for other in self._views:
            if other is view:
                continue
            effective = other.filter(effective)
        return effective

    def notify_filter_changed(self, initiator: View | None = None) -> None:
        """Recompute and push the effective subset of every view except ``initiator``."""
        self._pending.append(initiator)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                self._run_pass(self._pending.popleft())
        finally:
            self._dispatching = False
            self._pending.clear()

    def _run_pass(self, initiator: View | None) -> None:
        logger.debug("filter pass from %r over %d records", initiator, len(self._data))
        for view in list(self._views):
            if view is initiator:
                continue
            view.update(self._data, self.effective_subset(view), False)

    def load_or_refresh_dataset(self, records: Iterable[Record]) -> None:
        """Replace the dataset and update every view unfiltered, flagging the change."""
        self._data = tuple(records)
        logger.debug("dataset loaded: %d records, %d views", len(self._data), len(self._views))
        for view in list(self._views):
            view.update(self._data, self._data, True)
