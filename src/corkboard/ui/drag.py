"""Pointer drag-and-drop for board widgets.

``Draggable`` widgets open a drag session on the board's tracker once
the pointer has travelled far enough; ``DropTarget`` containers turn the
release position into a row or column index. The tracker decides what,
if anything, moves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.errors import NoWidget
from textual.geometry import Offset

from corkboard.drag import DragKind

if TYPE_CHECKING:
    from textual.screen import Screen


class DropTarget:
    """Mixin for containers that accept drops.

    Hooks return True to claim the pointer; False passes it on to the
    next target outwards.
    """

    def drag_over(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        return False

    def drag_away(self, draggable: DraggableMixin) -> None:
        pass

    def try_drop(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        return False


class DraggableMixin:
    """Mixin for widgets the pointer can pick up.

    Set DRAG_KIND, call ``_init_draggable()`` from ``__init__`` and
    implement ``drag_source()``. A press and release without movement
    calls ``draggable_clicked()`` instead.
    """

    DRAG_THRESHOLD = 2
    HORIZONTAL_ONLY = False
    DRAG_KIND: DragKind = DragKind.CARD

    def _init_draggable(self) -> None:
        self._press_at: Offset | None = None
        self._dragging = False
        self._drag_screen: Screen | None = None
        self._hover: DropTarget | None = None

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def drag_source(self) -> tuple[int, int | None]:
        """(column_index, card_index) this widget was drawn from."""
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        pass

    def _moved_enough(self, x: int, y: int) -> bool:
        dx = abs(x - self._press_at.x)
        if self.HORIZONTAL_ONLY:
            return dx > self.DRAG_THRESHOLD
        return max(dx, abs(y - self._press_at.y)) > self.DRAG_THRESHOLD

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        self._press_at = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._press_at is None:
            return
        event.stop()
        if self._moved_enough(event.screen_x, event.screen_y):
            self._press_at = None
            self.release_mouse()
            self._drag_start()

    def on_mouse_up(self, event) -> None:
        event.stop()
        self.release_mouse()
        pressed, self._press_at = self._press_at, None
        if pressed is not None:
            self.draggable_clicked()

    def _drag_start(self) -> None:
        """Open a session on the tracker and hand pointer routing to the screen."""
        screen = self.screen
        column_index, card_index = self.drag_source()
        if screen.session.tracker.begin_drag(self.DRAG_KIND, column_index, card_index) is None:
            return
        self._dragging = True
        self._drag_screen = screen
        self.add_class("dragging")
        screen.active_draggable = self
        screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        targets = self._targets_at(x, y)
        target = targets[0] if targets else None
        if target is None:
            return
        if target is not self._hover:
            if self._hover is not None:
                self._hover.drag_away(self)
            self._hover = target
        target.drag_over(self, x, y)

    def _drag_finish(self, x: int, y: int) -> None:
        """Offer the drop to each target under the pointer, innermost first."""
        targets = self._targets_at(x, y)
        if not targets and self._hover is not None:
            targets = [self._hover]
        any(target.try_drop(self, x, y) for target in targets)
        self._drag_end()

    def _drag_cancel(self) -> None:
        self._drag_end()

    def _drag_end(self) -> None:
        """Tidy up and close the tracker session, dropped or not."""
        if self._hover is not None:
            self._hover.drag_away(self)
            self._hover = None
        self._dragging = False
        self.remove_class("dragging")
        screen, self._drag_screen = self._drag_screen, None
        if screen is None:
            return
        screen.release_mouse()
        screen.active_draggable = None
        screen.session.tracker.end_drag()

    def _targets_at(self, x: int, y: int) -> list[DropTarget]:
        """Drop targets under the pointer, from the innermost widget outwards."""
        screen = self._drag_screen
        if screen is None:
            return []
        try:
            hits = list(screen.get_widgets_at(x, y))
        except NoWidget:
            return []
        found: list[DropTarget] = []
        for widget, _region in hits:
            node = widget
            while node is not None:
                if isinstance(node, DropTarget) and node is not self and node not in found:
                    found.append(node)
                node = node.parent
        return found
