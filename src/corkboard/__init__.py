"""Terminal kanban board with drag-and-drop reordering."""
