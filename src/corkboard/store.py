"""Optional board file: keeps board content between runs when asked to."""

import logging
from pathlib import Path

import yaml

from corkboard.model.board import Board
from corkboard.model.writer import dump_board

logger = logging.getLogger(__name__)


class BoardStore:
    """Board content as a YAML list of columns at path."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[dict] | None:
        """Seed-shaped column data from the file, or None if unusable."""
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("could not load board from %s: %s", self.path, exc)
            return None
        if not isinstance(data, list):
            logger.warning("ignoring board file %s: not a list of columns", self.path)
            return None
        return data

    def save(self, board: Board) -> bool:
        """Write the board. Returns False (and logs) on failure."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.safe_dump(dump_board(board), default_flow_style=False, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning("could not save board to %s: %s", self.path, exc)
            return False
        return True
