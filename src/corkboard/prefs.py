"""User preferences and their YAML file store.

Loading and saving are best-effort: any failure is logged and the
caller carries on with defaults.
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import yaml

from corkboard.palette import DEFAULT_THEME, THEMES

logger = logging.getLogger(__name__)


@dataclass
class Preferences:
    """Per-user settings. Board content is not stored here."""

    name: str = "Guest"
    avatar: str | None = None
    theme: str = DEFAULT_THEME

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        """Merge known keys over the defaults, ignoring the rest."""
        prefs = cls()
        name = data.get("name")
        if isinstance(name, str) and name.strip():
            prefs.name = name.strip()
        avatar = data.get("avatar")
        if isinstance(avatar, str) and avatar:
            prefs.avatar = avatar
        theme = data.get("theme")
        if isinstance(theme, str) and theme in THEMES:
            prefs.theme = theme
        return prefs


class PrefsStore:
    """Reads and writes preferences as a YAML mapping at path."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Preferences | None:
        """Stored preferences, or None if missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("could not load preferences from %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("ignoring preferences in %s: not a mapping", self.path)
            return None
        return Preferences.from_dict(data)

    def save(self, prefs: Preferences) -> bool:
        """Write preferences. Returns False (and logs) on failure."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.safe_dump(asdict(prefs), default_flow_style=False, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning("could not save preferences to %s: %s", self.path, exc)
            return False
        return True
