"""Runtime settings from environment variables and CLI overrides."""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_HOME = "~/.config/corkboard"
DEFAULT_SEED_TIMEOUT = 10.0
PREFS_FILENAME = "prefs.yaml"
LOG_FILENAME = "corkboard.log"


@dataclass(frozen=True)
class Settings:
    """Where corkboard keeps its files and where it seeds boards from."""

    home: Path
    seed_url: str | None = None
    seed_timeout: float = DEFAULT_SEED_TIMEOUT
    board_file: Path | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None

    @property
    def prefs_path(self) -> Path:
        return self.home / PREFS_FILENAME

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        try:
            timeout = float(env.get("CORKBOARD_SEED_TIMEOUT") or DEFAULT_SEED_TIMEOUT)
        except ValueError:
            timeout = DEFAULT_SEED_TIMEOUT
        return cls(
            home=Path(env.get("CORKBOARD_HOME") or DEFAULT_HOME).expanduser(),
            seed_url=env.get("CORKBOARD_SEED_URL") or None,
            seed_timeout=timeout,
            log_level=(env.get("CORKBOARD_LOG_LEVEL") or "WARNING").upper(),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("home", "board_file", "log_file"):
            if key in changes:
                changes[key] = Path(changes[key]).expanduser()
        if "log_level" in changes:
            changes["log_level"] = changes["log_level"].upper()
        return replace(self, **changes)


def configure_logging(settings: Settings) -> None:
    """Send logs to the log file if set, else stderr."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    kwargs = {}
    if settings.log_file is not None:
        kwargs["filename"] = str(settings.log_file)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **kwargs,
    )
