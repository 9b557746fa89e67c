"""Shared helpers for CLI command handlers."""

import json
import sys

from corkboard.config import Settings
from corkboard.prefs import Preferences, PrefsStore
from corkboard.store import BoardStore


def settings_from_args(args) -> Settings:
    """Environment settings with any CLI flags applied on top."""
    return Settings.from_env().with_overrides(
        home=getattr(args, "home", None),
        seed_url=getattr(args, "seed_url", None),
        board_file=getattr(args, "board", None),
        log_level=getattr(args, "log_level", None),
        log_file=getattr(args, "log_file", None),
    )


def prefs_store(settings: Settings) -> PrefsStore:
    return PrefsStore(settings.prefs_path)


def board_store(settings: Settings) -> BoardStore | None:
    return BoardStore(settings.board_file) if settings.board_file else None


def load_prefs(store: PrefsStore) -> Preferences:
    return store.load() or Preferences()


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
