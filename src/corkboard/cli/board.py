"""Handlers for running and dumping the board."""

import asyncio

import yaml

from corkboard.cli._common import board_store, error, load_prefs, output_json, prefs_store, settings_from_args
from corkboard.config import LOG_FILENAME, configure_logging
from corkboard.model.writer import dump_board
from corkboard.palette import THEMES
from corkboard.seed import select_seed_source
from corkboard.session import BoardSession


def board_dump(args) -> int:
    """Seed a board the way the TUI would and print it."""
    settings = settings_from_args(args)
    configure_logging(settings)
    store = board_store(settings)
    source = select_seed_source(settings, store)

    session, fallback_used = asyncio.run(BoardSession.start(source, prefs_store(settings), store))
    data = dump_board(session.board)

    if args.json:
        output_json({"fallback": fallback_used, "columns": data})
    else:
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
    return 0


def board_run(args) -> int:
    """Run the TUI."""
    from corkboard.ui import CorkboardApp

    settings = settings_from_args(args)
    # Textual owns the terminal; keep log lines off it.
    if settings.log_file is None:
        settings.home.mkdir(parents=True, exist_ok=True)
        settings = settings.with_overrides(log_file=settings.home / LOG_FILENAME)
    configure_logging(settings)
    prefs = prefs_store(settings)

    theme = getattr(args, "theme", None)
    if theme is not None:
        if theme not in THEMES:
            error(f"Unknown theme '{theme}'. Available: {', '.join(THEMES)}", False)
        stored = load_prefs(prefs)
        stored.theme = theme
        prefs.save(stored)

    store = board_store(settings)
    app = CorkboardApp(source=select_seed_source(settings, store), prefs_store=prefs, board_store=store)
    app.run()
    return 0
