"""CLI argument parser and dispatch for corkboard."""

import argparse

from corkboard.cli.board import board_dump, board_run
from corkboard.cli.prefs import prefs_get, prefs_set
from corkboard.cli.themes import themes_list


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--home", help="Directory for preference files (default: ~/.config/corkboard)")
    common.add_argument("--board", help="Board file to load from and save to (YAML)")
    common.add_argument("--seed-url", dest="seed_url", help="URL of a JSON board seed")
    common.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING)")
    common.add_argument("--log-file", dest="log_file", help="Write logs to this file")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="corkboard",
        description="Terminal kanban board",
        parents=[common],
    )
    parser.add_argument("--theme", help="Select a theme before starting")
    parser.set_defaults(func=board_run)

    nouns = parser.add_subparsers(dest="noun")

    # --- themes ---
    themes_p = nouns.add_parser("themes", help="List color themes", parents=[common])
    themes_p.set_defaults(func=themes_list)

    # --- prefs ---
    prefs_p = nouns.add_parser("prefs", help="User preferences", parents=[common])
    prefs_verbs = prefs_p.add_subparsers(dest="verb")

    prefs_get_p = prefs_verbs.add_parser("get", help="Show preferences", parents=[common])
    prefs_get_p.set_defaults(func=prefs_get)

    prefs_set_p = prefs_verbs.add_parser("set", help="Update preferences", parents=[common])
    prefs_set_p.add_argument("--name", help="Display name")
    prefs_set_p.add_argument("--theme", help="Theme name")
    prefs_set_p.add_argument("--avatar", help="Avatar reference (path or URL)")
    prefs_set_p.set_defaults(func=prefs_set)

    # prefs with no verb = get
    prefs_p.set_defaults(func=prefs_get)

    # --- dump ---
    dump_p = nouns.add_parser("dump", help="Print the seeded board", parents=[common])
    dump_p.set_defaults(func=board_dump)

    return parser
