"""Handlers for 'corkboard prefs' commands."""

from dataclasses import asdict

from corkboard.cli._common import error, load_prefs, output_json, prefs_store, settings_from_args
from corkboard.palette import THEMES


def prefs_get(args) -> int:
    """Show stored preferences."""
    prefs = load_prefs(prefs_store(settings_from_args(args)))

    if args.json:
        output_json(asdict(prefs))
    else:
        print(f"name:   {prefs.name}")
        print(f"avatar: {prefs.avatar or '-'}")
        print(f"theme:  {prefs.theme}")
    return 0


def prefs_set(args) -> int:
    """Update stored preferences from flags."""
    store = prefs_store(settings_from_args(args))
    prefs = load_prefs(store)

    if args.theme is not None:
        if args.theme not in THEMES:
            error(f"Unknown theme '{args.theme}'. Available: {', '.join(THEMES)}", args.json)
        prefs.theme = args.theme
    if args.name is not None:
        if not args.name.strip():
            error("Name cannot be blank.", args.json)
        prefs.name = args.name.strip()
    if args.avatar is not None:
        prefs.avatar = args.avatar or None

    if not store.save(prefs):
        error(f"Could not write {store.path}", args.json)

    if args.json:
        output_json(asdict(prefs))
    else:
        print(f"Saved preferences to {store.path}")
    return 0
