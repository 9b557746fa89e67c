"""Handler for 'corkboard themes'."""

from corkboard.cli._common import load_prefs, output_json, prefs_store, settings_from_args
from corkboard.palette import THEMES


def themes_list(args) -> int:
    """List themes and their colors, marking the selected one."""
    current = load_prefs(prefs_store(settings_from_args(args))).theme

    if args.json:
        output_json(
            [
                {
                    "name": name,
                    "current": name == current,
                    "colors": [{"main": c.main, "background": c.background} for c in palette],
                }
                for name, palette in THEMES.items()
            ]
        )
        return 0

    for name, palette in THEMES.items():
        marker = "*" if name == current else " "
        swatches = " ".join(c.main for c in palette)
        print(f"{marker} {name:<12} {swatches}")
    return 0
