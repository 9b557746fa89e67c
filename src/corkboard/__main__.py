"""Entry point for corkboard CLI."""

import sys


def main(argv=None) -> int:
    from corkboard.cli import build_parser

    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
