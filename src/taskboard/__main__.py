"""Entry point for taskboard CLI."""

import sys
from pathlib import Path

NOUNS = {"init", "board", "card", "web"}


def main():
    # No subcommand or non-noun argument = TUI mode
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        from taskboard.ui import TaskboardApp

        path = sys.argv[1] if len(sys.argv) > 1 and not sys.argv[1].startswith("-") else "."
        app = TaskboardApp(Path(path).resolve())
        app.run()
        return

    from taskboard.cli import build_parser
    from taskboard.cli._common import configure_logging

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
