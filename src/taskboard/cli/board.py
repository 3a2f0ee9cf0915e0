"""Handlers for 'taskboard board' commands."""

from taskboard.cli._common import open_store_or_die, output_json
from taskboard.ordering import find_violations


def board_summary(args) -> int:
    """Show board summary: columns and card counts."""
    store = open_store_or_die(args.repo, args.json)
    items, revision = store.fetch()

    columns = []
    for column in store.columns:
        count = sum(1 for item in items if item.column == column.id)
        columns.append({"id": column.id, "name": column.name, "cards": count})

    if args.json:
        output_json({"revision": revision, "columns": columns})
    else:
        print(f"taskboard ({revision[:7] if revision else 'empty'})")
        for c in columns:
            cards = "card" if c["cards"] == 1 else "cards"
            print(f"  {c['id']:<12} {c['name']:<16} {c['cards']} {cards}")

    return 0


def board_check(args) -> int:
    """Verify every column has dense ranks 0..n-1. Exit 1 if not."""
    store = open_store_or_die(args.repo, args.json)
    items, _revision = store.fetch()
    violations = find_violations(items)

    if args.json:
        output_json({"ok": not violations, "violations": violations})
    elif violations:
        for column, ranks in sorted(violations.items()):
            print(f"{column}: ranks {ranks} are not 0..{len(ranks) - 1}")
    else:
        print("ok")

    return 1 if violations else 0
