"""Handlers for 'taskboard card' commands."""

from taskboard.cli._common import error, item_data, open_store_or_die, output_json, output_result
from taskboard.ordering import column_items
from taskboard.store import StoreError


def card_list(args) -> int:
    """List cards grouped by column."""
    store = open_store_or_die(args.repo, args.json)
    items, _revision = store.fetch()

    if args.column and args.column not in store.columns:
        error(f"Column '{args.column}' not found. Available: {', '.join(store.columns.ids)}", args.json)

    grouped = []
    for column in store.columns:
        if args.column and column.id != args.column:
            continue
        grouped.append((column, column_items(items, column.id)))

    if args.json:
        output_json([item_data(item, store.columns) for _column, members in grouped for item in members])
    else:
        for column, members in grouped:
            print(f"{column.id}  {column.name}")
            for item in members:
                star = " *" if item.priority else ""
                print(f"  {item.rank}  {item.id}  {item.title}{star}")

    return 0


def card_add(args) -> int:
    """Create a new card at the end of the first column."""
    store = open_store_or_die(args.repo, args.json)
    try:
        item = store.create_item(args.title, args.body, priority=args.priority)
    except StoreError as e:
        error(str(e), args.json)

    output_result(
        item_data(item, store.columns),
        f"Created card {item.id} in {store.columns.name(item.column)}",
        args.json,
    )
    return 0


def card_edit(args) -> int:
    """Change a card's title, description or priority."""
    store = open_store_or_die(args.repo, args.json)
    try:
        item = store.update_item(args.id, title=args.title, description=args.body, priority=args.priority)
    except StoreError as e:
        error(str(e), args.json)

    output_result(item_data(item, store.columns), f"Updated card {item.id}", args.json)
    return 0


def card_move(args) -> int:
    """Move a card to a column, optionally at a 1-indexed position."""
    if args.position is not None and args.position < 1:
        error(f"Position must be 1 or more, got {args.position}", args.json)
    store = open_store_or_die(args.repo, args.json)
    index = args.position - 1 if args.position is not None else None
    try:
        item = store.move_item(args.id, args.column, index)
    except StoreError as e:
        error(str(e), args.json)

    name = store.columns.name(item.column)
    output_result(
        item_data(item, store.columns),
        f"Moved card {item.id} to {name} at position {item.rank + 1}",
        args.json,
    )
    return 0


def card_delete(args) -> int:
    """Delete a card."""
    store = open_store_or_die(args.repo, args.json)
    try:
        item = store.delete_item(args.id)
    except StoreError as e:
        error(str(e), args.json)

    output_result({"id": item.id, "deleted": True}, f"Deleted card {item.id}", args.json)
    return 0
