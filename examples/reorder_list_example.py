"""Minimal example keeping a list ordered by fractional index keys."""

from fractional_indexing import generate_key_between, generate_n_keys_between


def main() -> None:
    """Build a list, move an item, and show that sorting by key keeps the order."""
    items = dict(zip(generate_n_keys_between(None, None, 3), ["write", "review", "ship"], strict=True))
    print(f"{items=}")

    keys = sorted(items)
    items[generate_key_between(keys[0], keys[1])] = "test"
    items[generate_key_between(None, keys[0])] = "plan"

    # move "ship" between "plan" and "write"
    keys = sorted(items)
    shipped = items.pop(keys[-1])
    items[generate_key_between(keys[0], keys[1])] = shipped

    print("ordered:", [items[key] for key in sorted(items)])
    print("keys:", sorted(items))


if __name__ == "__main__":
    main()
