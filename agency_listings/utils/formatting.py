from typing import Mapping, Sized


def count_table(groups: Mapping[str, Sized]) -> str:
    # Two-column "name | count" table for the run log
    width = max([len(name) for name in groups] + [len("feed")])
    lines = [f"{'feed'.ljust(width)} | count", f"{'-' * width}-+------"]
    for name, items in groups.items():
        lines.append(f"{name.ljust(width)} | {len(items)}")
    return "\n".join(lines)


def total_items(groups: Mapping[str, Sized]) -> int:
    return sum(len(items) for items in groups.values())
