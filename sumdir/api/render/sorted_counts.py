"""Deterministic ordering of count maps."""


def sorted_counts(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Order by descending count, then ascending key."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
