"""Radicals and components that serve only as analogy evidence."""

RADICALS = frozenset("訁飠糹𤇾𰯲釒𦥯䜌睪巠咼昜臤戠")


def is_radical(char: str) -> bool:
    """Return True if char is a component that must never be emitted on its own."""
    return char in RADICALS
