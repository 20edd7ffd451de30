"""Fuzzy matching of component names for "did you mean" hints."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "levenshtein_distance",
    "suggest_names",
]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Minimum number of single-character edits turning s1 into s2.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (c1 != c2),
                )
            )
        previous = current

    return previous[-1]


def suggest_names(
    name: str,
    candidates: Iterable[str],
    *,
    max_distance: int = 3,
    limit: int = 3,
) -> list[str]:
    """Suggest registered component names close to an unknown one.

    A candidate qualifies when it is within ``max_distance`` edits of
    ``name`` or when one of the two is a hyphen-separated prefix of the
    other (``video`` suggests ``video-player``).

    Args:
        name: The unknown component name.
        candidates: Known component names.
        max_distance: Maximum edit distance to consider a match.
        limit: Maximum number of suggestions to return.

    Returns:
        Suggestions, closest first, ties broken alphabetically.
    """
    target = name.lower()
    if not target:
        return []

    scored: list[tuple[int, str]] = []
    for candidate in candidates:
        lowered = candidate.lower()
        distance = levenshtein_distance(target, lowered)
        if distance <= max_distance:
            scored.append((distance, candidate))
        elif lowered.startswith(f"{target}-") or target.startswith(f"{lowered}-"):
            scored.append((max_distance + 1, candidate))

    scored.sort(key=lambda item: (item[0], item[1].lower()))
    return [candidate for _, candidate in scored[:limit]]
