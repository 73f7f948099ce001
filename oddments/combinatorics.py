"""Subsets, substrings and permutations of a string."""

from __future__ import annotations

from typing import Iterator, Optional


def subsets(text: str) -> Iterator[str]:
    """Yield every subsequence, choosing to keep each character before dropping it."""
    if not text:
        yield ""
        return
    head, rest = text[0], text[1:]
    for tail in subsets(rest):
        yield head + tail
    yield from subsets(rest)


def substrings(text: str) -> Iterator[str]:
    """Yield every non-empty contiguous substring, by start then by length."""
    for start in range(len(text)):
        for end in range(start + 1, len(text) + 1):
            yield text[start:end]


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters, picking positions left to right."""
    if not text:
        yield ""
        return
    for i, ch in enumerate(text):
        for tail in permutations(text[:i] + text[i + 1 :]):
            yield ch + tail


def main(argv: Optional[list[str]] = None) -> int:
    text = argv[0] if argv else "12345"
    for title, generator in (
        ("Subsets", subsets),
        ("Substrings", substrings),
        ("Permutations", permutations),
    ):
        print(f"\n{title}\n")
        for item in generator(text):
            print(f'"{item}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())