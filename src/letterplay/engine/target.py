"""Target count resolution.

Each format reduces the counts of one byte class to the single count a
qualifying character must have. The resolver never picks a byte; ties
between bytes sharing the target are settled by buffer order in the scanner.
"""

from enum import Enum

from .counter import CountTable


class FormatKind(Enum):
    NON_REPEATING = "non-repeating"
    LEAST_REPEATING = "least-repeating"
    MOST_REPEATING = "most-repeating"


ALLOWED_FORMATS = tuple(fmt.value for fmt in FormatKind)


def parse_format(name: str) -> FormatKind:
    """Look up a format by its command-line name."""
    try:
        return FormatKind(name)
    except ValueError:
        raise ValueError(
            f"Unknown format {name!r}, expected one of: {', '.join(ALLOWED_FORMATS)}"
        ) from None


def resolve_target(fmt: FormatKind, counts: CountTable,
                   class_codes: frozenset[int]) -> int | None:
    """Compute the target count for a format over one byte class.

    Args:
        fmt: Requested format.
        counts: Count table for the whole buffer.
        class_codes: Byte values belonging to the requested class.

    Returns:
        The target count, or None when the class has no candidate
        (no byte present for most-repeating, no byte occurring more
        than once for least-repeating).
    """
    if fmt is FormatKind.NON_REPEATING:
        return 1

    present = [counts[v] for v in class_codes if counts[v] > 0]

    if fmt is FormatKind.MOST_REPEATING:
        return max(present, default=None)

    if fmt is FormatKind.LEAST_REPEATING:
        # Singletons are not repeating at all
        return min((c for c in present if c > 1), default=None)

    raise ValueError(f"Unsupported format: {fmt}")
