"""Per-byte occurrence counts.

A count table is a tuple of 256 ints indexed by byte value, zero for
bytes absent from the buffer. sum(table) == len(buffer).
"""

CountTable = tuple[int, ...]


def count_bytes(buffer: bytes) -> CountTable:
    """Count every byte value in one pass over the buffer."""
    counts = [0] * 256
    for value in buffer:
        counts[value] += 1
    return tuple(counts)


def describe_counts(counts: CountTable) -> str:
    """Render the present bytes as 'char [code] (count)' in byte order."""
    return ", ".join(
        f"{chr(value)} [{value}] ({count})"
        for value, count in enumerate(counts)
        if count > 0
    )
