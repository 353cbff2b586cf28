"""Search orchestration: one (class, result) pair per requested class.

Usage:
    results = run_search(buffer, FormatKind.MOST_REPEATING,
                         [ByteClass.SYMBOL, ByteClass.LETTER])

Results come back in the order the classes were requested. A class with
no candidate for the format yields None rather than an error.
"""

from dataclasses import dataclass
from typing import Sequence

from ..core.byte_classes import ByteClass, CLASS_CODES
from .counter import CountTable, count_bytes
from .scanner import SearchResult, scan
from .target import FormatKind, resolve_target


@dataclass(frozen=True)
class SearchRequest:
    format: FormatKind
    byte_class: ByteClass


def search_one(buffer: bytes, request: SearchRequest,
               counts: CountTable) -> SearchResult:
    """Resolve the target for one request, then scan for it."""
    class_codes = CLASS_CODES[request.byte_class]
    target = resolve_target(request.format, counts, class_codes)
    return scan(buffer, target, class_codes, counts)


def run_search(buffer: bytes, fmt: FormatKind, classes: Sequence[ByteClass],
               counts: CountTable | None = None) -> list[tuple[ByteClass, SearchResult]]:
    """Run the search for every requested class, preserving their order."""
    if counts is None:
        counts = count_bytes(buffer)

    results = []
    for byte_class in classes:
        result = search_one(buffer, SearchRequest(fmt, byte_class), counts)
        results.append((byte_class, result))
    return results
