"""Scanner: first byte in buffer order matching a class and a target count."""

from dataclasses import dataclass

from .counter import CountTable


@dataclass(frozen=True)
class Found:
    value: int   # byte value 0-255
    index: int   # offset of the first occurrence in the buffer

    @property
    def char(self) -> str:
        return chr(self.value)


# None stands for "not found"
SearchResult = Found | None


def scan(buffer: bytes, target: int | None, class_codes: frozenset[int],
         counts: CountTable) -> SearchResult:
    """Return the first byte of the class whose total count equals target.

    Walks the buffer from index 0 so the earliest position wins among
    bytes sharing the target count.
    """
    if target is None or target <= 0:
        return None

    for index, value in enumerate(buffer):
        if value in class_codes and counts[value] == target:
            return Found(value, index)
    return None
