"""
Split a sequence into fixed-size pages. Pages are views over the original
sequence; nothing is copied.
"""

from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class Page(Generic[T]):
    """Contiguous slice [start, stop) of a sequence."""

    def __init__(self, sequence: Sequence[T], start: int, stop: int) -> None:
        self.sequence = sequence
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __iter__(self) -> Iterator[T]:
        for i in range(self.start, self.stop):
            yield self.sequence[i]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("page index out of range")
        return self.sequence[self.start + index]

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Page(start={self.start}, stop={self.stop})"


class Paginator(Generic[T]):
    def __init__(self, sequence: Sequence[T], page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self.page_size = page_size
        self._pages: list[Page[T]] = [
            Page(sequence, start, min(start + page_size, len(sequence)))
            for start in range(0, len(sequence), page_size)
        ]

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __getitem__(self, index):
        return self._pages[index]


def paginate(sequence: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(sequence, page_size)
