"""
Навигация по найденным совпадениям.

advance() это чистая функция перехода по кругу; MatchNavigator хранит
активный индекс для одного представления и не разделяется между ними.
"""

from enum import Enum
from typing import Optional, Sequence, Union

from ..interfaces.text_processor import SearchMatch

NO_MATCH = -1


class Direction(Enum):
    """Направление перехода."""
    NEXT = 1
    PREVIOUS = -1


DirectionLike = Union[Direction, str, int]


def _as_direction(direction: DirectionLike) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction[direction.strip().upper()]
        except KeyError:
            raise ValueError(f"Неизвестное направление: {direction!r}") from None
    if isinstance(direction, int) and not isinstance(direction, bool):
        if direction > 0:
            return Direction.NEXT
        if direction < 0:
            return Direction.PREVIOUS
    raise ValueError(f"Неизвестное направление: {direction!r}")


def advance(matches: Sequence[SearchMatch],
            current_index: Optional[int],
            direction: DirectionLike) -> int:
    """
    Следующий активный индекс при переходе по кругу.

    Args:
        matches: Совпадения в порядке позиций
        current_index: Текущий индекс; None или -1, если ничего не активно
        direction: Direction, 'next'/'previous' или +1/-1

    Returns:
        Новый индекс; -1, если совпадений нет
    """
    step = _as_direction(direction)
    total = len(matches)
    if total == 0:
        return NO_MATCH
    current = NO_MATCH if current_index is None or current_index < 0 else current_index % total

    if step is Direction.NEXT:
        return (current + 1) % total
    if current <= 0:
        return total - 1
    return current - 1


class MatchNavigator:
    """Состояние навигации для одного представления."""

    def __init__(self, matches: Sequence[SearchMatch]):
        self.matches = tuple(matches)
        self._index = NO_MATCH

    @property
    def total(self) -> int:
        return len(self.matches)

    @property
    def active_index(self) -> int:
        return self._index

    @property
    def active_match(self) -> Optional[SearchMatch]:
        if self._index == NO_MATCH:
            return None
        return self.matches[self._index]

    def next(self) -> Optional[SearchMatch]:
        self._index = advance(self.matches, self._index, Direction.NEXT)
        return self.active_match

    def previous(self) -> Optional[SearchMatch]:
        self._index = advance(self.matches, self._index, Direction.PREVIOUS)
        return self.active_match

    def activate(self, index: int) -> SearchMatch:
        """Делает активным совпадение по индексу (например, по клику)."""
        if not 0 <= index < self.total:
            raise IndexError(f"Нет совпадения с индексом {index} (всего {self.total})")
        self._index = index
        return self.matches[index]

    def reset(self) -> None:
        self._index = NO_MATCH

    def is_active(self, index: int) -> bool:
        return self._index != NO_MATCH and index == self._index

    @property
    def counter_text(self) -> str:
        """Счётчик вида 'Match 2 of 5'."""
        if not self.matches:
            return "No matches found"
        return f"Match {self._index + 1} of {self.total}"
