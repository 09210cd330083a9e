"""
Инструменты интерактивного анализа произвольного текста.

Чистые функции: статистика, подсчёт символов и слов, замена слов и
символов, подсказки по префиксу и удаление пользовательских стоп-слов.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple, Union

MAX_CUSTOM_STOP_WORDS = 10

_PUNCTUATION = re.compile(r'[^\w\s]', re.ASCII)
_NON_WORD = re.compile(r'[^\w]', re.ASCII)


@dataclass(frozen=True)
class TextStatistics:
    """Базовая статистика текста."""
    total_chars: int
    total_words: int
    chars_found: int


@dataclass(frozen=True)
class CharacterCount:
    """Вхождения символа и его доля среди всех символов текста."""
    char: str
    count: int
    percentage: float

    @property
    def display_char(self) -> str:
        return '(space)' if self.char == ' ' else self.char


@dataclass(frozen=True)
class StopWordRemoval:
    """Отчёт об удалении стоп-слов."""
    stop_words: Tuple[str, ...]
    removed: Dict[str, int]
    original_count: int
    final_count: int
    filtered_text: str

    @property
    def total_removed(self) -> int:
        return sum(self.removed.values())

    @property
    def removed_percentage(self) -> float:
        if not self.original_count:
            return 0.0
        return round(self.total_removed / self.original_count * 100, 1)


def _char_pattern(char: str) -> 're.Pattern':
    return re.compile(re.escape(char), re.IGNORECASE)


def _words(text: str) -> List[str]:
    return _PUNCTUATION.sub(' ', (text or '').lower()).split()


def _sorted_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def text_statistics(text: str, chars: str = '') -> TextStatistics:
    """
    Число символов, слов и вхождений символов из chars (без учёта регистра).

    Каждый символ chars считается отдельно, повторы в chars учитываются повторно.
    """
    text = text or ''
    found = sum(len(_char_pattern(ch).findall(text)) for ch in (chars or ''))
    return TextStatistics(
        total_chars=len(text),
        total_words=len(text.split()),
        chars_found=found,
    )


def character_counts(text: str, chars: str) -> List[CharacterCount]:
    """Количество и процент каждого символа из chars в порядке первого появления."""
    text = text or ''
    total = len(text)
    counts: Dict[str, int] = {}
    for ch in chars or '':
        counts[ch] = len(_char_pattern(ch).findall(text))
    return [
        CharacterCount(ch, count, round(count / total * 100, 2) if total else 0.0)
        for ch, count in counts.items()
    ]


def word_counts(text: str) -> List[Tuple[str, int]]:
    """Частоты слов (пунктуация -> пробел): по убыванию, затем по алфавиту."""
    return _sorted_counts(Counter(_words(text)))


def _whole_word(word: str) -> 're.Pattern':
    return re.compile(rf'\b{re.escape(word)}\b', re.IGNORECASE | re.ASCII)


def count_word(text: str, word: str) -> int:
    """Вхождения слова целиком без учёта регистра."""
    word = (word or '').strip()
    if not word or not text:
        return 0
    return len(_whole_word(word).findall(text))


def replace_word(text: str, word: str, replacement: str) -> Tuple[str, int]:
    """
    Заменяет слово целиком без учёта регистра.

    Returns:
        Пара (новый текст, число замен)

    Raises:
        ValueError: если слово пустое
    """
    word = (word or '').strip()
    if not word:
        raise ValueError("Не задано слово для замены")
    return _whole_word(word).subn(lambda _: replacement, text or '')


def replace_characters(text: str, chars: str, replacement: str) -> str:
    """Заменяет каждый символ из chars (без учёта регистра) на replacement."""
    result = text or ''
    for ch in chars or '':
        result = _char_pattern(ch).sub(lambda _: replacement, result)
    return result


def suggest_words(text: str, prefix: str, limit: int = 10) -> List[Tuple[str, int]]:
    """Слова текста, начинающиеся с prefix, по частоте (не более limit)."""
    prefix = (prefix or '').strip().lower()
    if not prefix or not text:
        return []
    counts = Counter(w for w in _words(text) if w.startswith(prefix))
    return _sorted_counts(counts)[:limit]


def parse_stop_words(raw: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Список стоп-слов через запятую: нижний регистр, не более десяти."""
    items = raw.split(',') if isinstance(raw, str) else list(raw or ())
    words = [w.strip().lower() for w in items]
    return tuple(w for w in words if w)[:MAX_CUSTOM_STOP_WORDS]


def remove_stop_words(text: str, stop_words: Union[str, Iterable[str]]) -> StopWordRemoval:
    """
    Удаляет пользовательские стоп-слова из текста.

    Слово сравнивается без регистра и пунктуации; оставшиеся слова
    склеиваются через пробел.

    Raises:
        ValueError: если после разбора не осталось ни одного стоп-слова
    """
    parsed = parse_stop_words(stop_words)
    if not parsed:
        raise ValueError("Не заданы стоп-слова")
    lookup = set(parsed)
    tokens = (text or '').split()
    removed: Counter = Counter()
    kept: List[str] = []
    for token in tokens:
        bare = _NON_WORD.sub('', token.lower())
        if bare in lookup:
            removed[bare] += 1
        else:
            kept.append(token)
    return StopWordRemoval(
        stop_words=parsed,
        removed=dict(sorted(removed.items(), key=lambda item: -item[1])),
        original_count=len(tokens),
        final_count=len(kept),
        filtered_text=' '.join(kept),
    )
