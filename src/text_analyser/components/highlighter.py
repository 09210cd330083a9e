"""
Подсветка найденных совпадений в исходном тексте.

Вместо HTML используются простые текстовые маркеры (по умолчанию [[ и ]]).
"""

import re
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..interfaces.text_processor import SearchMatch

Span = Tuple[int, int]


def highlight_spans(matches: Iterable[SearchMatch]) -> List[Span]:
    """
    Отрезки для подсветки: отсортированы, пересекающиеся объединены.

    Args:
        matches: Совпадения (позиции в исходном тексте)

    Returns:
        Список пар (start, end)
    """
    spans = sorted((m.position, m.end) for m in matches if m.matched_text)
    merged: List[Span] = []
    for start, end in spans:
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def _markers(open_marker: Optional[str], close_marker: Optional[str]) -> Tuple[str, str]:
    if open_marker is None or close_marker is None:
        from ..config import config
        default_open, default_close = config.get_highlight_markers()
        open_marker = default_open if open_marker is None else open_marker
        close_marker = default_close if close_marker is None else close_marker
    return open_marker, close_marker


def _wrap(text: str, spans: Sequence[Span], open_marker: str, close_marker: str) -> str:
    parts: List[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(f"{open_marker}{text[start:end]}{close_marker}")
        cursor = end
    parts.append(text[cursor:])
    return ''.join(parts)


def highlight_text(text: str,
                   matches: Iterable[SearchMatch],
                   open_marker: Optional[str] = None,
                   close_marker: Optional[str] = None) -> str:
    """Оборачивает совпадения маркерами."""
    open_marker, close_marker = _markers(open_marker, close_marker)
    return _wrap(text, highlight_spans(matches), open_marker, close_marker)


def highlight_words(text: str,
                    words: Iterable[str],
                    open_marker: Optional[str] = None,
                    close_marker: Optional[str] = None) -> str:
    """
    Подсвечивает все вхождения найденных слов целиком, без учёта регистра.

    Args:
        text: Исходный текст
        words: Фактически найденные слова (SearchResult.matched_words)
    """
    unique = sorted({w for w in words if w}, key=len, reverse=True)
    if not unique:
        return text
    open_marker, close_marker = _markers(open_marker, close_marker)
    pattern = re.compile(
        r'\b(?:' + '|'.join(re.escape(w) for w in unique) + r')\b',
        re.IGNORECASE | re.ASCII,
    )
    spans = [(m.start(), m.end()) for m in pattern.finditer(text)]
    return _wrap(text, spans, open_marker, close_marker)


def match_summary(matches: Iterable[SearchMatch]) -> Dict[str, int]:
    """Количество совпадений по каждому поисковому терму в порядке появления."""
    return dict(Counter(m.term for m in matches))
