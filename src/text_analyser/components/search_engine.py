"""
Компонент для поиска по корпусу проанализированных документов.

Запрос разбивается на термы трёх типов (точный, по основе, с маской *).
Поиск идёт в два прохода: наличие совпадения определяется по очищенному
тексту, а позиции и контекст берутся из исходного текста тем же регулярным
выражением. Таблицы смещений между двумя представлениями нет.
"""

import re
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..interfaces.text_processor import (
    AnalysisRecord,
    QueryTerm,
    SearchEngineInterface,
    SearchMatch,
    SearchResult,
    TermKind,
)
from .stemmer import SuffixStemmer
from .stop_words import StopWordSets

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_WINDOW = 50
DEFAULT_MIN_TERM_LENGTH = 3

# Всё, кроме ASCII-символов слова и маски, из терма удаляется,
# как и в очищенном тексте
_TERM_STRIP = re.compile(r'[^\w*]', re.ASCII)
_FLAGS = re.IGNORECASE | re.ASCII


@dataclass(frozen=True)
class WordPosition:
    """Позиция слова в списке words документа."""
    doc_id: str
    doc_name: str
    position: int


class SearchEngine(SearchEngineInterface):
    """Поиск точных, стеммированных и wildcard-термов."""

    def __init__(self,
                 stemmer: Optional[SuffixStemmer] = None,
                 context_window: Optional[int] = None,
                 min_term_length: Optional[int] = None,
                 cfg=None,
                 stop_words: Optional[StopWordSets] = None):
        """
        Инициализирует поисковый движок.

        Args:
            stemmer: Стеммер для термов по основе
            context_window: Символов контекста с каждой стороны
            min_term_length: Минимальная длина токена запроса
            cfg: Экземпляр Config, из которого берутся незаданные значения
            stop_words: Стоп-слова; если заданы, такие токены запроса
                (кроме масок) отбрасываются. Язык запроса неизвестен,
                поэтому проверяются наборы всех языков
        """
        if cfg is None and (context_window is None or min_term_length is None):
            from ..config import config as cfg
        self.stemmer = stemmer or SuffixStemmer()
        self.stop_words = stop_words
        self.context_window = context_window if context_window is not None else cfg.get_context_window()
        self.min_term_length = min_term_length if min_term_length is not None else cfg.get_min_term_length()

    def expand_query(self, raw_query: str) -> List[QueryTerm]:
        """
        Разбирает строку запроса в список термов.

        Токены короче минимальной длины отбрасываются до очистки, пустые
        после очистки тоже. Повторы сохраняются.

        Args:
            raw_query: Строка запроса как её ввёл пользователь

        Returns:
            Список QueryTerm в порядке токенов запроса
        """
        terms: List[QueryTerm] = []
        for token in (raw_query or '').lower().split():
            if len(token) < self.min_term_length:
                continue
            token = _TERM_STRIP.sub('', token)
            if not token:
                continue
            if '*' in token:
                terms.append(QueryTerm(original=token, term=token, kind=TermKind.WILDCARD))
                continue
            if self._is_stop_word(token):
                continue
            terms.append(QueryTerm(original=token, term=token, kind=TermKind.EXACT))
            root = self.stemmer.stem(token)
            if root != token and len(root) > 2:
                terms.append(QueryTerm(original=token, term=root, kind=TermKind.STEMMED))
        logger.debug(f"Запрос '{raw_query}' -> {[(t.term, t.kind.value) for t in terms]}")
        return terms

    def compile_term(self, term: QueryTerm) -> 're.Pattern':
        """Регулярное выражение для терма с границами слова."""
        if term.kind is TermKind.WILDCARD:
            body = re.escape(term.term).replace(r'\*', r'\w*')
        elif term.kind is TermKind.STEMMED:
            # Саму форму запроса находит точный терм
            forms = [form for form in self.stemmer.inflections(term.term) if form != term.original]
            if not forms:
                return re.compile(r'(?!)')
            forms.sort(key=len, reverse=True)
            body = '(?:' + '|'.join(re.escape(form) for form in forms) + ')'
        else:
            body = re.escape(term.term)
        return re.compile(rf'\b{body}\b', _FLAGS)

    def find_matches(self, record: AnalysisRecord, terms: Sequence[QueryTerm]) -> Optional[Tuple[SearchMatch, ...]]:
        """
        Ищет термы в одном документе.

        Returns:
            None, если очищенный текст ничего не содержит; иначе кортеж
            совпадений в исходном тексте, отсортированный по позиции
            (может быть пустым)
        """
        detection_text = record.cleaned_text or record.original_content
        original = record.original_content
        found = False
        matches: List[SearchMatch] = []

        for term in terms:
            pattern = self.compile_term(term)
            if not any(m.group(0) for m in pattern.finditer(detection_text)):
                continue
            found = True
            for m in pattern.finditer(original):
                if not m.group(0):
                    continue
                matches.append(SearchMatch(
                    term=term.term,
                    position=m.start(),
                    matched_text=m.group(0),
                    context=self._context(original, m.start(), m.end()),
                    is_wildcard=term.kind is TermKind.WILDCARD,
                    kind=term.kind,
                    original_term=term.original,
                ))

        if not found:
            return None
        matches.sort(key=lambda match: match.position)
        return tuple(matches)

    def search(self, corpus: Sequence[AnalysisRecord], raw_query: str) -> List[SearchResult]:
        """
        Ищет запрос по корпусу.

        Args:
            corpus: Документы в порядке отображения
            raw_query: Строка запроса

        Returns:
            Документы с совпадениями в исходном порядке корпуса
        """
        terms = self.expand_query(raw_query)
        if not terms:
            return []
        results: List[SearchResult] = []
        for record in corpus:
            matches = self.find_matches(record, terms)
            if matches is None:
                continue
            if not matches:
                logger.debug(f"'{record.name}': совпадение только в очищенном тексте")
            results.append(SearchResult(record=record, matches=matches))
        logger.debug(f"Найдено документов: {len(results)} из {len(corpus)}")
        return results

    def _is_stop_word(self, token: str) -> bool:
        if self.stop_words is None:
            return False
        return any(token in words for words in self.stop_words.sets.values())

    def _context(self, text: str, start: int, end: int) -> str:
        return text[max(0, start - self.context_window):end + self.context_window]


def build_word_index(records: Iterable[AnalysisRecord]) -> Dict[str, List[WordPosition]]:
    """
    Индекс слово -> позиции по спискам words всех документов.

    Args:
        records: Документы корпуса

    Returns:
        Словарь в порядке первого появления слова
    """
    index: Dict[str, List[WordPosition]] = {}
    for record in records:
        for position, word in enumerate(record.words):
            index.setdefault(word, []).append(WordPosition(record.id, record.name, position))
    return index


def search(corpus: Sequence[AnalysisRecord], raw_query: str) -> List[SearchResult]:
    """Поиск с настройками из глобальной конфигурации."""
    return SearchEngine().search(corpus, raw_query)
