"""
Абстрактные интерфейсы и типы данных для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
и неизменяемые записи, которыми они обмениваются.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


class Language(Enum):
    """Поддерживаемые языки."""
    ENGLISH = "English"
    FRENCH = "French"
    SPANISH = "Spanish"
    UNDETERMINED = "Undetermined"


@dataclass(frozen=True)
class DetectedLanguage:
    """Результат определения языка. Причина есть только у UNDETERMINED."""
    language: Language
    reason: Optional[str] = None

    @property
    def is_determined(self) -> bool:
        return self.language is not Language.UNDETERMINED

    @property
    def label(self) -> str:
        """Подпись для отображения пользователю."""
        if self.is_determined:
            return self.language.value
        return f"Language cannot be detected - {self.reason}"


@dataclass(frozen=True)
class ForeignChar:
    """Символ с диакритикой, найденный в исходном тексте."""
    char: str
    count: int
    description: str


class RejectionKind(Enum):
    """Причины отклонения входного текста."""
    PDF = "pdf"
    BINARY = "binary"
    EMPTY = "empty"
    NULL_BYTES = "null_bytes"
    NON_PRINTABLE = "non_printable"
    NO_TOKENS = "no_tokens"
    LOW_VALID_RATIO = "low_valid_ratio"


@dataclass(frozen=True)
class InputClassification:
    """Результат проверки входа на «мусор»."""
    accept: bool
    reason: str = ""
    kind: Optional[RejectionKind] = None


@dataclass(frozen=True, eq=False)
class AnalysisRecord:
    """Неизменяемый результат анализа одного документа. Сравнение по идентичности."""
    id: str
    name: str
    original_content: str
    cleaned_text: str
    language: DetectedLanguage
    words: Tuple[str, ...]
    word_frequency: Mapping[str, int]
    letter_frequency: Mapping[str, float]
    char_frequency: Mapping[str, int]
    foreign_chars: Tuple[ForeignChar, ...]
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        # Словари оборачиваем в read-only представление, списки в кортежи
        object.__setattr__(self, 'words', tuple(self.words))
        object.__setattr__(self, 'foreign_chars', tuple(self.foreign_chars))
        for name in ('word_frequency', 'letter_frequency', 'char_frequency'):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def unique_word_count(self) -> int:
        return len(self.word_frequency)

    @property
    def average_word_length(self) -> float:
        if not self.words:
            return 0.0
        return sum(len(w) for w in self.words) / len(self.words)

    def top_words(self, n: int = 10) -> List[Tuple[str, int]]:
        """Самые частые слова: по убыванию частоты, затем по алфавиту."""
        ordered = sorted(self.word_frequency.items(), key=lambda x: (-x[1], x[0]))
        return ordered[:n]

    def to_dict(self) -> Dict[str, Any]:
        """Обычный словарь (для JSON-экспорта)."""
        return {
            'id': self.id,
            'name': self.name,
            'created_at': self.created_at.isoformat(),
            'language': self.language.label,
            'word_count': self.word_count,
            'unique_word_count': self.unique_word_count,
            'original_content': self.original_content,
            'cleaned_text': self.cleaned_text,
            'words': list(self.words),
            'word_frequency': dict(self.word_frequency),
            'letter_frequency': dict(self.letter_frequency),
            'char_frequency': dict(self.char_frequency),
            'foreign_chars': [
                {'char': fc.char, 'count': fc.count, 'description': fc.description}
                for fc in self.foreign_chars
            ],
        }


class TermKind(Enum):
    """Тип поискового терма."""
    EXACT = "exact"
    STEMMED = "stemmed"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class QueryTerm:
    """Терм запроса после разбора и расширения."""
    original: str
    term: str
    kind: TermKind


@dataclass(frozen=True)
class SearchMatch:
    """Одно вхождение терма; позиция в original_content."""
    term: str
    position: int
    matched_text: str
    context: str
    is_wildcard: bool
    kind: TermKind = TermKind.EXACT
    original_term: str = ""

    @property
    def end(self) -> int:
        return self.position + len(self.matched_text)


@dataclass(frozen=True)
class SearchResult:
    """Документ, в котором найдено хотя бы одно вхождение."""
    record: AnalysisRecord
    matches: Tuple[SearchMatch, ...]

    @property
    def matched_words(self) -> List[str]:
        """Уникальные найденные слова в порядке первого появления."""
        seen: Dict[str, None] = {}
        for match in self.matches:
            seen.setdefault(match.matched_text, None)
        return list(seen)


class TextNormalizerInterface(ABC):
    """Интерфейс для очистки текста."""

    @abstractmethod
    def clean(self, text: str) -> str:
        """Возвращает очищенную проекцию текста."""
        pass


class InputClassifierInterface(ABC):
    """Интерфейс для проверки входа на «мусор»."""

    @abstractmethod
    def classify(self, text: str) -> InputClassification:
        """Принимает или отклоняет текст."""
        pass


class StemmerInterface(ABC):
    """Интерфейс для стемминга."""

    @abstractmethod
    def stem(self, word: str) -> str:
        """Приводит слово к основе."""
        pass

    @abstractmethod
    def stem_words(self, words: Sequence[str]) -> List[str]:
        """Приводит список слов к основам."""
        pass


class LanguageDetectorInterface(ABC):
    """Интерфейс для определения языка."""

    @abstractmethod
    def detect(self, text: str) -> DetectedLanguage:
        """Определяет язык исходного текста."""
        pass


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, cleaned_text: str, language: Language = Language.ENGLISH) -> List[str]:
        """Разбивает очищенный текст на токены без стоп-слов."""
        pass

    @abstractmethod
    def is_valid_token(self, token: str, language: Language = Language.ENGLISH) -> bool:
        """Проверяет валидность токена."""
        pass


class SearchEngineInterface(ABC):
    """Интерфейс поиска по корпусу."""

    @abstractmethod
    def search(self, corpus: Sequence[AnalysisRecord], raw_query: str) -> List[SearchResult]:
        """Ищет запрос по корпусу документов."""
        pass
