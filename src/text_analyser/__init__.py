"""
Text Analyser - модуль для лингвистического анализа текстовых документов

Этот модуль предоставляет инструменты для:
- Отсева бинарных и «мусорных» файлов
- Очистки текста и частотного анализа букв, символов и слов
- Определения языка (английский, французский, испанский)
- Поиска по корпусу: точного, по основе слова и по маске
- Навигации и подсветки найденных совпадений
- Экспорта отчётов в текст, JSON и Excel
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .exceptions import TextAnalyserError, InvalidInputError
from .interfaces.text_processor import (
    Language,
    DetectedLanguage,
    ForeignChar,
    RejectionKind,
    InputClassification,
    AnalysisRecord,
    TermKind,
    QueryTerm,
    SearchMatch,
    SearchResult,
)
from .components.normalizer import clean
from .components.garbage_detector import classify_input
from .components.stemmer import stem
from .components.language_detector import detect_language
from .components.search_engine import SearchEngine, search
from .components.navigator import Direction, MatchNavigator, advance
from .components.stop_words import StopWordSets
from .document_analyzer import DocumentAnalyzer, CorpusBuild, build_analysis_record, build_corpus

__all__ = [
    "TextAnalyserError",
    "InvalidInputError",
    "Language",
    "DetectedLanguage",
    "ForeignChar",
    "RejectionKind",
    "InputClassification",
    "AnalysisRecord",
    "TermKind",
    "QueryTerm",
    "SearchMatch",
    "SearchResult",
    "clean",
    "classify_input",
    "stem",
    "detect_language",
    "SearchEngine",
    "search",
    "Direction",
    "MatchNavigator",
    "advance",
    "StopWordSets",
    "DocumentAnalyzer",
    "CorpusBuild",
    "build_analysis_record",
    "build_corpus",
]
