"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TextNormalizer - очистка текста
- GarbageDetector - отсев бинарных и «мусорных» файлов
- SuffixStemmer - стемминг по таблице суффиксов
- FrequencyAnalyzer - частоты букв, символов и слов
- StopWordSets - стоп-слова по языкам
- LanguageDetector - определение языка
- TokenProcessor - токенизация текста
- SearchEngine - поиск по корпусу
- MatchNavigator - навигация по совпадениям
- ResultExporter - экспорт результатов
"""

from .normalizer import TextNormalizer, clean
from .garbage_detector import GarbageDetector, classify_input
from .stemmer import SuffixRule, SuffixStemmer, StemIndex, stem, stem_words, inflections, build_stem_index
from .frequency_analyzer import FrequencyAnalyzer
from .stop_words import StopWordSets
from .language_detector import LanguageDetector, detect_language
from .tokenizer import TokenProcessor
from .search_engine import SearchEngine, WordPosition, build_word_index, search
from .navigator import Direction, MatchNavigator, advance
from .highlighter import highlight_spans, highlight_text, highlight_words, match_summary
from .exporter import ResultExporter

__all__ = [
    'TextNormalizer',
    'clean',
    'GarbageDetector',
    'classify_input',
    'SuffixRule',
    'SuffixStemmer',
    'StemIndex',
    'stem',
    'stem_words',
    'inflections',
    'build_stem_index',
    'FrequencyAnalyzer',
    'StopWordSets',
    'LanguageDetector',
    'detect_language',
    'TokenProcessor',
    'SearchEngine',
    'WordPosition',
    'build_word_index',
    'search',
    'Direction',
    'MatchNavigator',
    'advance',
    'highlight_spans',
    'highlight_text',
    'highlight_words',
    'match_summary',
    'ResultExporter',
]
