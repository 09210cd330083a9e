"""
Интерфейсы и типы данных для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
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
    TextNormalizerInterface,
    InputClassifierInterface,
    StemmerInterface,
    LanguageDetectorInterface,
    TokenProcessorInterface,
    SearchEngineInterface,
)

__all__ = [
    'Language',
    'DetectedLanguage',
    'ForeignChar',
    'RejectionKind',
    'InputClassification',
    'AnalysisRecord',
    'TermKind',
    'QueryTerm',
    'SearchMatch',
    'SearchResult',
    'TextNormalizerInterface',
    'InputClassifierInterface',
    'StemmerInterface',
    'LanguageDetectorInterface',
    'TokenProcessorInterface',
    'SearchEngineInterface',
]
