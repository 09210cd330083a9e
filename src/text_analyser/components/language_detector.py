"""
Компонент для определения языка текста (английский, французский, испанский).

Классификатор без состояния: упорядоченный список стадий, каждая
возвращает уверенный результат или None. Первая уверенная стадия
побеждает, при отсутствии уверенности срабатывает запасной вариант:

1. Частоты букв по исходному тексту
2. Характерные символы с диакритикой
3. Совпадения с частыми словами по очищенному тексту
4. UNDETERMINED с причиной

Пороговые значения подобраны эмпирически и считаются константами.
"""

import re
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from ..interfaces.text_processor import (
    DetectedLanguage,
    ForeignChar,
    Language,
    LanguageDetectorInterface,
)
from .frequency_analyzer import FrequencyAnalyzer
from .normalizer import TextNormalizer

logger = logging.getLogger(__name__)

ACCENT_CONFIDENCE = 10
SPANISH_UNIQUE_CHARS = frozenset('ñ')
FRENCH_HEAVY_CHARS = frozenset('çèêëàâùûÿ')

MIN_WORD_SCORE = 3
WORD_SCORE_MARGIN = 2
CORRUPTION_RATIO = 0.1

REASON_CORRUPTION = "possible file corruption or unsupported encoding"
REASON_INSUFFICIENT = "insufficient linguistic patterns"

# Порядок словаря задаёт порядок проверки при равных условиях
COMMON_WORDS: Dict[Language, Tuple[str, ...]] = {
    Language.ENGLISH: ('the', 'and', 'of', 'to', 'a', 'in', 'for', 'is', 'on', 'that'),
    Language.FRENCH: ('le', 'de', 'et', 'un', 'à', 'être', 'ce', 'il', 'que', 'ne'),
    Language.SPANISH: (
        'el', 'de', 'que', 'y', 'a', 'en', 'un', 'es', 'se', 'no',
        'te', 'lo', 'le', 'da', 'su', 'por', 'son', 'con', 'para', 'al',
    ),
}


@dataclass(frozen=True)
class DetectionInput:
    """Всё, что нужно стадиям: очищенный текст, частоты букв, символы с диакритикой."""
    cleaned_text: str
    letter_frequency: Mapping[str, float]
    foreign_chars: Tuple[ForeignChar, ...] = ()

    def letter(self, ch: str) -> float:
        return float(self.letter_frequency.get(ch, 0) or 0)

    def foreign_count(self, chars: frozenset) -> int:
        return sum(fc.count for fc in self.foreign_chars if fc.char.lower() in chars)


Stage = Callable[[DetectionInput], Optional[DetectedLanguage]]


def letter_frequency_stage(data: DetectionInput) -> Optional[DetectedLanguage]:
    """Сигнатуры частот букв; французская проверяется первой."""
    e, a, t = data.letter('e'), data.letter('a'), data.letter('t')
    o, r, s = data.letter('o'), data.letter('r'), data.letter('s')
    logger.debug(f"Частоты букв: E={e}% A={a}% T={t}% O={o}% R={r}% S={s}%")

    if e > 13.5 and 7 < a < 9.5 and r > 5.5:
        return DetectedLanguage(Language.FRENCH)
    if 11 < e < 14 and t > 8.5 and 7.5 < a < 9.5:
        return DetectedLanguage(Language.ENGLISH)
    if a > 10.5 and o > 7.5 and s > 6.5:
        return DetectedLanguage(Language.SPANISH)
    return None


def accented_characters_stage(data: DetectionInput) -> Optional[DetectedLanguage]:
    """ñ указывает на испанский, ç/è/ê/... на французский (от 10 вхождений)."""
    if not data.foreign_chars:
        return None
    spanish = data.foreign_count(SPANISH_UNIQUE_CHARS)
    if spanish >= ACCENT_CONFIDENCE:
        logger.debug(f"Найдено {spanish} символов ñ, испанский")
        return DetectedLanguage(Language.SPANISH)
    french = data.foreign_count(FRENCH_HEAVY_CHARS)
    if french >= ACCENT_CONFIDENCE:
        logger.debug(f"Найдено {french} французских символов, французский")
        return DetectedLanguage(Language.FRENCH)
    if spanish or french:
        logger.debug(f"Символов с диакритикой мало (es={spanish}, fr={french}), порог {ACCENT_CONFIDENCE}")
    return None


_WORD_PATTERNS: Dict[Language, Tuple['re.Pattern', ...]] = {
    language: tuple(re.compile(rf'\b{re.escape(word)}\b', re.ASCII) for word in words)
    for language, words in COMMON_WORDS.items()
}


def common_words_score(cleaned_text: str) -> Dict[Language, int]:
    """Сколько раз частые слова каждого языка встречаются целыми словами."""
    lower = (cleaned_text or '').lower()
    return {
        language: sum(len(pattern.findall(lower)) for pattern in patterns)
        for language, patterns in _WORD_PATTERNS.items()
    }


def common_words_stage(data: DetectionInput) -> Optional[DetectedLanguage]:
    """Победитель должен набрать от 3 очков и опередить остальных минимум на 2."""
    scores = common_words_score(data.cleaned_text)
    logger.debug("Очки по частым словам: " + ", ".join(f"{k.value}={v}" for k, v in scores.items()))
    best = max(scores.values())
    if best < MIN_WORD_SCORE:
        return None
    for language, score in scores.items():
        if score != best:
            continue
        others = [s for other, s in scores.items() if other is not language]
        if all(score >= s + WORD_SCORE_MARGIN for s in others):
            return DetectedLanguage(language)
    return None


DEFAULT_STAGES: Tuple[Stage, ...] = (
    letter_frequency_stage,
    accented_characters_stage,
    common_words_stage,
)


def fallback_verdict(data: DetectionInput) -> DetectedLanguage:
    """Неопределённый язык: подозрение на порчу файла или просто мало данных."""
    total_foreign = sum(fc.count for fc in data.foreign_chars)
    if total_foreign and total_foreign > len(data.cleaned_text) * CORRUPTION_RATIO:
        return DetectedLanguage(Language.UNDETERMINED, REASON_CORRUPTION)
    return DetectedLanguage(Language.UNDETERMINED, REASON_INSUFFICIENT)


class LanguageDetector(LanguageDetectorInterface):
    """Определение языка цепочкой стадий с ранним выходом."""

    def __init__(self, stages: Sequence[Stage] = DEFAULT_STAGES):
        self.stages: Tuple[Stage, ...] = tuple(stages)
        self._normalizer = TextNormalizer()
        self._frequencies = FrequencyAnalyzer()

    def detect(self, text: str) -> DetectedLanguage:
        """
        Определяет язык исходного текста.

        Частоты букв и символы с диакритикой считаются по исходному тексту,
        совпадения частых слов по очищенному.

        Args:
            text: Исходный текст

        Returns:
            DetectedLanguage
        """
        text = text or ""
        return self.detect_profile(
            cleaned_text=self._normalizer.clean(text),
            letter_frequency=self._frequencies.letter_frequency(text),
            foreign_chars=self._frequencies.foreign_characters(text),
        )

    def detect_profile(self,
                       cleaned_text: str,
                       letter_frequency: Mapping[str, float],
                       foreign_chars: Sequence[ForeignChar] = ()) -> DetectedLanguage:
        """Определяет язык по уже посчитанному профилю документа."""
        data = DetectionInput(
            cleaned_text=cleaned_text or "",
            letter_frequency=letter_frequency or {},
            foreign_chars=tuple(foreign_chars or ()),
        )
        for stage in self.stages:
            verdict = stage(data)
            if verdict is not None:
                logger.debug(f"Язык определён стадией {getattr(stage, '__name__', stage)}: {verdict.label}")
                return verdict
        verdict = fallback_verdict(data)
        logger.debug(f"Язык не определён: {verdict.reason}")
        return verdict


_default_detector = LanguageDetector()


def detect_language(text: str) -> DetectedLanguage:
    """Определяет язык детектором по умолчанию."""
    return _default_detector.detect(text)
