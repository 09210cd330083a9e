"""
Тесты для определения языка.
"""

import pytest

from text_analyser.components.language_detector import (
    DetectionInput,
    LanguageDetector,
    REASON_CORRUPTION,
    REASON_INSUFFICIENT,
    accented_characters_stage,
    common_words_score,
    common_words_stage,
    detect_language,
    fallback_verdict,
    letter_frequency_stage,
)
from text_analyser.interfaces.text_processor import DetectedLanguage, ForeignChar, Language


def profile(cleaned_text="", foreign=(), **letters):
    """Синтетический профиль документа."""
    return DetectionInput(
        cleaned_text=cleaned_text,
        letter_frequency=letters,
        foreign_chars=tuple(ForeignChar(ch, count, "") for ch, count in foreign),
    )


class TestLetterFrequencyStage:
    """Стадия частот букв."""

    def test_french_signature(self):
        assert letter_frequency_stage(profile(e=14.0, a=8.0, r=6.0)).language is Language.FRENCH

    def test_english_signature(self):
        assert letter_frequency_stage(profile(e=12.5, t=9.0, a=8.0)).language is Language.ENGLISH

    def test_spanish_signature(self):
        result = letter_frequency_stage(profile(e=13.0, a=12.0, o=8.0, s=7.0))
        assert result.language is Language.SPANISH

    def test_french_checked_before_english(self):
        """Профиль, подходящий под оба языка, считается французским."""
        result = letter_frequency_stage(profile(e=13.8, t=9.0, a=8.0, r=6.0))
        assert result.language is Language.FRENCH

    def test_inconclusive(self):
        """Без подходящих частот стадия не уверена."""
        assert letter_frequency_stage(profile()) is None


class TestAccentedCharactersStage:
    """Стадия символов с диакритикой."""

    def test_ten_enye_is_spanish(self):
        assert accented_characters_stage(profile(foreign=[("ñ", 10)])).language is Language.SPANISH

    def test_uppercase_enye_counts(self):
        assert accented_characters_stage(profile(foreign=[("Ñ", 6), ("ñ", 4)])).language is Language.SPANISH

    def test_french_characters_summed(self):
        result = accented_characters_stage(profile(foreign=[("ç", 4), ("è", 6)]))
        assert result.language is Language.FRENCH

    def test_below_threshold(self):
        assert accented_characters_stage(profile(foreign=[("ñ", 9), ("é", 30)])) is None
        assert accented_characters_stage(profile()) is None


class TestCommonWordsStage:
    """Стадия частых слов."""

    def test_english_words(self):
        result = common_words_stage(profile("the and of the cat"))
        assert result.language is Language.ENGLISH

    def test_spanish_words(self):
        result = common_words_stage(profile("el de que y en un es se no"))
        assert result.language is Language.SPANISH

    def test_requires_margin(self):
        """Французский и испанский делят слова de/que/un: победителя нет."""
        assert common_words_stage(profile("de que un")) is None

    def test_requires_minimum_score(self):
        assert common_words_stage(profile("the cat")) is None

    def test_whole_words_only(self):
        """Слова считаются только целиком."""
        scores = common_words_score("theory android often")
        assert scores[Language.ENGLISH] == 0


class TestFallback:
    """Запасной вердикт."""

    def test_corruption_suspected(self):
        verdict = fallback_verdict(profile("abc", foreign=[("é", 5)]))
        assert verdict.language is Language.UNDETERMINED
        assert verdict.reason == REASON_CORRUPTION

    def test_insufficient_patterns(self):
        verdict = fallback_verdict(profile("x" * 100, foreign=[("é", 5)]))
        assert verdict.reason == REASON_INSUFFICIENT

    def test_label(self):
        verdict = DetectedLanguage(Language.UNDETERMINED, REASON_INSUFFICIENT)
        assert verdict.label == "Language cannot be detected - insufficient linguistic patterns"
        assert DetectedLanguage(Language.FRENCH).label == "French"


class TestLanguageDetector:
    """Тесты для LanguageDetector."""

    def test_cat_sentence_is_english(self, sample_texts):
        """Частоты букв не решают, решают частые слова."""
        assert detect_language(sample_texts["cat"]).language is Language.ENGLISH

    def test_twenty_enye_is_spanish(self):
        assert detect_language("ñ" * 20).language is Language.SPANISH

    def test_empty_text_is_undetermined(self):
        verdict = detect_language("")
        assert verdict.language is Language.UNDETERMINED
        assert verdict.reason == REASON_INSUFFICIENT

    def test_first_confident_stage_wins(self):
        """Стадии после уверенной не вызываются."""
        calls = []

        def first(data):
            calls.append("first")
            return DetectedLanguage(Language.FRENCH)

        def second(data):
            calls.append("second")
            return DetectedLanguage(Language.SPANISH)

        detector = LanguageDetector(stages=[first, second])
        assert detector.detect("anything").language is Language.FRENCH
        assert calls == ["first"]

    def test_no_stages_falls_back(self):
        detector = LanguageDetector(stages=[])
        assert detector.detect("the and of").language is Language.UNDETERMINED

    def test_detect_profile(self):
        """Определение по уже посчитанному профилю."""
        detector = LanguageDetector()
        verdict = detector.detect_profile("", {"e": 14.0, "a": 8.0, "r": 6.0}, [])
        assert verdict.language is Language.FRENCH

    @pytest.mark.quality
    def test_french_accents_detected(self):
        """Французский текст с большим числом символов с диакритикой."""
        text = "ça è ê à â ç è ê à â ç è " * 2
        assert detect_language(text).language is Language.FRENCH
