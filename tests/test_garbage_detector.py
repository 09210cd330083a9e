"""
Тесты для распознавания «мусорных» файлов.
"""

from text_analyser.components.garbage_detector import GarbageDetector, REASONS, classify_input
from text_analyser.interfaces.text_processor import RejectionKind


class TestGarbageDetector:
    """Тесты для GarbageDetector."""

    def test_accepts_plain_text(self, sample_texts):
        """Обычный текст принимается с пустой причиной."""
        verdict = classify_input(sample_texts["cat"])
        assert verdict.accept is True
        assert verdict.reason == ""
        assert verdict.kind is None

    def test_rejects_pdf(self, sample_texts):
        """Сигнатура PDF распознаётся первой."""
        verdict = classify_input(sample_texts["pdf"])
        assert verdict.accept is False
        assert verdict.kind is RejectionKind.PDF
        assert "PDF" in verdict.reason

    def test_rejects_pdf_trailer(self):
        """Хвост %%EOF тоже считается PDF."""
        verdict = classify_input("some words here\n%%EOF")
        assert verdict.kind is RejectionKind.PDF

    def test_rejects_binary_signatures(self):
        """ZIP, PNG и GZIP отклоняются как бинарные."""
        for header in ("PK\x03\x04rest", "\x89PNG\r\n", "\x1f\x8b\x08data"):
            verdict = classify_input(header + " some words follow here")
            assert verdict.accept is False
            assert verdict.kind is RejectionKind.BINARY

    def test_signatures_checked_before_emptiness(self):
        """PDF-сигнатура важнее прочих правил."""
        verdict = classify_input("%PDF\x00\x00\x00\x00")
        assert verdict.kind is RejectionKind.PDF

    def test_rejects_empty(self):
        """Пустой текст отклоняется."""
        assert classify_input("").kind is RejectionKind.EMPTY
        assert classify_input(None).kind is RejectionKind.EMPTY

    def test_rejects_null_bytes(self, sample_texts):
        """Больше 1% нулевых байтов."""
        verdict = classify_input(sample_texts["null_bytes"])
        assert verdict.kind is RejectionKind.NULL_BYTES

    def test_rejects_non_printable(self):
        """Больше 5% управляющих символов (кроме таба и переводов строки)."""
        text = "normal words here " + "\x07" * 5
        verdict = classify_input(text)
        assert verdict.kind is RejectionKind.NON_PRINTABLE

    def test_tabs_and_newlines_are_allowed(self):
        """Таб, LF и CR не считаются непечатаемыми."""
        verdict = classify_input("first line\r\n\tsecond line\nthird line")
        assert verdict.accept is True

    def test_rejects_whitespace_only(self):
        """Текст из одних пробелов не содержит токенов."""
        verdict = classify_input("   \n\t  ")
        assert verdict.kind is RejectionKind.NO_TOKENS

    def test_rejects_low_valid_ratio(self, sample_texts):
        """Меньше 30% токенов похожи на слова."""
        verdict = classify_input(sample_texts["numbers"])
        assert verdict.kind is RejectionKind.LOW_VALID_RATIO

    def test_valid_ratio_uses_first_hundred_tokens(self):
        """Учитываются только первые 100 токенов."""
        text = " ".join(["word"] * 100 + ["1234"] * 500)
        assert classify_input(text).accept is True

    def test_is_plausible_word(self):
        """Слово: больше 70% букв и длина от 2 до 49."""
        assert GarbageDetector.is_plausible_word("hello")
        assert GarbageDetector.is_plausible_word("año")
        assert GarbageDetector.is_plausible_word("end.")
        assert not GarbageDetector.is_plausible_word("a")
        assert not GarbageDetector.is_plausible_word("ab12")
        assert not GarbageDetector.is_plausible_word("x" * 50)

    def test_reasons_are_distinct(self):
        """У каждого вида отказа своя формулировка."""
        assert len(set(REASONS.values())) == len(RejectionKind)
