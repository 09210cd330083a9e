"""
Тесты для построения записей анализа.
"""

import dataclasses

import pytest

from text_analyser import InvalidInputError, build_analysis_record, build_corpus
from text_analyser.components.stop_words import ENGLISH_STOP_WORDS
from text_analyser.interfaces.text_processor import Language, RejectionKind


class TestBuildAnalysisRecord:
    """Тесты для DocumentAnalyzer.build_analysis_record."""

    def test_cat_sentence(self, analyzer, sample_texts):
        """Короткое английское предложение."""
        record = analyzer.build_analysis_record("cat.txt", sample_texts["cat"])
        assert record.language.language is Language.ENGLISH
        assert record.words == ("cat", "sat", "mat")
        assert record.word_count == 3
        assert dict(record.word_frequency) == {"cat": 1, "sat": 1, "mat": 1}
        assert record.cleaned_text == "the cat sat on the mat"
        assert record.original_content == sample_texts["cat"]
        assert record.char_frequency["t"] == 5
        assert sum(record.letter_frequency.values()) == pytest.approx(100, abs=0.2)
        assert record.foreign_chars == ()

    def test_pdf_rejected(self, analyzer, sample_texts):
        """PDF отклоняется с причиной, упоминающей PDF."""
        with pytest.raises(InvalidInputError) as exc_info:
            analyzer.build_analysis_record("doc.pdf", sample_texts["pdf"])
        error = exc_info.value
        assert "PDF" in error.reason
        assert error.kind is RejectionKind.PDF
        assert str(error).startswith("Garbage file detected: ")

    def test_empty_rejected(self, analyzer):
        with pytest.raises(InvalidInputError) as exc_info:
            analyzer.build_analysis_record("empty.txt", "")
        assert exc_info.value.kind is RejectionKind.EMPTY

    def test_new_id_on_reanalysis(self, analyzer, sample_texts):
        """Повторный анализ даёт новую запись с новым id."""
        first = analyzer.build_analysis_record("cat.txt", sample_texts["cat"])
        second = analyzer.build_analysis_record("cat.txt", sample_texts["cat"])
        assert first.id != second.id
        assert first.id.startswith("doc_")
        assert first != second

    def test_record_is_immutable(self, analyzer, sample_texts):
        record = analyzer.build_analysis_record("cat.txt", sample_texts["cat"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "other"
        with pytest.raises(TypeError):
            record.word_frequency["cat"] = 10
        assert isinstance(record.words, tuple)

    def test_no_stop_words_in_words(self, analyzer):
        text = "This is the story of a man who went to the market and bought apples for his family."
        record = analyzer.build_analysis_record("story.txt", text)
        assert not set(record.words) & ENGLISH_STOP_WORDS
        assert all(len(word) > 1 for word in record.words)

    def test_undetermined_uses_english_stop_words(self, analyzer):
        record = analyzer.build_analysis_record("odd.txt", "xyzzy the plugh")
        assert record.language.language is Language.UNDETERMINED
        assert record.words == ("xyzzy", "plugh")

    def test_foreign_chars_from_original(self, analyzer):
        record = analyzer.build_analysis_record("es.txt", "El niño y la niña")
        assert [(fc.char, fc.count) for fc in record.foreign_chars] == [("ñ", 2)]
        assert "ñ" not in record.cleaned_text

    def test_derived_properties(self, analyzer):
        record = analyzer.build_analysis_record("dogs.txt", "dog dog bird")
        assert record.unique_word_count == 2
        assert record.top_words(1) == [("dog", 2)]
        assert record.average_word_length == pytest.approx(10 / 3)
        data = record.to_dict()
        assert data["words"] == ["dog", "dog", "bird"]
        assert data["language"] == record.language.label


class TestModuleFunctions:
    """Функции уровня пакета."""

    def test_build_analysis_record(self, sample_texts):
        record = build_analysis_record("cat.txt", sample_texts["cat"])
        assert record.name == "cat.txt"
        assert "cat" in record.words

    def test_build_corpus_collects_rejections(self, sample_texts):
        corpus = build_corpus([
            ("cat.txt", sample_texts["cat"]),
            ("doc.pdf", sample_texts["pdf"]),
            ("run.txt", sample_texts["running"]),
        ])
        assert [r.name for r in corpus.records] == ["cat.txt", "run.txt"]
        assert [name for name, _ in corpus.rejected] == ["doc.pdf"]
        assert "PDF" in corpus.rejected[0][1]

    def test_build_corpus_keeps_rejections_with_same_name(self, sample_texts):
        """Отказы по документам с одинаковым именем не теряются."""
        corpus = build_corpus([
            ("a.txt", ""),
            ("a.txt", sample_texts["pdf"]),
        ])
        assert corpus.records == ()
        assert len(corpus.rejected) == 2
        assert [name for name, _ in corpus.rejected] == ["a.txt", "a.txt"]
        assert "empty" in corpus.rejected[0][1].lower()
        assert "PDF" in corpus.rejected[1][1]
