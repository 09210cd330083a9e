"""
Построение записей анализа документов.

DocumentAnalyzer связывает компоненты в конвейер:
проверка на «мусор» -> частоты по исходному тексту -> очистка ->
определение языка -> токенизация -> частоты слов и символов.
"""

import time
import uuid
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .components.frequency_analyzer import FrequencyAnalyzer
from .components.garbage_detector import GarbageDetector
from .components.language_detector import LanguageDetector
from .components.normalizer import TextNormalizer
from .components.stop_words import StopWordSets
from .components.tokenizer import TokenProcessor
from .exceptions import InvalidInputError
from .interfaces.text_processor import AnalysisRecord

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    """Идентификатор вида doc_<мс с эпохи>_<uuid4>."""
    return f"doc_{int(time.time() * 1000)}_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class CorpusBuild:
    """Результат пакетной обработки: принятые записи и пары (имя, причина) отказов.

    Имена документов не уникальны, поэтому отказы хранятся списком во
    входном порядке.
    """
    records: Tuple[AnalysisRecord, ...]
    rejected: Tuple[Tuple[str, str], ...]


class DocumentAnalyzer:
    """Конвейер построения AnalysisRecord."""

    def __init__(self,
                 stop_words: Optional[StopWordSets] = None,
                 detector: Optional[LanguageDetector] = None):
        """
        Args:
            stop_words: Наборы стоп-слов (по умолчанию встроенные + из конфигурации)
            detector: Детектор языка
        """
        self.stop_words = stop_words or StopWordSets.from_config()
        self.classifier = GarbageDetector()
        self.normalizer = TextNormalizer()
        self.frequencies = FrequencyAnalyzer()
        self.detector = detector or LanguageDetector()
        self.tokenizer = TokenProcessor(self.stop_words)

    def build_analysis_record(self, name: str, text: str) -> AnalysisRecord:
        """
        Анализирует один документ.

        Args:
            name: Отображаемое имя документа
            text: Исходный текст

        Returns:
            Неизменяемая запись анализа с новым id

        Raises:
            InvalidInputError: если текст отклонён проверкой на «мусор»
        """
        text = text if text is not None else ""
        verdict = self.classifier.classify(text)
        if not verdict.accept:
            logger.warning(f"Документ '{name}' отклонён: {verdict.reason}")
            raise InvalidInputError(verdict.reason, verdict.kind)

        foreign_chars = self.frequencies.foreign_characters(text)
        letter_frequency = self.frequencies.letter_frequency(text)
        cleaned = self.normalizer.clean(text)
        language = self.detector.detect_profile(cleaned, letter_frequency, foreign_chars)
        words = self.tokenizer.tokenize(cleaned, language.language)

        record = AnalysisRecord(
            id=new_record_id(),
            name=name,
            original_content=text,
            cleaned_text=cleaned,
            language=language,
            words=words,
            word_frequency=self.frequencies.word_frequency(words),
            letter_frequency=letter_frequency,
            char_frequency=self.frequencies.char_frequency(cleaned),
            foreign_chars=foreign_chars,
        )
        logger.info(
            f"📄 {name}: язык {language.label}, слов {record.word_count}, "
            f"уникальных {record.unique_word_count}"
        )
        return record

    def build_corpus(self, documents: Iterable[Tuple[str, str]]) -> CorpusBuild:
        """
        Анализирует набор документов, не прерываясь на отклонённых.

        Args:
            documents: Пары (имя, текст)

        Returns:
            CorpusBuild с записями в исходном порядке
        """
        records = []
        rejected: List[Tuple[str, str]] = []
        for name, text in documents:
            try:
                records.append(self.build_analysis_record(name, text))
            except InvalidInputError as e:
                rejected.append((name, e.reason))
        logger.info(f"Корпус: принято {len(records)}, отклонено {len(rejected)}")
        return CorpusBuild(records=tuple(records), rejected=tuple(rejected))


_default_analyzer = DocumentAnalyzer()


def build_analysis_record(name: str, text: str) -> AnalysisRecord:
    """Анализ документа анализатором по умолчанию."""
    return _default_analyzer.build_analysis_record(name, text)


def build_corpus(documents: Iterable[Tuple[str, str]]) -> CorpusBuild:
    return _default_analyzer.build_corpus(documents)
