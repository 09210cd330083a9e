"""
Компонент для распознавания «мусорных» файлов.

Проверяет исходный текст до очистки: бинарные сигнатуры, пустоту,
плотность нулевых и непечатаемых символов, долю похожих на слова токенов.
Порядок правил фиксирован: сигнатуры проверяются раньше плотностей.
"""

import re
import logging
from typing import Tuple

from ..interfaces.text_processor import (
    InputClassification,
    InputClassifierInterface,
    RejectionKind,
)

logger = logging.getLogger(__name__)

PDF_SIGNATURES: Tuple[str, ...] = ('%PDF', '%%EOF')

BINARY_SIGNATURES: Tuple[str, ...] = (
    'PK\x03\x04',        # ZIP
    '\x89PNG',           # PNG
    '\xFF\xD8\xFF',      # JPEG
    'GIF8',              # GIF
    '\x00\x00\x01\x00',  # ICO
    'RIFF',              # WAV
    '\x1f\x8b\x08',      # GZIP
)

NULL_BYTE_RATIO = 0.01
NON_PRINTABLE_RATIO = 0.05
WORD_SAMPLE_SIZE = 100
MIN_VALID_WORD_RATIO = 0.3
LETTER_SHARE = 0.7
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 49

# Печатаемые управляющие символы: таб, перевод строки, возврат каретки
_ALLOWED_CONTROL = {9, 10, 13}
_LETTER = re.compile(r'[a-zA-ZÀ-ÿ]')

REASONS = {
    RejectionKind.PDF: (
        'This appears to be a PDF file. PDF files cannot be directly converted to .txt format. '
        'Please use a proper PDF-to-text converter or save the content as plain text.'
    ),
    RejectionKind.BINARY: (
        'This appears to be a binary file (image, archive, etc.) disguised as text. '
        'Binary files cannot be processed as text documents.'
    ),
    RejectionKind.EMPTY: 'The file appears to be empty.',
    RejectionKind.NULL_BYTES: (
        'This file contains null bytes and appears to be binary data. '
        'Please ensure you are uploading a plain text (.txt) file.'
    ),
    RejectionKind.NON_PRINTABLE: (
        'This file contains excessive non-printable characters and may be corrupted '
        'or in an unsupported format.'
    ),
    RejectionKind.NO_TOKENS: 'The file does not contain recognizable words or text.',
    RejectionKind.LOW_VALID_RATIO: (
        'The file does not contain enough recognizable words. It may be corrupted, '
        'encoded incorrectly, or not a text document.'
    ),
}


class GarbageDetector(InputClassifierInterface):
    """Классификатор входа: принять или отклонить с причиной."""

    def classify(self, text: str) -> InputClassification:
        """
        Проверяет текст по правилам в фиксированном порядке.

        Args:
            text: Исходный текст (до очистки)

        Returns:
            InputClassification: accept=True, если ни одно правило не сработало
        """
        text = text or ""

        if any(signature in text for signature in PDF_SIGNATURES):
            return self._reject(RejectionKind.PDF)
        if any(signature in text for signature in BINARY_SIGNATURES):
            return self._reject(RejectionKind.BINARY)

        total = len(text)
        if total == 0:
            return self._reject(RejectionKind.EMPTY)

        null_count, non_printable_count = self._count_control_chars(text)
        if null_count > total * NULL_BYTE_RATIO:
            return self._reject(RejectionKind.NULL_BYTES)
        if non_printable_count > total * NON_PRINTABLE_RATIO:
            return self._reject(RejectionKind.NON_PRINTABLE)

        tokens = text.split()
        if not tokens:
            return self._reject(RejectionKind.NO_TOKENS)

        sample = tokens[:WORD_SAMPLE_SIZE]
        valid = sum(1 for token in sample if self.is_plausible_word(token))
        if valid < len(sample) * MIN_VALID_WORD_RATIO:
            logger.debug(f"Похожих на слова токенов: {valid} из {len(sample)}")
            return self._reject(RejectionKind.LOW_VALID_RATIO)

        return InputClassification(accept=True)

    @staticmethod
    def is_plausible_word(token: str) -> bool:
        """Токен похож на слово: >70% букв и длина от 2 до 49."""
        if not MIN_WORD_LENGTH <= len(token) <= MAX_WORD_LENGTH:
            return False
        letters = len(_LETTER.findall(token))
        return letters > len(token) * LETTER_SHARE

    @staticmethod
    def _count_control_chars(text: str) -> Tuple[int, int]:
        null_count = 0
        non_printable = 0
        for ch in text:
            code = ord(ch)
            if code == 0:
                null_count += 1
            if code < 32 and code not in _ALLOWED_CONTROL:
                non_printable += 1
        return null_count, non_printable

    @staticmethod
    def _reject(kind: RejectionKind) -> InputClassification:
        logger.debug(f"Вход отклонён: {kind.value}")
        return InputClassification(accept=False, reason=REASONS[kind], kind=kind)


_default_detector = GarbageDetector()


def classify_input(text: str) -> InputClassification:
    """Проверяет текст детектором по умолчанию."""
    return _default_detector.classify(text)
