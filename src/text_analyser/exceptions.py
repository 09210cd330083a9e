"""
Исключения пакета text_analyser.
"""

from typing import Optional

from .interfaces.text_processor import RejectionKind


class TextAnalyserError(Exception):
    """Базовое исключение пакета."""


class InvalidInputError(TextAnalyserError):
    """
    Вход отклонён проверкой на «мусор» (бинарный файл, пустой текст и т.п.).

    Атрибут reason предназначен для показа пользователю без изменений.
    """

    def __init__(self, reason: str, kind: Optional[RejectionKind] = None):
        self.reason = reason
        self.kind = kind
        super().__init__(f"Garbage file detected: {reason}")
