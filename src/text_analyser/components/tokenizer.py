"""
Компонент для токенизации очищенного текста.

Отвечает за разбивку текста на токены и фильтрацию стоп-слов
для определённого языка.
"""

from typing import List, Optional

from ..interfaces.text_processor import Language, TokenProcessorInterface
from .stop_words import StopWordSets


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации очищенного текста."""

    def __init__(self, stop_words: Optional[StopWordSets] = None, min_length: int = 2):
        """
        Инициализирует процессор токенизации.

        Args:
            stop_words: Наборы стоп-слов (по умолчанию встроенные)
            min_length: Минимальная длина токена
        """
        self.stop_words = stop_words or StopWordSets.default()
        self.min_length = min_length

    def tokenize(self, cleaned_text: str, language: Language = Language.ENGLISH) -> List[str]:
        """
        Разбивает очищенный текст на токены и убирает стоп-слова.

        Args:
            cleaned_text: Результат TextNormalizer.clean()
            language: Язык, по которому выбираются стоп-слова

        Returns:
            Список токенов в порядке появления в тексте
        """
        if not cleaned_text or not cleaned_text.strip():
            return []
        stop_set = self.stop_words.for_language(language)
        return [
            token for token in cleaned_text.split()
            if len(token) >= self.min_length and token.lower() not in stop_set
        ]

    def is_valid_token(self, token: str, language: Language = Language.ENGLISH) -> bool:
        """
        Проверяет валидность токена.

        Args:
            token: Токен для проверки
            language: Язык стоп-слов

        Returns:
            True если токен достаточно длинный и не стоп-слово
        """
        if not token or len(token) < self.min_length:
            return False
        return not self.stop_words.is_stop_word(token, language)
