"""
Компонент для частотного анализа текста.

Отвечает за подсчёт частот букв (в процентах, по исходному тексту),
символов (по очищенному тексту), слов, а также за поиск символов
с диакритикой. Анализатор не хранит состояния между вызовами.
"""

import string
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from ..interfaces.text_processor import ForeignChar

ASCII_LETTERS = string.ascii_lowercase

# Описания символов с диакритикой (по нижнему регистру)
CHARACTER_DESCRIPTIONS: Dict[str, str] = {
    'à': 'a with grave accent',
    'á': 'a with acute accent',
    'â': 'a with circumflex',
    'ã': 'a with tilde',
    'ä': 'a with diaeresis',
    'å': 'a with ring above',
    'è': 'e with grave accent',
    'é': 'e with acute accent',
    'ê': 'e with circumflex',
    'ë': 'e with diaeresis',
    'ì': 'i with grave accent',
    'í': 'i with acute accent',
    'î': 'i with circumflex',
    'ï': 'i with diaeresis',
    'ò': 'o with grave accent',
    'ó': 'o with acute accent',
    'ô': 'o with circumflex',
    'õ': 'o with tilde',
    'ö': 'o with diaeresis',
    'ù': 'u with grave accent',
    'ú': 'u with acute accent',
    'û': 'u with circumflex',
    'ü': 'u with diaeresis',
    'ç': 'c with cedilla',
    'ñ': 'n with tilde',
}


class FrequencyAnalyzer:
    """Анализатор частотности букв, символов и слов."""

    def __init__(self, decimal_places: int = 2):
        """
        Args:
            decimal_places: Точность округления процентов
        """
        self.decimal_places = decimal_places

    def letter_frequency(self, text: str) -> Dict[str, float]:
        """
        Процент каждой буквы a-z среди всех латинских букв текста.

        Регистр не учитывается; считается по всему исходному тексту.
        Если букв нет, все значения равны 0.

        Args:
            text: Исходный текст (до очистки)

        Returns:
            Словарь {буква: процент} для всех 26 букв
        """
        counts = Counter(ch for ch in (text or '').lower() if ch in ASCII_LETTERS)
        total = sum(counts.values())
        if total == 0:
            return {letter: 0.0 for letter in ASCII_LETTERS}
        return {
            letter: round(counts[letter] / total * 100, self.decimal_places)
            for letter in ASCII_LETTERS
        }

    def char_frequency(self, cleaned_text: str) -> Dict[str, int]:
        """Количество каждой буквы в очищенном тексте (только встречающиеся)."""
        return dict(Counter(ch for ch in (cleaned_text or '') if ch in ASCII_LETTERS))

    def word_frequency(self, words: Sequence[str]) -> Dict[str, int]:
        """
        Подсчитывает частоту появления слов.

        Args:
            words: Список слов (регистр сохраняется как есть)

        Returns:
            Словарь с частотой каждого слова в порядке первого появления
        """
        if not words:
            return {}
        return dict(Counter(words))

    def foreign_characters(self, text: str) -> List[ForeignChar]:
        """
        Буквы с диакритикой (диапазон À-ÿ) в исходном тексте.

        Returns:
            Список по убыванию частоты; при равенстве по первому появлению
        """
        counts: Counter = Counter(
            ch for ch in (text or '') if 'À' <= ch <= 'ÿ' and ch.isalpha()
        )
        ordered = sorted(counts.items(), key=lambda item: -item[1])
        return [
            ForeignChar(char=ch, count=count, description=self.describe_character(ch))
            for ch, count in ordered
        ]

    @staticmethod
    def describe_character(char: str) -> str:
        return CHARACTER_DESCRIPTIONS.get(char.lower(), f"accented character ({char})")

    @staticmethod
    def most_frequent(word_frequency: Dict[str, int], n: int = 10) -> List[Tuple[str, int]]:
        """n самых частых слов: по убыванию частоты, затем по алфавиту."""
        if n <= 0:
            return []
        return sorted(word_frequency.items(), key=lambda x: (-x[1], x[0]))[:n]

    @staticmethod
    def average_word_length(words: Sequence[str]) -> float:
        if not words:
            return 0.0
        return sum(len(w) for w in words) / len(words)
