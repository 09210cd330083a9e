"""
Компонент для очистки текста.

Превращает исходный текст в ASCII-поток строчных букв, разделённых
одиночными пробелами. Результат используется для частот, определения
языка и токенизации; исходный текст хранится отдельно для подсветки.
"""

import re

from ..interfaces.text_processor import TextNormalizerInterface

_NON_ASCII = re.compile(r'[^\x00-\x7F]')
_DIGITS = re.compile(r'\d', re.ASCII)
_NON_LETTER = re.compile(r'[^a-z\s]', re.ASCII)
_WHITESPACE_RUN = re.compile(r'\s+', re.ASCII)


class TextNormalizer(TextNormalizerInterface):
    """Очистка текста: без состояния, детерминированно."""

    def clean(self, text: str) -> str:
        """
        Очищает текст.

        Порядок важен: сначала удаляются не-ASCII символы (без пробела),
        затем цифры и прочие не-буквы заменяются пробелом.

        Args:
            text: Исходный текст

        Returns:
            Строчные латинские буквы и одиночные пробелы, без краёв
        """
        if not text:
            return ""
        text = _NON_ASCII.sub('', text)
        text = text.lower()
        text = _DIGITS.sub(' ', text)
        text = _NON_LETTER.sub(' ', text)
        text = _WHITESPACE_RUN.sub(' ', text)
        return text.strip()


_default_normalizer = TextNormalizer()


def clean(text: str) -> str:
    """Очищает текст нормализатором по умолчанию."""
    return _default_normalizer.clean(text)
