"""
Компонент для стемминга слов.

Простой суффиксный стеммер: упорядоченная таблица правил, применяется
не более одного правила (первое подходящее), затем снимается удвоенная
конечная буква (running -> runn -> run). Не зависит от языка текста.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from ..interfaces.text_processor import StemmerInterface


class SuffixRule(NamedTuple):
    """Правило: суффикс, замена и минимальная длина результата (если задана)."""
    suffix: str
    replacement: str
    min_length: Optional[int] = None


SUFFIX_RULES: Tuple[SuffixRule, ...] = (
    # Множественное число
    SuffixRule('ies', 'y'),           # cities -> city
    SuffixRule('ied', 'y'),           # cried -> cry
    SuffixRule('s', '', 4),           # cats -> cats (результат короче 4)
    # Прошедшее время и герундий
    SuffixRule('eed', 'ee'),          # agreed -> agree
    SuffixRule('ed', '', 4),          # wanted -> want
    SuffixRule('ing', '', 4),         # running -> runn
    # Сравнительная и превосходная степени
    SuffixRule('est', '', 4),         # fastest -> fast
    SuffixRule('er', '', 4),          # faster -> fast
    # Наречия
    SuffixRule('ly', '', 4),          # quickly -> quick
    # Словообразовательные окончания
    SuffixRule('tion', 'te'),         # creation -> create
    SuffixRule('sion', 's'),          # expansion -> expans
    SuffixRule('ness', ''),           # goodness -> good
    SuffixRule('ment', ''),           # development -> develop
    SuffixRule('able', ''),           # readable -> read
    SuffixRule('ible', ''),           # terrible -> terr
    SuffixRule('ful', ''),            # helpful -> help
    SuffixRule('less', ''),           # helpless -> help
    SuffixRule('ous', ''),            # dangerous -> danger
    SuffixRule('ive', ''),            # active -> act
    SuffixRule('ize', ''),            # realize -> real
    SuffixRule('ise', ''),            # realise -> real
)

# Суффиксы, перед которыми английский удваивает конечную согласную
DOUBLING_SUFFIXES = ('ing', 'ed', 'er', 'est')

_INDEX_NON_WORD = re.compile(r'[^\w\s]', re.ASCII)


@dataclass(frozen=True)
class StemIndex:
    """Частоты исходных слов, частоты основ и отображение основа -> слова."""
    original: Dict[str, int]
    stemmed: Dict[str, int]
    mapping: Dict[str, List[str]]


class SuffixStemmer(StemmerInterface):
    """Стеммер по таблице суффиксов."""

    def __init__(self, rules: Sequence[SuffixRule] = SUFFIX_RULES):
        self.rules: Tuple[SuffixRule, ...] = tuple(rules)

    def stem(self, word: str) -> str:
        """
        Приводит слово к основе.

        Слова длиной до 2 символов возвращаются без изменений. Правило с
        минимальной длиной пропускается, если результат короче минимума,
        и поиск продолжается со следующего правила.

        Args:
            word: Исходное слово

        Returns:
            Основа слова (не длиннее исходного)
        """
        if not word or len(word) <= 2:
            return word

        lowered = word.lower()
        # lower() может удлинить строку (например, 'İ'), тогда регистр не трогаем
        if len(lowered) == len(word):
            word = lowered

        for rule in self.rules:
            if not word.endswith(rule.suffix):
                continue
            candidate = word[:len(word) - len(rule.suffix)] + rule.replacement
            if rule.min_length is None or len(candidate) >= rule.min_length:
                word = candidate
                break

        if len(word) > 3 and word[-1] == word[-2]:
            word = word[:-1]

        return word

    def stem_words(self, words: Sequence[str]) -> List[str]:
        return [self.stem(word) for word in words]

    def inflections(self, stem: str) -> List[str]:
        """
        Поверхностные формы, которые представляет основа при поиске.

        Для каждого правила, чья замена совпадает с концом основы, замена
        меняется обратно на суффикс; для ing/ed/er/est добавляется форма
        с удвоенной последней буквой. Сама основа идёт первой.

        Args:
            stem: Основа (обычно результат stem())

        Returns:
            Список форм без повторов, в порядке таблицы правил
        """
        if not stem:
            return []
        forms: Dict[str, None] = {stem: None}
        for rule in self.rules:
            if rule.replacement and not stem.endswith(rule.replacement):
                continue
            base = stem[:len(stem) - len(rule.replacement)] if rule.replacement else stem
            if not base:
                continue
            forms.setdefault(base + rule.suffix, None)
            if not rule.replacement and rule.suffix in DOUBLING_SUFFIXES:
                forms.setdefault(base + base[-1] + rule.suffix, None)
        return list(forms)

    def build_stem_index(self, text: str) -> StemIndex:
        """
        Строит индекс исходных слов и их основ.

        Слова: нижний регистр, пунктуация заменяется пробелом, длина > 2.
        """
        words = [
            w for w in _INDEX_NON_WORD.sub(' ', (text or '').lower()).split()
            if len(w) > 2
        ]
        original: Counter = Counter()
        stemmed: Counter = Counter()
        mapping: Dict[str, Dict[str, None]] = {}
        for word in words:
            original[word] += 1
            root = self.stem(word)
            stemmed[root] += 1
            mapping.setdefault(root, {}).setdefault(word, None)
        return StemIndex(
            original=dict(original),
            stemmed=dict(stemmed),
            mapping={root: list(forms) for root, forms in mapping.items()},
        )


_default_stemmer = SuffixStemmer()


def stem(word: str) -> str:
    """Приводит слово к основе стеммером по умолчанию."""
    return _default_stemmer.stem(word)


def stem_words(words: Sequence[str]) -> List[str]:
    return _default_stemmer.stem_words(words)


def inflections(stem_: str) -> List[str]:
    return _default_stemmer.inflections(stem_)


def build_stem_index(text: str) -> StemIndex:
    return _default_stemmer.build_stem_index(text)
