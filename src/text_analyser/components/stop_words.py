"""
Наборы стоп-слов по языкам.

StopWordSets создаётся один раз при старте и передаётся в токенизатор
и поиск по ссылке; после создания не изменяется.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional
import logging

from ..interfaces.text_processor import Language

logger = logging.getLogger(__name__)

ENGLISH_STOP_WORDS = frozenset((
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'up', 'about', 'into', 'through', 'during',
    'before', 'after', 'above', 'below', 'between', 'among', 'is', 'are',
    'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'do', 'does',
    'did', 'will', 'would', 'could', 'should', 'may', 'might', 'must', 'can',
    'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us', 'them',
    'my', 'your', 'his', 'its', 'our', 'their', 'this', 'that', 'these', 'those',
    'textbf', 'so', 'than', 'too', 'very', 'myself', 'ourselves', 'yours', 'yourself',
    'yourselves', 'himself', 'herself', 'itself', 'themselves', 'what', 'which', 'who',
    'whom', 'am', 'having', 'doing', 'ought', 'further', 'then', 'once', 'here', 'there',
    'when', 'where', 'why', 'how', 'all', 'any', 'both', 'each', 'few', 'more', 'most',
    'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same', 'down', 'out',
    'off', 'over', 'under', 'again', 'ours', 'against', 'as', 'until', 'while',
    'if', 'because', 'now', 'since', 'just', 'even', 'also', 'still', 'already', 'yet',
    'never', 'always', 'sometimes', 'often', 'usually', 'really', 'actually', 'quite',
    'rather', 'pretty', 'enough', 'almost', 'nearly', 'little', 'much', 'many', 'long',
    'short', 'old', 'new', 'good', 'bad', 'big', 'small', 'high', 'low', 'right', 'left',
    'first', 'last', 'next', 'previous', 'another', 'every', 'either', 'neither',
    'one', 'two', 'three', 'way', 'back', 'come', 'came', 'get', 'got', 'go',
    'went', 'see', 'saw', 'know', 'knew', 'think', 'thought', 'say', 'said', 'take',
    'took', 'give', 'gave', 'make', 'made', 'look', 'looked', 'use', 'used', 'find',
    'found', 'want', 'wanted', 'work', 'worked', 'call', 'called', 'try', 'tried',
))

FRENCH_STOP_WORDS = frozenset((
    'le', 'de', 'et', 'à', 'un', 'il', 'être', 'en', 'avoir', 'que', 'pour',
    'dans', 'ce', 'son', 'une', 'sur', 'avec', 'ne', 'se', 'pas', 'tout', 'plus',
    'par', 'grand', 'la', 'des', 'les', 'du', 'est', 'sont',
    'te', 'si', 'lui', 'nous', 'ou', 'elle', 'mais', 'où', 'donc', 'très', 'sans',
    'faire', 'aller', 'pouvoir', 'voir', 'dire', 'me', 'donner',
    'rien', 'bien', 'autre', 'après', 'long', 'ici', 'tous', 'pendant',
    'matin', 'trop', 'je', 'tu', 'vous', 'nos', 'vos', 'ses', 'ces', 'cette',
    'cet', 'mon', 'ton', 'sa', 'ma', 'ta', 'notre', 'votre', 'leur', 'leurs',
))

SPANISH_STOP_WORDS = frozenset((
    'el', 'la', 'de', 'que', 'y', 'a', 'en', 'un', 'ser', 'se', 'no', 'te', 'lo',
    'le', 'da', 'su', 'por', 'son', 'con', 'para', 'al', 'del', 'los', 'las', 'una',
    'es', 'está', 'como', 'me', 'si', 'sin', 'sobre', 'este', 'ya', 'entre', 'cuando',
    'todo', 'esta', 'dos', 'también', 'fue', 'había', 'era', 'muy',
    'años', 'hasta', 'desde', 'estaba', 'estamos', 'pueden', 'hubo', 'hay',
    'han', 'he', 'has', 'habían', 'tener', 'tiene', 'tenía', 'tengo',
    'pero', 'qué', 'porque', 'o', 'u', 'yo', 'tú', 'él', 'ella', 'nosotros',
    'vosotros', 'ellos', 'ellas', 'mi', 'mis', 'tu', 'tus', 'sus', 'nuestro',
    'nuestra', 'nuestros', 'nuestras', 'vuestro', 'vuestra', 'vuestros', 'vuestras',
    'estos', 'estas', 'ese', 'esa', 'esos', 'esas', 'aquel',
    'aquella', 'aquellos', 'aquellas', 'estar', 'hacer', 'poder',
    'decir', 'ir', 'ver', 'dar', 'saber', 'querer', 'llegar', 'pasar', 'deber',
    'poner', 'parecer', 'quedar', 'creer', 'hablar', 'llevar', 'dejar', 'seguir',
    'encontrar', 'llamar', 'venir', 'pensar', 'salir', 'volver', 'tomar', 'conocer',
    'vivir', 'sentir', 'tratar', 'mirar', 'contar', 'empezar', 'esperar', 'buscar',
    'existir', 'entrar', 'trabajar', 'escribir', 'perder', 'producir', 'ocurrir',
))


@dataclass(frozen=True)
class StopWordSets:
    """Стоп-слова по языкам. Для UNDETERMINED используется английский набор."""
    sets: Mapping[Language, FrozenSet[str]]

    def __post_init__(self):
        normalized = {
            language: frozenset(w.lower() for w in words)
            for language, words in self.sets.items()
        }
        object.__setattr__(self, 'sets', MappingProxyType(normalized))

    @classmethod
    def default(cls) -> 'StopWordSets':
        """Встроенные списки для английского, французского и испанского."""
        return cls({
            Language.ENGLISH: ENGLISH_STOP_WORDS,
            Language.FRENCH: FRENCH_STOP_WORDS,
            Language.SPANISH: SPANISH_STOP_WORDS,
        })

    @classmethod
    def from_config(cls, cfg=None) -> 'StopWordSets':
        """
        Встроенные списки плюс stop_words.extra из конфигурации.

        Args:
            cfg: Экземпляр Config (по умолчанию глобальный)
        """
        if cfg is None:
            from ..config import config as cfg
        extra: Dict[Language, Iterable[str]] = {}
        for key, words in cfg.get_extra_stop_words().items():
            language = _language_from_key(key)
            if language is None:
                logger.warning(f"Неизвестный язык в stop_words.extra: {key}")
                continue
            extra[language] = words
        return cls.default().with_extra(extra)

    def with_extra(self, extra: Mapping[Language, Iterable[str]]) -> 'StopWordSets':
        """Возвращает новый набор с добавленными словами."""
        merged = {language: set(words) for language, words in self.sets.items()}
        for language, words in extra.items():
            merged.setdefault(language, set()).update(w.lower() for w in words)
        return StopWordSets({language: frozenset(words) for language, words in merged.items()})

    def for_language(self, language: Language) -> FrozenSet[str]:
        """Набор для языка; для неопределённого или отсутствующего английский."""
        if language in self.sets:
            return self.sets[language]
        return self.sets.get(Language.ENGLISH, frozenset())

    def is_stop_word(self, word: str, language: Language) -> bool:
        return word.lower() in self.for_language(language)


def _language_from_key(key: str) -> Optional[Language]:
    for language in Language:
        if language.value.lower() == key.lower() or language.name.lower() == key.lower():
            return language
    return None
