"""Single-token signals that a word is obviously not English.

These checks run before dictionary lookup and before any statistical
detection. For short strings a closed-class word or a diacritic is a far
more reliable signal than n-gram statistics.
"""
import re
from typing import List


def _word_list(*words: str) -> re.Pattern:
    return re.compile(r'^(?:' + '|'.join(words) + r')$', re.IGNORECASE)


# Diacritics by language family. Both cases are listed instead of using
# re.IGNORECASE, which folds the Turkish dotless ı onto ASCII i.
NON_ENGLISH_CHARACTERS: List[re.Pattern] = [
    re.compile(r'[äöüßÄÖÜẞ]'),  # German
    re.compile(r'[éèêëàâçùûüÿæœÉÈÊËÀÂÇÙÛÜŸÆŒ]'),  # French
    re.compile(r'[áéíóúüñ¡¿ÁÉÍÓÚÜÑ]'),  # Spanish
    re.compile(r'[àèìòùéÀÈÌÒÙÉ]'),  # Italian
    re.compile(r'[åøæÅØÆ]'),  # Scandinavian
    re.compile(r'[ąćęłńóśźżĄĆĘŁŃÓŚŹŻ]'),  # Polish
    re.compile(r'[şğçıöüŞĞÇİÖÜ]'),  # Turkish
]

NON_ENGLISH_ENDINGS: List[re.Pattern] = [
    re.compile(ending + r'$', re.IGNORECASE)
    for ending in ('keit', 'schaft', 'ción', 'zione', 'mente', 'baar', 'lijk', 'eur', 'agem', 'ção')
]

# Closed-class words: pronouns, conjunctions and other function words
CLOSED_CLASS_WORDS: List[re.Pattern] = [
    # German
    _word_list(
        'und', 'oder', 'wann', 'aber', 'kann', 'wenn', 'weil', 'dass', 'ob', 'für', 'nicht',
        'kein', 'keine', 'nur', 'sehr', 'schon', 'noch', 'jetzt', 'immer', 'wieder', 'möchte',
        'würde', 'hätte', 'könnte', 'sollte', 'müsste', 'dürfte',
    ),
    # Spanish
    _word_list(
        'que', 'como', 'porque', 'pero', 'cuando', 'donde', 'quien', 'cual', 'este', 'esta',
        'estos', 'estas', 'ese', 'esa', 'esos', 'esas', 'aquel', 'aquella', 'aquellos', 'aquellas',
    ),
    # French
    _word_list(
        'est', 'sont', 'était', 'être', 'avoir', 'faire', 'dire', 'voir', 'pouvoir', 'vouloir',
        'devoir', 'falloir', 'savoir', 'quand', 'où', 'pourquoi', 'qui', 'quel', 'quelle',
        'quels', 'quelles', 'ce', 'cette', 'ces', 'cet',
    ),
    # Italian
    _word_list(
        'sono', 'sei', 'è', 'siamo', 'siete', 'essere', 'avere', 'fare', 'dire', 'andare',
        'vedere', 'dare', 'sapere', 'potere', 'volere', 'come', 'quando', 'dove', 'perché',
        'chi', 'quale', 'quali',
    ),
    # Dutch
    _word_list(
        'en', 'hoe', 'es', 'er', 'wanneer', 'je', 'stel', 'kritiek', 'et', 'kritisk', 'maar',
        'want', 'omdat', 'hoewel', 'terwijl', 'tenzij', 'indien', 'toen', 'totdat', 'voordat',
        'nadat', 'zodat', 'mits', 'toch', 'dus', 'immers', 'namelijk',
    ),
    # Portuguese
    _word_list(
        'eu', 'tu', 'ele', 'ela', 'nós', 'vós', 'eles', 'elas', 'isto', 'isso', 'aquilo',
        'mesmo', 'mesma', 'mesmos', 'mesmas', 'próprio', 'própria', 'próprios', 'próprias',
    ),
    # Turkish
    _word_list(
        'ben', 'sen', 'biz', 'siz', 'onlar', 'bana', 'sana', 'ona', 'bize', 'size', 'onlara',
        'benim', 'senin', 'onun', 'bizim', 'sizin', 'onların',
    ),
    # Danish / Norwegian
    _word_list(
        'jeg', 'mig', 'min', 'mit', 'mine', 'dig', 'din', 'dit', 'dine', 'han', 'ham', 'hans',
        'hun', 'hende', 'hendes', 'den', 'det', 'de', 'dem', 'deres', 'denne', 'dette', 'disse',
    ),
]

# Articles and prepositions shared across Romance, Germanic and Dutch
FUNCTION_WORDS = _word_list(
    'le', 'la', 'les', 'du', 'des', 'dans', 'avec', 'sans', 'sur', 'sous', 'entre',
    'el', 'los', 'las', 'del', 'al', 'con', 'sin', 'por',
    'der', 'die', 'das', 'den', 'dem', 'ein', 'eine', 'einen', 'einem', 'einer', 'eines', 'mit',
    'il', 'lo', 'gli',
    'het', 'een', 'op', 'aan', 'voor', 'met', 'door',
    'os', 'dos', 'nos', 'nas', 'um', 'uma',
)


def has_non_english_characters(text: str) -> bool:
    return any(pattern.search(text) for pattern in NON_ENGLISH_CHARACTERS)


def has_non_english_ending(text: str) -> bool:
    return any(pattern.search(text) for pattern in NON_ENGLISH_ENDINGS)


def is_closed_class_word(text: str) -> bool:
    """Check whether text is exactly a known foreign function word."""
    return any(pattern.match(text) for pattern in CLOSED_CLASS_WORDS)


def has_obvious_non_english_indicators(text) -> bool:
    """
    Check a token for strong non-English signals.

    Character and ending checks only apply to single tokens (no spaces);
    closed-class and article lists are whole-string matches.

    Args:
        text: Token to check

    Returns:
        True if the token is obviously not English
    """
    if not text or not isinstance(text, str) or len(text) < 2:
        return False

    if ' ' not in text:
        if has_non_english_characters(text) or has_non_english_ending(text):
            return True

    if is_closed_class_word(text):
        return True

    return FUNCTION_WORDS.match(text) is not None
