"""Subtitle language codes: display names, normalization and filenames.

Every language is declared once below; both lookup tables are derived from
that list so the 2-letter, 3-letter and display-name forms cannot drift apart.

Codes are lowercase everywhere they leave this module. Subtitle files follow
``<video base name>[.<code>].srt`` where a missing code means English.
"""
import re
from collections import namedtuple
from types import MappingProxyType

Language = namedtuple('Language', ['name', 'alpha2', 'alpha3', 'aliases'])

# Format: Language(display name, 2-letter code, 3-letter code, other 3-letter codes)
# The 3-letter code is what the 2-letter code normalizes to.
LANGUAGES = (
    Language('English', 'en', 'eng', ()),
    Language('Chinese', 'zh', 'chi', ('zho',)),
    Language('Mandarin Chinese', None, 'cmn', ()),
    Language('Spanish', 'es', 'spa', ()),
    Language('French', 'fr', 'fra', ('fre',)),
    Language('German', 'de', 'deu', ('ger',)),
    Language('Japanese', 'ja', 'jpn', ()),
    Language('Korean', 'ko', 'kor', ()),
    Language('Thai', 'th', 'tha', ()),
    Language('Vietnamese', 'vi', 'vie', ()),
    Language('Arabic', 'ar', 'ara', ()),
    Language('Portuguese', 'pt', 'por', ()),
    Language('Russian', 'ru', 'rus', ()),
    Language('Italian', 'it', 'ita', ()),
    Language('Dutch', 'nl', 'nld', ('dut',)),
    Language('Polish', 'pl', 'pol', ()),
    Language('Turkish', 'tr', 'tur', ()),
    Language('Swedish', 'sv', 'swe', ()),
    Language('Danish', 'da', 'dan', ()),
    Language('Finnish', 'fi', 'fin', ()),
    Language('Norwegian', 'no', 'nor', ()),
    Language('Greek', 'el', 'ell', ('gre',)),
    Language('Czech', 'cs', 'ces', ('cze',)),
    Language('Hungarian', 'hu', 'hun', ()),
    Language('Romanian', 'ro', 'ron', ('rum',)),
    Language('Hindi', 'hi', 'hin', ()),
    Language('Indonesian', 'id', 'ind', ()),
    Language('Malay', 'ms', 'msa', ('may',)),
    Language('Filipino', 'tl', 'fil', ()),
    Language('Tagalog', None, 'tgl', ()),
    Language('Hebrew', 'he', 'heb', ()),
    Language('Ukrainian', 'uk', 'ukr', ()),
    Language('Bengali', 'bn', 'ben', ()),
    Language('Burmese', 'my', 'mya', ('bur',)),
    Language('Lao', 'lo', 'lao', ()),
    Language('Khmer', 'km', 'khm', ()),
)

DEFAULT_LANGUAGE = 'en'
ENGLISH_CODES = frozenset({'en', 'eng'})
SUBTITLE_EXTENSION = 'srt'

_EXTENSION_RE = re.compile(r'\.[^.]+$')


def _build_name_table(languages):
    names = {}
    for language in languages:
        for code in (language.alpha2, language.alpha3) + tuple(language.aliases):
            if code:
                names[code] = language.name
    return MappingProxyType(names)


def _build_two_to_three_table(languages):
    return MappingProxyType({
        language.alpha2: language.alpha3
        for language in languages
        if language.alpha2 and language.alpha2 != DEFAULT_LANGUAGE
    })


# Dictionaries for quick lookups
LANGUAGE_NAMES = _build_name_table(LANGUAGES)
TWO_TO_THREE = _build_two_to_three_table(LANGUAGES)


def get_language_name(code):
    """Get the display name for a language code, or the code uppercased."""
    return LANGUAGE_NAMES.get(code.lower(), code.upper())


def normalize_language_code(code):
    """
    Normalize a language code to its 3-letter form when one is known.

    English (``en``/``eng``) is the default language and returns ``None``,
    meaning no language suffix in the subtitle filename. Unknown and 3-letter
    codes come back lowercased and otherwise unchanged.
    """
    lower_code = code.lower()

    if lower_code in ENGLISH_CODES:
        return None

    if len(lower_code) == 2 and lower_code in TWO_TO_THREE:
        return TWO_TO_THREE[lower_code]

    return lower_code


def build_subtitle_file_name(video_file_name, language_code):
    """
    Build the subtitle filename for a video.

    ``Movie.mkv`` + ``None`` -> ``Movie.srt``
    ``Movie.mkv`` + ``'tha'`` -> ``Movie.tha.srt``
    """
    base_file_name = _EXTENSION_RE.sub('', video_file_name)

    if not language_code:
        return f"{base_file_name}.{SUBTITLE_EXTENSION}"

    return f"{base_file_name}.{language_code}.{SUBTITLE_EXTENSION}"


def parse_language_from_filename(filename):
    """
    Extract the language code from a subtitle filename.

    ``video.tha.srt`` -> ``'tha'``; ``video.srt`` and ``video`` -> ``None``
    (default English). Any 2-3 character segment is accepted as a code.
    """
    parts = filename.split('.')

    # name.srt carries no code
    if len(parts) < 3:
        return None

    lang_code = parts[-2]
    if 2 <= len(lang_code) <= 3:
        return lang_code.lower()

    return None


def list_languages():
    """List (code, name) pairs, one per language, keyed by normalized code."""
    return [
        (normalize_language_code(language.alpha2 or language.alpha3) or DEFAULT_LANGUAGE, language.name)
        for language in LANGUAGES
    ]
