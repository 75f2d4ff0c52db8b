"""Correction of the indefinite articles "a" and "an"."""

import re

_EXCEPTIONS = frozenset({"for", "and", "or", "yet", "with", "so", "but"})
_SILENT_H = re.compile(r"^h(onor|our|heir|hour)", re.IGNORECASE)
_TOKENS = re.compile(r"'[^']*'|\S+")


def _is_article(word):
    return word.lower() in ("a", "an")


def _is_upper(word):
    return word == word.upper()


def fix_articles(text):
    """Use "an" before vowels and a silent "h", and "a" elsewhere.

    The article keeps its original capitalisation; words are rejoined
    with single spaces.
    """
    words = _TOKENS.findall(text)
    for i, (word, following) in enumerate(zip(words, words[1:])):
        if not _is_article(word):
            continue
        clean = following.strip("'")
        if not clean or _is_article(clean) or clean.lower() in _EXCEPTIONS:
            continue
        if clean[0].lower() in "aeiou" or _SILENT_H.match(clean):
            correct = "an"
        else:
            correct = "a"
        if _is_upper(word) and _is_upper(clean):
            words[i] = correct.upper()
        elif word[0].isupper():
            words[i] = correct.title()
        else:
            words[i] = correct
    return " ".join(words)