"""Case-changing tags: ``(up)``, ``(low)`` and ``(cap)``, with an optional word count."""

import re

_TAG = re.compile(r"\((\s*up\s*|\s*low\s*|\s*cap\s*)\s*(\s*,\s*\d+\s*)?\)", re.ASCII)
_ALNUM = re.compile(r"[A-Za-z0-9]")


def _capitalize(word):
    return word[:1].upper() + word[1:].lower()


_ACTIONS = {"up": str.upper, "low": str.lower, "cap": _capitalize}


def _parse_tag(tag):
    """Return the case action and the number of words a tag applies to."""
    name, _, count = tag.strip("()").partition(",")
    return _ACTIONS[name.strip()], int(count) if count.strip() else 1


def _apply(action, count, prefix):
    words = prefix.split()
    if count > 0:
        words = words[:-count] + [action(word) for word in words[-count:]]
    return " ".join(words)


def process_case_tags(text):
    """Apply every case tag in ``text`` to the words before it and drop the tags.

    A tag with no letter or digit before it is removed without effect.
    """
    while (match := _TAG.search(text)) is not None:
        prefix = text[: match.start()].strip()
        suffix = text[match.end():]
        if _ALNUM.search(prefix):
            action, count = _parse_tag(match.group())
            prefix = _apply(action, count, prefix)
        text = prefix + suffix
    return text.strip()