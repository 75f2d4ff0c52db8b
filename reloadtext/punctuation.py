"""Spacing of punctuation marks and quotation marks."""

import re

_AROUND_PUNCT = re.compile(r"\s*([.,!?;:])\s*", re.ASCII)
_PUNCT_THEN_WORD = re.compile(r"([.,!?:;])([a-zA-Z0-9-])", re.ASCII)

_DQ_INNER = re.compile(r'"\s*(.*?)\s*"', re.ASCII)
_DQ_AFTER = re.compile(r"([\"])\s+(['\w])", re.ASCII)
_DQ_BEFORE = re.compile(r"(['\w])\s+([\"])", re.ASCII)

_SQ_INNER = re.compile(r"'\s*(.*?)\s*'", re.ASCII)
_SQ_AFTER = re.compile(r"(['])\s+(['\w])", re.ASCII)
_SQ_BEFORE = re.compile(r"(['\w])\s+(['])", re.ASCII)

_TRAILING_LETTERS = re.compile(r"[A-Za-z]+\Z")
_LEADING_LETTERS = re.compile(r"[A-Za-z]*")
_CONTRACTION_SUFFIXES = frozenset({"t", "ll", "ve", "m", "s", "d", "re"})
_NO_SPACE_BEFORE = " .,;!?"


def format_punctuation(text):
    """Attach punctuation to the preceding word and space it from the next one."""
    text = _AROUND_PUNCT.sub(r"\1", text)
    text = _PUNCT_THEN_WORD.sub(r"\1 \2", text)
    return " ".join(text.split())


def _needs_space_after(text, i):
    return i + 1 < len(text) and text[i + 1] not in _NO_SPACE_BEFORE


def _fix_double_quotes(text):
    text = _DQ_INNER.sub(r'"\1"', text)
    text = _DQ_AFTER.sub(r"\1\2", text)
    text = _DQ_BEFORE.sub(r"\1\2", text)

    total = text.count('"')
    out = []
    in_quote = False
    seen = 0
    for i, ch in enumerate(text):
        if ch != '"':
            out.append(ch)
            continue
        if total % 2 and seen == total - 1:
            out.append('" ')
        elif not in_quote:
            in_quote = True
            if i > 0 and text[i - 1] not in " \"'":
                out.append(" ")
            out.append(ch)
        else:
            in_quote = False
            out.append(ch)
            if _needs_space_after(text, i):
                out.append(" ")
        seen += 1
    return "".join(out).strip()


def _is_contraction(text, i):
    before = _TRAILING_LETTERS.search(text, 0, i)
    suffix = _LEADING_LETTERS.match(text, i + 1).group()
    return before is not None and suffix in _CONTRACTION_SUFFIXES


def _fix_single_quotes(text):
    text = _SQ_INNER.sub(r"'\1'", text)
    text = _SQ_AFTER.sub(r"\1\2", text)
    text = _SQ_BEFORE.sub(r"\1\2", text)

    total = text.count("'")
    out = []
    in_quote = False
    seen = 0
    for i, ch in enumerate(text):
        if ch != "'":
            out.append(ch)
            continue
        seen_before = seen
        seen += 1
        if 0 < i < len(text) - 1 and _is_contraction(text, i):
            out.append(ch)
            continue
        unpaired = total % 2 and seen_before == total - 1 and not in_quote
        if total == 1 or unpaired:
            out.append(ch)
            if _needs_space_after(text, i):
                out.append(" ")
        elif not in_quote:
            in_quote = True
            if i > 0 and text[i - 1] not in " '\"":
                out.append(" ")
            out.append(ch)
        else:
            in_quote = False
            out.append(ch)
            if _needs_space_after(text, i):
                out.append(" ")
    return "".join(out).strip()


def fix_quotes(text):
    """Place double and single quotes tight around the text they enclose."""
    return _fix_single_quotes(_fix_double_quotes(text))


def process_punctuation_and_quotes(text):
    """Format punctuation, then quotation marks."""
    return fix_quotes(format_punctuation(text))