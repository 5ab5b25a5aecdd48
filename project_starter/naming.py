# project_starter/naming.py
"""
Name and version normalization helpers.

Both functions are pure; they are used by the CLI (project name) and the
version gate (interpreter versions).
"""

from __future__ import annotations

import re
import unicodedata
from typing import List

__all__ = ["split_words", "format_name", "format_version"]

# A run of letters (any script) or a run of digits. Letter runs are then split
# on case: "XMLHttpRequest2" -> XML, Http, Request, 2.
_TOKEN_RE = re.compile(r"[^\W\d_]+|\d+")

_VERSION_STRIP_RE = re.compile(r"[^0-9.-]")


def _deburr(text: str) -> str:
    """Turn accented Latin letters into plain ASCII ("é" -> "e").

    Letters of other scripts, and letters without an ASCII base such as
    "ß", are kept as they are.
    """
    out = []
    for ch in text:
        decomposed = unicodedata.normalize("NFKD", ch)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        out.append(base if base and base.isascii() else ch)
    return "".join(out)


def _split_case(run: str) -> List[str]:
    """Split a run of letters on case changes.

    An uppercase letter followed by lowercase ones starts a word; the
    capitals before it form an acronym. Uncased letters count as lowercase.
    """
    words: List[str] = []
    i, n = 0, len(run)
    while i < n:
        j = i
        while j < n and run[j].isupper():
            j += 1
        if j == n:
            words.append(run[i:])
            break
        if j - i > 1:
            words.append(run[i : j - 1])
            i = j - 1
        k = j
        while k < n and not run[k].isupper():
            k += 1
        words.append(run[i:k])
        i = k
    return words


def split_words(text: str) -> List[str]:
    """Split ``text`` into words on case, digit and punctuation boundaries."""
    words: List[str] = []
    for token in _TOKEN_RE.findall(_deburr(text)):
        if token.isdigit():
            words.append(token)
        else:
            words.extend(_split_case(token))
    return words


def format_name(name: str) -> str:
    """Format a project name as kebab-case.

    Parameters
    ----------
    name : str
        Raw user input, e.g. ``"My Cool App"`` or ``"myCoolApp"``.

    Returns
    -------
    str
        Lowercase words joined by single hyphens (``"my-cool-app"``). Empty when
        the input holds no letters or digits.

    Notes
    -----
    Every word in the output is a pure letter run or a pure digit run, so
    ``format_name(format_name(x)) == format_name(x)``.
    """
    return "-".join(word.lower() for word in split_words(name))


def format_version(text: str) -> str:
    """Keep only digits, periods and hyphens.

    >>> format_version(">=6.4.2")
    '6.4.2'
    """
    return _VERSION_STRIP_RE.sub("", text)
