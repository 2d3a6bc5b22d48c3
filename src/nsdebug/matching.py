"""Namespace pattern matching.

A pattern is literal text in which ``*`` stands for any run of characters.
Matching is a search, not a full match: ``test`` admits ``testing`` and
``my:test:x`` as well as ``test`` itself.

Example:
    matches("test", "test")                    # True
    matches("test", "test*")                   # True
    matches("test", "*")                       # True
    matches("test", "other")                   # False
    matches("test:subnamespace", "test:*")     # True
    matches("test:subnamespace", "test:foo*")  # False
"""

from __future__ import annotations

import re

from nsdebug.errors import PatternError

_ESCAPED_WILDCARD = re.escape("*")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a namespace pattern into a compiled regular expression.

    Args:
        pattern: Namespace pattern, ``*`` being the only wildcard

    Returns:
        re.Pattern: Expression to search namespaces with

    Raises:
        PatternError: If the translated expression fails to compile
    """
    translated = re.escape(pattern).replace(_ESCAPED_WILDCARD, ".*")
    try:
        return re.compile(translated)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e


def matches(namespace: str, pattern: str) -> bool:
    """Check whether a namespace is admitted by a pattern.

    Args:
        namespace: Logger namespace
        pattern: Namespace pattern; the empty pattern admits everything

    Returns:
        bool: True if any part of the namespace matches the pattern
    """
    return compile_pattern(pattern).search(namespace) is not None
