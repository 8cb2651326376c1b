# src/kubeusage/core/pattern.py
"""
Builds the PromQL regex used to select a workload's pods by name.

Pod names of a single workload usually share a long prefix (``web-0``,
``web-1`` ...), so the regex is collapsed to ``<prefix>.*`` to keep queries
short. This is an approximation: any other pod sharing that prefix is matched
too.
"""

from typing import Sequence

WILDCARD = ".*"
ALTERNATION = "|"


def longest_common_prefix(names: Sequence[str]) -> str:
    """Returns the longest string every element of ``names`` starts with."""
    if not names:
        return ""

    min_len = min(len(name) for name in names)
    first = names[0]

    lcp_len = 0
    for i in range(min_len):
        if any(name[i] != first[i] for name in names[1:]):
            break
        lcp_len += 1

    return first[:lcp_len]


def compact(names: Sequence[str]) -> str:
    """
    Returns a regex matching at least every name in ``names``.

    ``<common prefix>.*`` when the names share a prefix (a single name counts
    as its own prefix), otherwise the ``|`` alternation of all names. An empty
    input yields an empty pattern.
    """
    prefix = longest_common_prefix(names)
    if prefix:
        return f"{prefix}{WILDCARD}"
    return ALTERNATION.join(names)
