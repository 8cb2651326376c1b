# src/kubeusage/parsers/vector_parser.py
"""
Parser for the text rendering of an instant vector.

Each line has the shape ``<labels> => <value> @<timestamp>``. Only the value
is extracted; labels and timestamp are not interpreted. A single bad line
invalidates the whole vector.
"""

import logging
from typing import List

from ..core.exceptions import InvalidMetricValue, MalformedMetricLine

logger = logging.getLogger(__name__)

SAMPLE_DELIMITER = "=>"
TIMESTAMP_DELIMITER = "@"


def extract_value_token(line: str) -> str:
    """
    Returns the value token of ``line`` with all spaces removed.

    Raises:
        MalformedMetricLine: If the line does not contain exactly one ``=>``
            followed by exactly one ``@``.
    """
    parts = line.split(SAMPLE_DELIMITER)
    if len(parts) != 2:
        raise MalformedMetricLine(line)

    value_parts = parts[1].split(TIMESTAMP_DELIMITER)
    if len(value_parts) != 2:
        raise MalformedMetricLine(line)

    return value_parts[0].replace(" ", "")


def parse_sample_line(line: str) -> float:
    """
    Parses the value of a single vector line.

    Raises:
        MalformedMetricLine: If the line shape is wrong.
        InvalidMetricValue: If the value token is not a float.
    """
    token = extract_value_token(line)
    try:
        return float(token)
    except ValueError as e:
        raise InvalidMetricValue(line, token) from e


def parse_sample_lines(text: str) -> List[float]:
    """Parses every non-blank line of ``text``; an empty vector yields an empty list."""
    return [parse_sample_line(line) for line in text.split("\n") if line.strip()]


def parse_vector_text(text: str) -> float:
    """
    Sums the sample values of a rendered vector.

    An empty vector sums to ``0.0``.
    """
    values = parse_sample_lines(text)
    logger.debug("Parsed %d sample(s) from vector", len(values))
    return sum(values, 0.0)
