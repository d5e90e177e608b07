#!/usr/bin/env python3
"""
Text normalisation helpers for quote lines.
Strips dot leaders and layout noise, and splits lines that carry several article numbers.
"""

import re
from typing import List, Tuple

ARTICLE_NUMBER_PATTERN = re.compile(r'[0-9]{5,6}\.[0-9]{2,3}')

MAX_SEGMENT_LENGTH = 100
MIN_DESCRIPTION_LENGTH = 5


def normalize_text(text: str) -> str:
    """
    Remove decorative noise from a text fragment.

    Args:
        text: Raw text fragment

    Returns:
        Text without dot leaders, with single spaces and no trailing comma
    """
    text = re.sub(r'\.{3,}', '', text)  # Dot leaders
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r',$', '', text)
    return text.strip()


def split_multi_article(line: str) -> List[Tuple[str, str]]:
    """
    Split a line on every article number it contains.

    The text following each number, up to the next number or the end of the
    line, becomes that article's description.

    Args:
        line: Line containing one or more article numbers

    Returns:
        (article_number, description) pairs in line order, dropping any whose
        description is too short to be meaningful
    """
    numbers = ARTICLE_NUMBER_PATTERN.findall(line)
    segments = ARTICLE_NUMBER_PATTERN.split(line)

    articles = []
    for index, article_number in enumerate(numbers):
        description = segments[index + 1].strip()
        description = re.sub(r'^[,\s]+', '', description)
        description = re.sub(r'\s+', ' ', description)
        if len(description) > MAX_SEGMENT_LENGTH:
            description = description[:MAX_SEGMENT_LENGTH].strip()

        description = normalize_text(description)
        if len(description) > MIN_DESCRIPTION_LENGTH:
            articles.append((article_number, description))

    return articles
