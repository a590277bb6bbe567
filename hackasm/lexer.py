# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Turns raw HACK source into a list of cleaned instruction lines. Comments run
# from the first // to end of line, all whitespace is insignificant, and lines
# that end up empty are dropped. Instructions never span lines.

import logging
from typing import Iterable, List

from .errors import Line

logger = logging.getLogger(__name__)

COMMENT = '//'


def clean(line: str) -> str:

    # Kill the comment first, then all the whitespace (evil trick, but it makes
    # parsing MUCH easier).

    return ''.join(line.split(COMMENT, 1)[0].split())


def tokenize(lines: Iterable[str]) -> List[Line]:
    """Return (line number, cleaned line, original line) tuples for every line
    that still has something in it once comments and whitespace are gone.
    Line numbers are 1-based so they can be quoted back in diagnostics."""

    cleaned = [(i+1, clean(l), l.rstrip('\r\n')) for i, l in enumerate(lines)]
    cleaned = [l for l in cleaned if l[1] != '']

    logger.debug(f'Lexer kept {len(cleaned)} instruction line(s)')

    return cleaned


# Only \n ends a line; form feeds, vertical tabs and the like are whitespace.

def clean_lines(text: str) -> List[Line]:
    return tokenize(text.split('\n'))


def instructions(text: str) -> List[str]:
    return [l[1] for l in clean_lines(text)]
