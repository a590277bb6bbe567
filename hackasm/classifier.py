# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Classifies cleaned lines and parses them into Operation dictionaries. Rather
# than use a rigid class to hold all the information we glean from parsing, a
# name:value dictionary is used; both passes read the same dictionaries, so an
# instruction is only ever classified once.
#
# Operation cTypes are:
#
# L=Label declaration, N=Numeric @-op, S=Symbolic @-op, C=Computation.

from typing import Dict, Any

from .errors import Line

Operation = Dict[str, Any]  # An assembler operation, one per non-blank line.

LABEL = 'L'
NUMERIC = 'N'
SYMBOLIC = 'S'
COMPUTATION = 'C'

DECIMALCHARS = set('0123456789')


def is_number(s: str) -> bool:
    return s != '' and all(c in DECIMALCHARS for c in s)


# Symbols with no lower-case letters in them (LOOP, END_1, R5...) are assumed to
# be labels and are never allocated as variables. Anything with lower-case
# letters in it is a variable.

def is_variable(symbol: str) -> bool:
    return symbol != symbol.upper()


def classify(o: str) -> str:

    if o[0] == '(':
        return LABEL
    elif o[0] == '@':
        return NUMERIC if is_number(o[1:]) else SYMBOLIC
    else:
        return COMPUTATION


def label_name(o: str) -> str:
    return o[o.find('(')+1:o.rfind(')')]


# Split a computation into its dest=comp;jump fields. Dest and jump are None
# when the separator is missing.

def split_computation(o: str):

    dest = None
    jump = None

    if '=' in o:
        dest, o = o.split('=', 1)
    if ';' in o:
        o, jump = o.split(';', 1)

    return dest, o, jump


def operation(line: Line) -> Operation:

    o = line[1]

    match classify(o):

        case 'L':
            return {'cType': LABEL, 'symbol': label_name(o), 'line': line}

        case 'N':
            return {'cType': NUMERIC, 'constant': int(o[1:]), 'line': line}

        case 'S':
            return {'cType': SYMBOLIC, 'symbol': o[1:], 'variable': is_variable(o[1:]), 'line': line}

        case _:
            dest, comp, jump = split_computation(o)
            return {'cType': COMPUTATION, 'dest': dest, 'comp': comp, 'jump': jump, 'line': line}
