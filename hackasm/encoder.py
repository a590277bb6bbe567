# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Pass 2: generate a 16-bit word for every operation that isn't a label, using
# the symbol table that pass 1 built.

import logging
from typing import List, Dict, Optional

from .classifier import Operation
from .errors import (AssemblerError, AssemblyAborted, AddressRangeError,
                     UnknownComputationError, UnknownJumpError)
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

Values = Dict[str, int]

MAXADDRESS = 32767          # @-instructions only have 15 bits for the value

# C instruction template.

CINSTR = 0b1110000000000000

# The a bit: comp reads M rather than A.

WIDE = 0b0001000000000000

# Opcodes for comps (6 bits, shifted up past the dests and jmps). The A and M
# spellings of an operation share the same bits; the a bit tells them apart.

COMPS: Values = {

    '0':    0b101010000000,
    '1':    0b111111000000,
    '-1':   0b111010000000,
    'D':    0b001100000000,
    'A':    0b110000000000,
    'M':    0b110000000000,
    '!D':   0b001101000000,
    '!A':   0b110001000000,
    '!M':   0b110001000000,
    '-D':   0b001111000000,
    '-A':   0b110011000000,
    '-M':   0b110011000000,
    'D+1':  0b011111000000,
    'A+1':  0b110111000000,
    'M+1':  0b110111000000,
    'D-1':  0b001110000000,
    'A-1':  0b110010000000,
    'M-1':  0b110010000000,
    'D+A':  0b000010000000,
    'D+M':  0b000010000000,
    'D-A':  0b010011000000,
    'D-M':  0b010011000000,
    'A-D':  0b000111000000,
    'M-D':  0b000111000000,
    'D&A':  0b000000000000,
    'D&M':  0b000000000000,
    'D|A':  0b010101000000,
    'D|M':  0b010101000000,

}

# Destination bits (3 lsbits for jmps). Each register is checked on its own,
# so AM, MA and AMMA all mean the same thing.

DESTS: Values = {

    'A':    0b100000,
    'D':    0b010000,
    'M':    0b001000,

}

# Opcodes for jmps.

JMPS: Values = {

    'JGT':  0b001,
    'JEQ':  0b010,
    'JGE':  0b011,
    'JLT':  0b100,
    'JNE':  0b101,
    'JLE':  0b110,
    'JMP':  0b111

}


def address(v: int) -> int:

    if (v < 0) or (MAXADDRESS < v):
        raise AddressRangeError(f'@ value {v} out of 0..{MAXADDRESS} range')
    return v


def comp_bits(comp: str) -> int:

    if comp not in COMPS:
        raise UnknownComputationError(f'Unknown alu operation [{comp}]')
    return (WIDE if 'M' in comp else 0) + COMPS[comp]


def dest_bits(dest: Optional[str]) -> int:

    if dest is None:
        return 0
    return sum([bits for reg, bits in DESTS.items() if reg in dest])


def jump_bits(jump: Optional[str]) -> int:

    if jump is None:
        return 0
    if jump not in JMPS:
        raise UnknownJumpError(f'Unknown jump [{jump}]')
    return JMPS[jump]


# Generate the code for an Operation. Labels have no code.

def codegen(o: Operation, table: SymbolTable) -> Optional[int]:

    match o['cType']:

        case 'N':   # @-Instruction, literal
            return address(o['constant'])

        case 'S':   # @-Instruction, symbol
            return address(table.lookup(o['symbol']))

        case 'C':   # C-Instruction
            return CINSTR + comp_bits(o['comp']) + dest_bits(o['dest']) + jump_bits(o['jump'])

    return None


def encode(ops: List[Operation], table: SymbolTable) -> List[str]:
    """Encode every operation, in order, as a 16-character binary string.

    Every operation is tried so that all the errors in a program can be
    reported at once; if any of them (or pass 1) failed, AssemblyAborted is
    raised and nothing is returned.
    """

    failed = [e.line for e in table.errors]
    errors = list(table.errors)
    prog = []

    for o in ops:
        if o['line'] in failed:
            continue
        try:
            code = codegen(o, table)
        except AssemblerError as oops:
            oops.line = o['line']
            errors.append(oops)
            continue
        if code is not None:
            prog.append('{:016b}'.format(code))
            logger.debug(prog[-1] + '\t' + o['line'][1])

    if errors:
        errors.sort(key=lambda e: e.line[0])
        raise AssemblyAborted(errors, table.warnings)

    return prog
