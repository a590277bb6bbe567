# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Usage: hackasm [-s] [-d] {asm input file}
#
# Generates .hack output file of the same name; if -s switch is used,
# some handy symbol tables are produced.
#
# The source is read in full, cleaned up by the lexer and parsed into operations,
# then run through two passes: pass 1 builds the symbol table (labels and
# implicitly declared variables), pass 2 generates the code. If anything goes
# wrong, every error found is reported and no .hack file is written.

import os
import sys
import logging
import argparse
from typing import List, Tuple, Optional

from .classifier import Operation, operation
from .encoder import encode
from .errors import AssemblerError, AssemblyAborted, SourceReadError, Line
from .lexer import clean_lines
from .resolver import resolve
from .symbols import SymbolTable, print_symbol_tables

logger = logging.getLogger(__name__)

MAXROM = 32768              # Limit of rom space


def parse(text: str) -> List[Operation]:
    return [operation(l) for l in clean_lines(text)]


# Run both passes over parsed operations. Returns the code and the symbol table
# it was built with; a fresh table is made every time, so runs don't leak into
# each other.

def translate(ops: List[Operation]) -> Tuple[List[str], SymbolTable]:

    logger.debug('Pass 1')
    table = resolve(ops)

    logger.debug('Pass 2')
    prog = encode(ops, table)

    if len(prog) > MAXROM:
        raise AssemblerError(f'Program too large! ({len(prog)} of {MAXROM} words)')

    return prog, table


def assemble(text: str) -> List[str]:
    return translate(parse(text))[0]


def output_name(fname: str) -> str:
    return os.path.splitext(fname)[0] + '.hack'


def read_source(fname: str) -> str:

    try:
        with open(fname) as asmfile:
            return asmfile.read()
    except (OSError, UnicodeDecodeError) as oops:
        raise SourceReadError(f'Cannot read input file [{fname}]: {oops}') from oops


def write_hack(oname: str, prog: List[str]):

    with open(oname, 'w') as hackfile:
        for p in prog:
            hackfile.write(p + '\n')


def assemble_file(fname: str, print_symbol_table: bool = False, oname: Optional[str] = None) -> List[str]:
    """Assemble fname into oname (fname with a .hack extension by default).

    Raises AssemblerError (usually AssemblyAborted) without touching the output
    file if the program can't be assembled.
    """

    prog, table = translate(parse(read_source(fname)))

    if print_symbol_table:
        print_symbol_tables(table)

    write_hack(oname or output_name(fname), prog)

    return prog


def report(label: str, line: Line, message: str):
    print(f'{label} in line {line[0]}: {message}')
    print('\t' + line[2].strip())


def main(argv: Optional[List[str]] = None) -> int:

    parser = argparse.ArgumentParser(
                    prog = 'hackasm',
                    description = 'Assembles HACK programs',
                    epilog = 'Results are stored in a .hack file with the same name as the .asm file')

    parser.add_argument('filename', help='The HACK .asm file to be assembled')
    parser.add_argument('-s', '--symbols', action='store_true', required=False, help='prints helpful symbol tables')
    parser.add_argument('-d', '--debug', action='store_true', required=False, help='logs each pass to stderr')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr
    )

    oname = output_name(args.filename)

    try:
        prog, table = translate(parse(read_source(args.filename)))
    except AssemblyAborted as aborted:
        for e in aborted.errors:
            report('Error', e.line, e.message)
        for line, message in aborted.warnings:
            report('Warning', line, message)
        print(f'Assembly aborted -- {len(aborted.errors)} error(s) and {len(aborted.warnings)} warning(s) detected.')
        return 1
    except AssemblerError as oops:
        print(f'Error: {oops}')
        return 1

    for line, message in table.warnings:
        report('Warning', line, message)

    if args.symbols:
        print_symbol_tables(table)

    write_hack(oname, prog)

    pc = table.program_length
    ram = table.ram
    print(f'Program length: {pc} (of {MAXROM}, {int(pc*100/MAXROM)}%), RAM usage: {ram}')
    print('Assembly successful - results written to ' + oname)

    return 0


if __name__ == '__main__':
    sys.exit(main())
