# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Pass 1: populate the symbol table.
#
# Labels get the address of the next instruction that will actually be emitted,
# and lower/mixed-case @symbols that aren't already known get the next free RAM
# slot. This has to run over the whole program before pass 2 looks anything up,
# because a label can be used before it is declared. A lower-case label used
# before its declaration is briefly allocated as a variable; the declaration
# then takes the name back.

import logging
from typing import List, Optional

from .classifier import Operation
from .errors import AssemblerError
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


def resolve(ops: List[Operation], table: Optional[SymbolTable] = None) -> SymbolTable:

    if table is None:
        table = SymbolTable()

    pc = 0  # Program counter

    for i in range(0, len(ops)):
        o = ops[i]

        match o['cType']:

            case 'L':
                if not table.add_label(o['symbol'], pc):
                    table.warnings.append((o['line'], f'Symbol [{o["symbol"]}] previously defined; first definition kept'))
                continue    # labels don't take up a slot

            case 'S':
                if o['variable']:
                    try:
                        table.allocate(o['symbol'])
                    except AssemblerError as oops:
                        oops.line = o['line']
                        table.errors.append(oops)

        pc += 1

    table.program_length = pc

    logger.debug(f'Pass 1 done: {pc} instruction(s), {len(table.address_labels)} label(s), '
                 f'{len(table.implicit_variables)} variable(s)')

    return table.freeze()
