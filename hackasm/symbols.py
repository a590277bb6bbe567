# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# The symbol table. One is created per assembly run, seeded with the predefined
# HACK symbols, filled in by pass 1 and then frozen for pass 2. It also carries
# the run's pass 1 errors and warnings, so the parsed operations themselves are
# never written to.

import shutil
import logging
from typing import List, Dict, Tuple

from .errors import AssemblerError, UndefinedSymbolError, Line

logger = logging.getLogger(__name__)

Values = Dict[str, int]     # Name:Values pairs, for example in symbol tables

VARIABLE_BASE = 16          # Locations 0-15 are reserved, so 16 is the first available
MAXRAM = 65536              # Symbol values are 16-bit addresses

PREDEFINED: Values = {

    'R0': 0,
    'R1': 1,
    'R2': 2,
    'R3': 3,
    'R4': 4,
    'R5': 5,
    'R6': 6,
    'R7': 7,
    'R8': 8,
    'R9': 9,
    'R10': 10,
    'R11': 11,
    'R12': 12,
    'R13': 13,
    'R14': 14,
    'R15': 15,

    'SP': 0,
    'LCL': 1,
    'ARG': 2,
    'THIS': 3,
    'THAT': 4,

    'SCREEN': 16384,
    'KBD': 24576,

}


class SymbolTable:
    """Name to address mapping for a single assembly run.

    Inserts are idempotent: once a name is bound, later variable references
    and label re-declarations leave its address alone, and the predefined
    symbols can never be overwritten. The one exception is a label declared
    after it was already used as a variable (@loop ... (loop)); the label
    takes the name over, and the RAM slot it had is not handed out again.
    """

    def __init__(self):
        self.symbols: Values = dict(PREDEFINED)
        self.ram = VARIABLE_BASE
        self.frozen = False
        self.program_length = 0

        # Keep some lists of symbols of particular types. This lets us print
        # a nicely formatted symbol table at the end of assembly.

        self.predefined_symbols: List[str] = list(PREDEFINED.keys())
        self.address_labels: List[str] = []
        self.implicit_variables: List[str] = []

        self.errors: List[AssemblerError] = []
        self.warnings: List[Tuple[Line, str]] = []

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __getitem__(self, name: str) -> int:
        return self.lookup(name)

    def __len__(self) -> int:
        return len(self.symbols)

    def _check_mutable(self, name: str):
        if self.frozen:
            raise AssemblerError(f'Symbol table is frozen; cannot bind [{name}]')

    def add_label(self, name: str, address: int) -> bool:
        """Bind a label to an address. Returns False if the name was already
        a label or a predefined symbol."""

        self._check_mutable(name)

        if name in self.implicit_variables:
            self.implicit_variables.remove(name)
            logger.debug(f'Variable {name} ({self.symbols[name]}) is really a label')
        elif name in self.symbols:
            return False

        self.symbols[name] = address
        self.address_labels.append(name)
        logger.debug(f'Label {name} = {address}')
        return True

    def allocate(self, name: str) -> int:
        """Give a variable the next free RAM slot, unless it already has an address."""

        self._check_mutable(name)

        if name not in self.symbols:
            if self.ram >= MAXRAM:
                raise AssemblerError(f'Out of RAM (data) memory allocating [{name}]')
            self.symbols[name] = self.ram
            self.ram += 1
            self.implicit_variables.append(name)
            logger.debug(f'Variable {name} = {self.symbols[name]}')

        return self.symbols[name]

    def lookup(self, name: str) -> int:
        if name not in self.symbols:
            raise UndefinedSymbolError(name)
        return self.symbols[name]

    def freeze(self) -> 'SymbolTable':
        self.frozen = True
        return self


# Print some of the symbols as a listing, filled column by column, using as
# many columns as will fit across the terminal.

def print_symbols(table: SymbolTable, names: List[str], title: str, byname: bool):

    if not names:
        return

    if byname:
        names = sorted(names, key=str.upper)
    else:
        names = sorted(names, key=lambda s: table.symbols[s])

    name_width = max(len(s) for s in names)
    entries = [f'{s:{name_width}} {table.symbols[s]:5}' for s in names]
    entry_width = len(entries[0])
    separator = ' | '

    width = shutil.get_terminal_size((80, 24)).columns
    fit = max(1, (width + len(separator)) // (entry_width + len(separator)))
    rows = -(-len(entries) // fit)
    columns = [entries[i:i+rows] for i in range(0, len(entries), rows)]

    print(title + (' (by name)' if byname else ' (by value)'))
    print(separator.join(['-'*name_width + ' -----'] * len(columns)))

    for row in range(0, rows):
        print(separator.join([c[row] for c in columns if row < len(c)]))

    print()


def print_symbol_tables(table: SymbolTable):

    print()
    print_symbols(table, table.predefined_symbols, 'Predefined Symbols', byname=True)
    print_symbols(table, table.address_labels, 'Branch Addresses', byname=True)
    print_symbols(table, table.address_labels, 'Branch Addresses', byname=False)
    print_symbols(table, table.implicit_variables, 'Implicitly defined variables (in @statements)', byname=True)
