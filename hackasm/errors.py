# coding: utf-8

#---------------------------------------------------------------------------------------
# (C)2023 Robert Woodhead. Creative Commons Attribution License
#---------------------------------------------------------------------------------------

# Exceptions raised while assembling. Every one of them is fatal: the run is
# aborted and no .hack file is written.

from typing import List, Optional, Tuple

Line = Tuple[int, str, str]  # Line number, cleaned line, original (unmunged) line


class AssemblerError(Exception):
    """Base class for everything that can go wrong during assembly."""

    def __init__(self, message: str, line: Optional[Line] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f'line {self.line[0]}: {self.message}'


class UnknownComputationError(AssemblerError):
    pass


class UnknownJumpError(AssemblerError):
    pass


class UndefinedSymbolError(AssemblerError):

    def __init__(self, symbol: str, line: Optional[Line] = None):
        super().__init__(f'Undefined symbol [{symbol}]', line)
        self.symbol = symbol


class AddressRangeError(AssemblerError):
    pass


class SourceReadError(AssemblerError):
    pass


class AssemblyAborted(AssemblerError):
    """Raised at the end of pass two with every error found in either pass. Each
    error carries the source line it came from."""

    def __init__(self, errors: List[AssemblerError], warnings: Optional[List[Tuple[Line, str]]] = None):
        super().__init__(f'Assembly aborted -- {len(errors)} error(s)')
        self.errors = errors
        self.warnings = warnings or []
