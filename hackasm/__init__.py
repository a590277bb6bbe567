from .assembler import assemble, assemble_file, translate, parse, output_name, main
from .classifier import classify, operation, LABEL, NUMERIC, SYMBOLIC, COMPUTATION
from .encoder import encode
from .errors import (AssemblerError, AssemblyAborted, AddressRangeError, SourceReadError,
                     UndefinedSymbolError, UnknownComputationError, UnknownJumpError)
from .lexer import clean_lines, instructions
from .resolver import resolve
from .symbols import SymbolTable, PREDEFINED
