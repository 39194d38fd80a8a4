"""Source analyzers built on tree-sitter grammars."""

from .docblocks import DocblockReader
from .exports import ExportScanner
from .parsing import ParseError, SourceParser

__all__ = ["DocblockReader", "ExportScanner", "ParseError", "SourceParser"]
