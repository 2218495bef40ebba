import msdio.version
from _msdio.parameter import Parameter, SerializeError
from _msdio.parser import MSDParser, MSDParserError, MSDWarning, StrayTextError
from _msdio.reading import lazy_read, parse_msd, read
from _msdio.tokenizer import MSDTokenizer, SourceReadError, Token, TokenKind
from _msdio.writing import write

__author__ = """MSDio developers"""

__version__ = msdio.version.version

__all__ = [
    "MSDParser",
    "MSDParserError",
    "MSDTokenizer",
    "MSDWarning",
    "Parameter",
    "SerializeError",
    "SourceReadError",
    "StrayTextError",
    "Token",
    "TokenKind",
    "lazy_read",
    "parse_msd",
    "read",
    "write",
]
