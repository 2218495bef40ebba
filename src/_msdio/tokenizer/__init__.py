"""
In this module, a tokenizer turns a stream of MSD text into a sequence of
tokens. Tokens are produced one at a time on request (see
MSDTokenizer.next_token), and the stream is only read as far as needed to
decide the next token.

MSD is lexed with a small, fixed table of patterns tried in priority order
(see patterns.py). The same character may give different token kinds depending
on whether the tokenizer believes it is inside a parameter, ie. ':' separates
components only between '#' and ';'.

Both byte streams and text streams may be given. Byte streams are decoded
incrementally, so multi-byte characters split between reads are kept intact.
"""

from .errors import SourceReadError
from .msd_tokenizer import MSDTokenizer
from .token import Token
from .token_kind import TokenKind

__all__ = ["MSDTokenizer", "SourceReadError", "Token", "TokenKind"]
