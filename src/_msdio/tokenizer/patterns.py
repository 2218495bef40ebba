import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from _msdio.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class LexerPattern:
    """
    A pattern matched at the start of the tokenizer buffer.

    :param regex: Compiled pattern, matched with regex.match.
    :param outside_kind: Kind of the token when outside a parameter.
    :param inside_kind: Kind of the token when inside a parameter.
    :param escapes: True or False if the pattern only applies when escapes are
        enabled or disabled, respectively, None if it always applies.
    :param open_ended: Whether more input could extend a match which reaches the
        end of the buffer, ie. a text run or a comment.
    """

    regex: re.Pattern
    outside_kind: TokenKind
    inside_kind: TokenKind
    escapes: Optional[bool] = None
    open_ended: bool = False

    def kind(self, inside_parameter):
        if inside_parameter:
            return self.inside_kind
        return self.outside_kind


ESCAPED_TEXT = LexerPattern(
    re.compile(r"[^\\/:;#]+"), TokenKind.TEXT, TokenKind.TEXT, True, True
)
UNESCAPED_TEXT = LexerPattern(
    re.compile(r"[^/:;#]+"), TokenKind.TEXT, TokenKind.TEXT, False, True
)
POUND = LexerPattern(re.compile("#"), TokenKind.START_PARAMETER, TokenKind.TEXT)
COLON = LexerPattern(re.compile(":"), TokenKind.TEXT, TokenKind.NEXT_COMPONENT)
SEMICOLON = LexerPattern(re.compile(";"), TokenKind.TEXT, TokenKind.END_PARAMETER)
ESCAPE = LexerPattern(
    re.compile(r"\\.", re.DOTALL), TokenKind.TEXT, TokenKind.ESCAPE, True
)
COMMENT = LexerPattern(
    re.compile(r"//[^\r\n]*"), TokenKind.COMMENT, TokenKind.COMMENT, None, True
)
# A slash at the end of the buffer could still turn out to start a comment
SLASH = LexerPattern(re.compile("/"), TokenKind.TEXT, TokenKind.TEXT, None, True)

# In order of priority, the first pattern to match wins.
LEXER_PATTERNS = (
    ESCAPED_TEXT,
    UNESCAPED_TEXT,
    POUND,
    COLON,
    SEMICOLON,
    ESCAPE,
    COMMENT,
    SLASH,
)


@lru_cache(maxsize=None)
def lexer_patterns(escapes):
    """
    :param escapes: Whether backslash escapes are enabled.
    :returns: The patterns applying for the given escape mode, in order of
        priority.
    """
    return tuple(
        pattern
        for pattern in LEXER_PATTERNS
        if pattern.escapes is None or pattern.escapes == escapes
    )


def first_match(patterns, buffer, position=0):
    """
    :returns: Tuple of the first of the patterns matching at the given position
        of buffer and the match, or (None, None) if no pattern matches.
    """
    for pattern in patterns:
        match = pattern.regex.match(buffer, position)
        if match is not None:
            return pattern, match
    return None, None
