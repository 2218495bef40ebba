"""
A parser consumes from an iterator of tokens (see _msdio.tokenizer) and
generates the parameters of the MSD document, in document order.

The parser is forgiving: a missing ';' is recovered from by closing the
parameter at the next '#' or at the end of the document. Text between
parameters is the only error it reports, and parsing can continue after it.
"""

import warnings

from _msdio.parameter import Parameter
from _msdio.tokenizer.token_kind import TokenKind

BYTE_ORDER_MARK = "\ufeff"


class MSDParserError(ValueError):
    """
    Base class for errors reported by the parser.
    """

    pass


class StrayTextError(MSDParserError):
    """
    Raised by the parser when non-whitespace text is found outside of any
    parameter.

    :param character: The first non-whitespace character of the stray text.
    :param last_key: Key of the last parameter before the stray text, None
        at the start of the document.
    """

    def __init__(self, character, last_key=None):
        self.character = character
        self.last_key = last_key
        super().__init__(f"stray '{character}' encountered {self.location}")

    @property
    def location(self):
        if self.last_key is None:
            return "at start of document"
        return f"after '{self.last_key}' parameter"


class MSDWarning(UserWarning):
    """
    Warning for recoverable mistakes in MSD documents.
    """

    pass


def stray_character(text):
    """
    :returns: The first character of text that is neither whitespace nor a
        byte order mark, or None if there is no such character.
    """
    return next(
        (c for c in text if not c.isspace() and c != BYTE_ORDER_MARK), None
    )


class MSDParser:
    """
    A lazy parser of MSD documents, ie. consumes the output of
    _msdio.tokenizer and is an iterator of parameters.

    >>> buffer = io.StringIO("#VERSION:0.83;\\n#TITLE:Springtime;")
    >>> parser = MSDParser(MSDTokenizer(buffer))
    >>> next(parser)
    Parameter(components=['VERSION', '0.83'])
    >>> next(parser).value
    'Springtime'

    Stray text raises StrayTextError from next(), after which the parser
    continues with the remainder of the document:

    >>> parser = MSDParser(MSDTokenizer(io.StringIO("#A:B;n#C:D;")))
    >>> next(parser)
    Parameter(components=['A', 'B'])
    >>> next(parser)
    Traceback (most recent call last):
    StrayTextError: stray 'n' encountered after 'A' parameter
    >>> next(parser)
    Parameter(components=['C', 'D'])
    """

    def __init__(self, tokens, ignore_stray_text=False):
        """
        :param tokens: iterator of tokens, ie. MSDTokenizer.
        :param ignore_stray_text: Whether to silently discard text
            outside of parameters instead of raising StrayTextError.
        """
        self.tokens = iter(tokens)
        self.ignore_stray_text = ignore_stray_text

        self.components = []
        self.inside_parameter = False
        self.last_key = None
        self.has_warned = False

    def __iter__(self):
        return self

    def __next__(self):
        parameter = self.next_parameter()
        if parameter is None:
            raise StopIteration
        return parameter

    def next_parameter(self):
        """
        :returns: The next parameter, or None if there are no more parameters.
        :raises StrayTextError: If non-whitespace text is found between
            parameters, unless ignore_stray_text is set.
        """
        for token in self.tokens:
            if token.kind in TokenKind.textual():
                if self.inside_parameter:
                    self.components[-1] += token.value
                else:
                    self.check_stray_text(token.text)
            elif token.kind == TokenKind.START_PARAMETER:
                if self.inside_parameter:
                    self.warn_missing_terminator()
                    parameter = self.finish_parameter()
                    self.start_parameter()
                    return parameter
                self.start_parameter()
            elif token.kind == TokenKind.END_PARAMETER:
                if self.inside_parameter:
                    return self.finish_parameter()
            elif token.kind == TokenKind.NEXT_COMPONENT:
                if self.inside_parameter:
                    self.components.append("")

        # The last parameter is missing its ';'
        if self.inside_parameter:
            return self.finish_parameter()

        return None

    def check_stray_text(self, text):
        character = stray_character(text)
        if character is None or self.ignore_stray_text:
            return
        raise StrayTextError(character, self.last_key)

    def start_parameter(self):
        self.inside_parameter = True
        self.components.append("")

    def finish_parameter(self):
        parameter = Parameter(self.components)
        self.components = []
        self.inside_parameter = False
        self.last_key = parameter.key
        return parameter

    def warn_missing_terminator(self):
        if self.has_warned:
            return
        self.has_warned = True
        warnings.warn(
            f"MSD parameter {self.components[0]!r} is not terminated by ';', "
            "it is ended by the following '#'.",
            MSDWarning,
        )
