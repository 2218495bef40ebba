import codecs

from _msdio.tokenizer.errors import SourceReadError
from _msdio.tokenizer.patterns import POUND, first_match, lexer_patterns
from _msdio.tokenizer.token import Token
from _msdio.tokenizer.token_kind import TokenKind

LINE_TERMINATORS = ("\n", "\r")


class MSDTokenizer:
    """
    A lazy tokenizer of MSD documents, ie. an iterator of tokens
    read from a stream of MSD contents.

    >>> tokenizer = MSDTokenizer(io.StringIO("#TITLE:Springtime;"))
    >>> [token.kind.name for token in tokenizer]
    ['START_PARAMETER', 'TEXT', 'NEXT_COMPONENT', 'TEXT', 'END_PARAMETER']

    The stream is read in chunks of buffer_size, and a token is only matched
    once the buffer holds a line terminator or the rest of the stream. A match
    that reaches the end of the buffer and could be extended by more input
    (text, comments and slashes) waits for the next chunk, so the tokens
    do not depend on the chunk size.
    """

    def __init__(self, stream, escapes=True, buffer_size=4096, encoding="utf-8"):
        """
        :param stream: A byte or text stream containing MSD data.
        :param escapes: Whether backslash escapes are enabled. When disabled,
            backslash is an ordinary character.
        :param buffer_size: Number of bytes (or characters) read from the
            stream at a time.
        :param encoding: Encoding used to decode byte streams.
        """
        if buffer_size < 1:
            raise ValueError(f"buffer_size has to be positive, got {buffer_size}")
        self.stream = stream
        self.escapes = bool(escapes)
        self.buffer_size = buffer_size
        self.patterns = lexer_patterns(self.escapes)
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

        self.buffer = ""
        self.position = 0
        self.inside_parameter = False
        self.done_reading = False
        self.last_text = None

        # Index just past the last line terminator in buffer, 0 if there is none
        self._terminator_end = 0
        self._read_error = None

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self):
        """
        :returns: The next token of the stream, or None when both the stream
            and the buffer are exhausted.
        :raises SourceReadError: If reading from the stream failed, now or
            on an earlier call.
        """
        if self._read_error is not None:
            raise self._read_error

        while self.position < len(self.buffer) or not self.done_reading:
            if self.done_reading or self.position < self._terminator_end:
                token = self.match_buffer()
                if token is not None:
                    return token
            self.read_chunk()
        return None

    def read_chunk(self):
        try:
            chunk = self.stream.read(self.buffer_size)
        except (OSError, ValueError) as err:
            self._read_error = SourceReadError(f"Could not read MSD stream: {err}")
            raise self._read_error from err

        if not chunk:
            self.done_reading = True
            text = self._decoder.decode(b"", final=True)
        elif isinstance(chunk, (bytes, bytearray)):
            text = self._decoder.decode(chunk)
        else:
            text = chunk

        self.buffer = self.buffer[self.position :] + text
        self.position = 0
        self._terminator_end = (
            max(self.buffer.rfind(terminator) for terminator in LINE_TERMINATORS) + 1
        )

    def match_buffer(self):
        """
        Match the first applicable pattern at the current position of the
        buffer.

        :returns: The matched token, or None if more of the stream has to be
            read to decide the token.
        """
        pattern, match = first_match(self.patterns, self.buffer, self.position)
        if pattern is None:
            if not self.done_reading:
                return None
            # A backslash at the very end of the stream escapes nothing
            return self.take(TokenKind.TEXT, self.position + 1)

        end = match.end()
        if pattern.open_ended and end == len(self.buffer) and not self.done_reading:
            return None

        kind = pattern.kind(self.inside_parameter)

        # Recovery from missing ';' at the end of a line
        if (
            pattern is POUND
            and kind == TokenKind.TEXT
            and self.last_text is not None
            and self.last_text.endswith(LINE_TERMINATORS)
        ):
            kind = TokenKind.START_PARAMETER

        return self.take(kind, end)

    def take(self, kind, end):
        """
        Remove the text up to end from the buffer and update the lexing
        context for a token of the given kind.
        """
        text = self.buffer[self.position : end]
        self.position = end

        if kind == TokenKind.START_PARAMETER:
            self.inside_parameter = True
        elif kind == TokenKind.END_PARAMETER:
            self.inside_parameter = False
        elif kind == TokenKind.TEXT:
            self.last_text = text

        return Token(kind, text)
