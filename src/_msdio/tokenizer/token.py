from dataclasses import dataclass

from _msdio.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in an MSD document. The text is exactly what was matched in
    the stream, so the texts of all tokens concatenate to the document.
    """

    kind: TokenKind
    text: str

    @property
    def value(self):
        """
        :returns: The text the token contributes to a component. For
            kind=TokenKind.ESCAPE this is the escaped character, ie. ':'
            for the token text '\\:'. For other kinds it is the text itself.
        """
        if self.kind == TokenKind.ESCAPE:
            return self.text[1:]
        return self.text
