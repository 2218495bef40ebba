from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    TEXT = auto()
    START_PARAMETER = auto()
    NEXT_COMPONENT = auto()
    END_PARAMETER = auto()
    ESCAPE = auto()
    COMMENT = auto()

    @classmethod
    def textual(cls):
        """
        :returns: The kinds of tokens that contribute text to a component.
        """
        return (cls.TEXT, cls.ESCAPE)
