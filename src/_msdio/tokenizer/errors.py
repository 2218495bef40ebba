class SourceReadError(OSError):
    """
    Raised by the tokenizer when reading from the underlying stream fails.
    The tokenizer cannot continue after this error, and raises it again on
    any further request for tokens.
    """

    pass
