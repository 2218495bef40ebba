import io
import pathlib
from contextlib import contextmanager

from _msdio.parser import MSDParser
from _msdio.tokenizer import MSDTokenizer


def parse_msd(source, escapes=True, ignore_stray_text=False):
    """
    Lazily parse MSD data from a string, bytes or an open stream,
    ie. parameters = list(parse_msd("#TITLE:Springtime;")).

    :param source: MSD contents as str or bytes, or a text or byte
        stream to read the contents from.
    :param escapes: Whether backslash escapes are enabled.
    :param ignore_stray_text: Whether to discard text outside of parameters
        instead of raising StrayTextError.
    :returns: An MSDParser, the iterator of parameters in the source.
    """
    if isinstance(source, str):
        source = io.StringIO(source, newline="")
    elif isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    tokenizer = MSDTokenizer(source, escapes=escapes)
    return MSDParser(tokenizer, ignore_stray_text=ignore_stray_text)


def read(filelike, escapes=True, ignore_stray_text=False):
    """
    Reads an MSD file and returns the list of its parameters,
    ie. parameters = read("/my/file.sm").

    Parameters are returned in document order, and keys may repeat.

    :raises StrayTextError: If the file contains text outside of parameters,
        unless ignore_stray_text is set.
    """
    with lazy_read(
        filelike, escapes=escapes, ignore_stray_text=ignore_stray_text
    ) as parameters:
        return list(parameters)


@contextmanager
def lazy_read(filelike, escapes=True, ignore_stray_text=False):
    """
    Context manager giving an iterator of the parameters in an MSD file.

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened stream). Paths are opened on entry and closed on exit.
    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        yield parse_msd(
            file_stream, escapes=escapes, ignore_stray_text=ignore_stray_text
        )
    finally:
        if did_open:
            file_stream.close()
