import inspect
import pathlib
from functools import wraps

from _msdio.parameter import Parameter


def takes_stream(i, mode):
    """
    Decorator for functions taking a text stream as the i'th argument, which
    allows passing a path (str or pathlib.Path) instead, positionally or by
    keyword. The path is opened with the given mode as utf-8, without newline
    translation.
    """

    def decorator(func):
        name = list(inspect.signature(func).parameters)[i]

        @wraps(func)
        def wrapper(*args, **kwargs):
            if len(args) > i:
                filelike = args[i]
            else:
                filelike = kwargs.get(name)

            if isinstance(filelike, (str, pathlib.Path)):
                with open(filelike, mode, encoding="utf-8", newline="") as f:
                    if len(args) > i:
                        return func(*args[:i], f, *args[i + 1 :], **kwargs)
                    return func(*args, **{**kwargs, name: f})
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


@takes_stream(0, "w")
def write(filelike, parameters, escapes=True):
    """
    Writes the given parameters to the file, one parameter per line.

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param parameters: Iterable of Parameter, or of lists of components,
        ie. [("TITLE", "Springtime"), ("ARTIST", "Kommisar")].
    :param escapes: Whether to escape special characters in components.
    :raises SerializeError: If escapes is False and a component contains
        one of the special substrings '//', ':' or ';'.
    """
    for parameter in parameters:
        if not isinstance(parameter, Parameter):
            parameter = Parameter(list(parameter))
        parameter.serialize(filelike, escapes)
        filelike.write("\n")
