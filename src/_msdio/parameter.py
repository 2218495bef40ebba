"""
A parameter is one `#...;` unit of an MSD document: an ordered list of
components, the first being the key and the second the value.
"""

import io
import re
from dataclasses import dataclass, field
from typing import List, Optional


class SerializeError(ValueError):
    """
    Raised when a component cannot be written as MSD, ie. when it contains
    a special substring and escapes are disabled.
    """

    pass


# Substrings which would be read back as something other than text
MUST_ESCAPE = ("//", ":", ";")

ESCAPE_PATTERN = re.compile(r"[\\:;#]|/(?=/)")


def serialize_component(component, escapes=True):
    """
    Serialize a component (key or value) of a parameter.

    With escapes, backslashes and the characters ':', ';' and '#' are escaped,
    as is any '/' followed by another '/', so that the result reads back as
    the same component:

    >>> serialize_component("a:b//c")
    'a\\\\:b\\\\//c'

    Without escapes the component is returned unchanged.

    :raises SerializeError: If escapes is False and the component contains
        one of the special substrings '//', ':' or ';'.
    """
    if escapes:
        return ESCAPE_PATTERN.sub(lambda match: "\\" + match.group(0), component)
    if any(special in component for special in MUST_ESCAPE):
        raise SerializeError(f"{component!r} can't be serialized without escapes")
    return component


@dataclass
class Parameter:
    """
    An MSD parameter, comprised of a key and usually one value.

    >>> parameter = Parameter(["TITLE", "Springtime"])
    >>> parameter.key, parameter.value
    ('TITLE', 'Springtime')
    >>> str(parameter)
    '#TITLE:Springtime;'
    """

    components: List[str] = field(default_factory=list)

    @property
    def key(self) -> Optional[str]:
        """
        The first component, immediately after the '#'. None only if there are
        no components, which the parser never produces.
        """
        if not self.components:
            return None
        return self.components[0]

    @property
    def value(self) -> Optional[str]:
        """
        The second component, separated from the key by ':'. None if the
        parameter ends after the key, which is typically treated the same
        as an empty value.
        """
        if len(self.components) < 2:
            return None
        return self.components[1]

    def serialize(self, stream, escapes=True):
        """
        Write the parameter, including the surrounding '#' and ';', to
        the given text stream.

        :raises SerializeError: see serialize_component.
        """
        stream.write("#")
        stream.write(
            ":".join(serialize_component(c, escapes) for c in self.components)
        )
        stream.write(";")

    def to_string(self, escapes=True):
        buffer = io.StringIO()
        self.serialize(buffer, escapes)
        return buffer.getvalue()

    def __str__(self):
        return self.to_string()
