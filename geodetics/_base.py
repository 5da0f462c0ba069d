"""
Base class declarations for geodetics
"""

from typing import Iterable, Optional, Tuple


class IdentifiedObject:
    """
    An object carrying an authority identifier (e.g. 'EPSG::9001'), a human
    readable name, and optional remarks and aliases.

    Two identified objects are equal when they are of the same type and share
    an identifier.
    """

    def __init__(
        self,
        identifier: str,
        name: Optional[str] = None,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        if identifier is None:
            raise ValueError('identifier must not be None')

        self._identifier = identifier
        self._name = name if name is not None else identifier
        self._remarks = remarks
        self._aliases = tuple(aliases) if aliases else ()

    def __eq__(self, other):
        if not isinstance(other, IdentifiedObject) or type(self) is not type(other):
            return False

        return self._identifier == other._identifier

    def __hash__(self):
        return hash((type(self).__name__, self._identifier))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._identifier}, {self._name})>'

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def name(self) -> str:
        return self._name

    @property
    def remarks(self) -> Optional[str]:
        return self._remarks

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self._aliases
