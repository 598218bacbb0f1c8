import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .argon import Argon2
from .base import KeyDerivation
from .errors import UnknownAlgorithmError

logger = logging.getLogger(__name__)


class AlgorithmRegistry:
    """Identifier -> default configured plugin.

    Filled once by the constructor and read-only afterwards, so lookups
    need no locking.
    """

    def __init__(self, algorithms: Iterable[KeyDerivation]):
        table = {}
        for algo in algorithms:
            ident = algo.identifier()
            if ident in table:
                raise ValueError(f"hash implementation {ident!r} registered twice")
            table[ident] = algo
            logger.debug("registered hash implementation %s", algo)
        self._algorithms: Mapping[str, KeyDerivation] = MappingProxyType(table)

    def get(self, identifier: str) -> KeyDerivation:
        try:
            return self._algorithms[identifier]
        except KeyError:
            raise UnknownAlgorithmError(identifier) from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._algorithms

    def __iter__(self) -> Iterator[str]:
        return iter(self._algorithms)

    def __len__(self) -> int:
        return len(self._algorithms)


def default_registry() -> AlgorithmRegistry:
    return AlgorithmRegistry([Argon2()])
