from abc import ABC, abstractmethod
from typing import Tuple, Union

Password = Union[str, bytes]


def as_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


class KeyDerivation(ABC):
    """Capability set every hash algorithm plugs into the registry with.

    Instances are immutable: ``configure`` hands back a new object and
    leaves the receiver untouched, so one default instance can be shared
    by every thread in the process.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Name written into the algorithm field of a record."""

    @abstractmethod
    def hash(self, password: Password, salt: bytes) -> Tuple[str, bytes]:
        """Return ``(param_string, derived_key)`` for the current configuration."""

    @abstractmethod
    def configure(self, parameters: str, separator: str, hash_size: int) -> "KeyDerivation":
        """Parse a record's parameter string into a new instance."""

    @abstractmethod
    def default_hash_size(self) -> int: ...

    @abstractmethod
    def default_parameter_count(self) -> int: ...

    @abstractmethod
    def describe(self) -> str: ...

    def __str__(self) -> str:
        return self.describe()
