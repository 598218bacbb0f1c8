import logging
import re
from dataclasses import dataclass, replace
from typing import Tuple

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from .base import KeyDerivation, Password, as_bytes
from .errors import BadHashSizeError, BadParametersError, DerivationError, UnknownModeError
from .settings import ARGON_THREADS

logger = logging.getLogger(__name__)

HASH_ID = "argon2"
ARGON_NUM_PARAMETERS = 3
ARGON_DEFAULT_PASSES = 4
ARGON_DEFAULT_MEMORY = 64 * 1024  # KiB
ARGON_DEFAULT_HASH_SIZE = 32
ARGON_DEFAULT_MODE = "id"

# record code -> argon2 variant; "i" is data-independent, "id" the hybrid
ARGON_MODES = {"i": Type.I, "id": Type.ID}

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_signed(text: str, bits: int) -> int:
    """Parse a base-10 integer that must fit a signed ``bits``-wide field."""
    if not _DECIMAL.fullmatch(text):
        raise BadParametersError(f"not a decimal integer: {text!r}")
    value = int(text, 10)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise BadParametersError(f"{text!r} out of range for int{bits}")
    return value


@dataclass(frozen=True)
class Argon2(KeyDerivation):
    passes: int = ARGON_DEFAULT_PASSES
    memory: int = ARGON_DEFAULT_MEMORY
    mode: str = ARGON_DEFAULT_MODE
    hash_size: int = ARGON_DEFAULT_HASH_SIZE

    def _encoded(self) -> str:
        return f"{self.mode}:{self.passes}:{self.memory}"

    def identifier(self) -> str:
        return HASH_ID

    def hash(self, password: Password, salt: bytes) -> Tuple[str, bytes]:
        variant = ARGON_MODES.get(self.mode)
        if variant is None:
            raise UnknownModeError(self.mode)
        try:
            key = hash_secret_raw(
                as_bytes(password),
                salt,
                time_cost=self.passes,
                memory_cost=self.memory,
                parallelism=ARGON_THREADS,
                hash_len=self.hash_size,
                type=variant,
            )
        except HashingError as exc:
            logger.warning("argon2 derivation failed for %s", self.describe())
            raise DerivationError(f"argon2 rejected {self.describe()}: {exc}") from exc
        return self._encoded(), key

    def configure(self, parameters: str, separator: str, hash_size: int) -> "Argon2":
        pars = parameters.split(separator)
        if len(pars) < ARGON_NUM_PARAMETERS:
            raise BadParametersError(
                f"expected {ARGON_NUM_PARAMETERS} parameters, got {len(pars)}"
            )
        mode = pars[0]
        passes = _parse_signed(pars[1], 8)
        memory = _parse_signed(pars[2], 32)
        return self._configure_argon(mode, hash_size, passes, memory)

    def _configure_argon(self, mode: str, hash_size: int, passes: int, memory: int) -> "Argon2":
        if mode not in ARGON_MODES or hash_size <= 0 or passes <= 0 or memory <= 0:
            raise BadParametersError(
                f"invalid argon2 parameters mode={mode!r} passes={passes} "
                f"memory={memory} hash_size={hash_size}"
            )
        return replace(self, mode=mode, hash_size=hash_size, passes=passes, memory=memory)

    def with_hash_size(self, size: int) -> "Argon2":
        """Copy with a different output length."""
        if size <= 0:
            raise BadHashSizeError(size)
        return replace(self, hash_size=size)

    def default_hash_size(self) -> int:
        return ARGON_DEFAULT_HASH_SIZE

    def default_parameter_count(self) -> int:
        return ARGON_NUM_PARAMETERS

    def describe(self) -> str:
        return f"algo:{HASH_ID} mode:{self.mode} passes:{self.passes} memory:{self.memory}"
