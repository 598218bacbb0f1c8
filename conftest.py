import hashlib
from dataclasses import dataclass, replace

import pytest

from kdf import AlgorithmRegistry, Argon2, BadParametersError, KeyDerivation
from kdf.base import as_bytes
from record import RecordEngine


@dataclass(frozen=True)
class Pbkdf2Test(KeyDerivation):
    """Second algorithm so registry lookups and rehash policy have a non-default id."""
    rounds: int = 1000
    hash_size: int = 32

    def identifier(self):
        return "pbkdf2-test"

    def hash(self, password, salt):
        key = hashlib.pbkdf2_hmac("sha256", as_bytes(password), salt, self.rounds, dklen=self.hash_size)
        return f"r:{self.rounds}", key

    def configure(self, parameters, separator, hash_size):
        pars = parameters.split(separator)
        if len(pars) < 2 or pars[0] != "r" or not pars[1].isdigit() or hash_size <= 0:
            raise BadParametersError()
        return replace(self, rounds=int(pars[1]), hash_size=hash_size)

    def default_hash_size(self):
        return 32

    def default_parameter_count(self):
        return 2

    def describe(self):
        return f"algo:pbkdf2-test rounds:{self.rounds}"


@pytest.fixture
def fast_argon():
    # one pass over 8 MiB keeps the suite quick
    return Argon2(passes=1, memory=8 * 1024)


@pytest.fixture
def pbkdf2_test():
    return Pbkdf2Test


@pytest.fixture
def registry(fast_argon):
    return AlgorithmRegistry([fast_argon, Pbkdf2Test(hash_size=16)])


@pytest.fixture
def engine(registry):
    return RecordEngine(registry)
