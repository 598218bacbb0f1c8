"""Self-describing password hash records.

A record looks like::

    $argon2$id:4:65536$<b64(len || salt)>$<b64(tag)>

where ``tag = HMAC-SHA256(key=prefix, msg=derived_key)`` and ``prefix`` is
everything up to and including the ``$`` before the tag. Using the public
prefix as the MAC key and the secret key as the message is backwards from
the usual construction, but existing records depend on it.
"""
import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives.hmac import HMAC

from kdf.argon import HASH_ID as ARGON2_ID
from kdf.base import KeyDerivation, Password
from kdf.errors import BadFormatError, BadHashSizeError, RandomSourceError
from kdf.registry import AlgorithmRegistry

from .salt import generate_random_bytes

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = ARGON2_ID
MIN_HASH_PARTS = 5
SALT_SIZE = 10

SEPARATOR = "$"
PARAMETER_SEPARATOR = ":"


@dataclass(frozen=True)
class ParsedRecord:
    algorithm: KeyDerivation
    params: str
    salt: bytes
    hash_size: int
    tag: str


def _hmac_key(prefix: str, key: bytes) -> bytes:
    mac = HMAC(prefix.encode("utf-8"), hashes.SHA256())
    mac.update(key)
    return mac.finalize()


def _b64decode(field: str) -> bytes:
    try:
        data = base64.b64decode(field.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise BadFormatError(f"invalid base64 field: {exc}") from exc
    # unused trailing bits must be zero, one encoding per value
    if base64.b64encode(data).decode("ascii") != field:
        raise BadFormatError("non-canonical base64 field")
    return data


class RecordEngine:
    """Builds, verifies and ages hash records against one registry."""

    def __init__(
        self,
        registry: AlgorithmRegistry,
        default_algorithm: str = DEFAULT_ALGORITHM,
        salt_size: int = SALT_SIZE,
        random_source: Optional[Callable[[int], bytes]] = None,
    ):
        self.registry = registry
        self.default_algorithm = default_algorithm
        self.salt_size = salt_size
        self._random = random_source or generate_random_bytes

    def hash(self, password: Password) -> str:
        hasher = self.registry.get(self.default_algorithm)

        salt = self._random(self.salt_size)
        if salt is None or len(salt) != self.salt_size:
            raise RandomSourceError(f"expected {self.salt_size} salt bytes")

        params, key = hasher.hash(password, salt)
        if not 0 < len(key) <= 0xFF:
            raise BadHashSizeError(len(key))

        encoded_salt = base64.b64encode(bytes([len(key)]) + salt).decode("ascii")
        prefix = f"${self.default_algorithm}${params}${encoded_salt}$"
        tag = base64.b64encode(_hmac_key(prefix, key)).decode("ascii")

        logger.debug("built %s record with %d byte key", self.default_algorithm, len(key))
        return prefix + tag

    def parse(self, record: str) -> ParsedRecord:
        parts = record.split(SEPARATOR)
        if len(parts) < MIN_HASH_PARTS:
            raise BadFormatError(f"expected {MIN_HASH_PARTS} fields, got {len(parts)}")

        algorithm = self.registry.get(parts[1])

        blob = _b64decode(parts[3])
        if not blob:
            raise BadFormatError("empty salt field")

        return ParsedRecord(
            algorithm=algorithm,
            params=parts[2],
            salt=blob[1:],
            hash_size=blob[0],
            tag=parts[4],
        )

    def verify(self, record: str, password: Password) -> bool:
        """True on match, False on mismatch; malformed records raise."""
        parsed = self.parse(record)

        hasher = parsed.algorithm.configure(parsed.params, PARAMETER_SEPARATOR, parsed.hash_size)
        stored = _b64decode(parsed.tag)

        _, candidate = hasher.hash(password, parsed.salt)
        expected = _hmac_key(record[: len(record) - len(parsed.tag)], candidate)

        ok = constant_time.bytes_eq(stored, expected)
        logger.debug("%s record verification %s", hasher.identifier(), "ok" if ok else "failed")
        return ok

    def needs_rehash(self, record: str) -> bool:
        parsed = self.parse(record)
        # same parameter checks verify applies
        parsed.algorithm.configure(parsed.params, PARAMETER_SEPARATOR, parsed.hash_size)
        algorithm = parsed.algorithm
        # all three must hold; records on the default algorithm are never flagged
        stale = (
            algorithm.identifier() != self.default_algorithm
            and len(parsed.salt) < self.salt_size
            and parsed.hash_size < algorithm.default_hash_size()
        )
        if stale:
            logger.debug("%s record flagged for rehash", algorithm.identifier())
        return stale
