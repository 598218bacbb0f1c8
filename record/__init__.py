"""Record package: encodes, verifies and ages password hash records."""
from .engine import (RecordEngine, ParsedRecord, DEFAULT_ALGORITHM, MIN_HASH_PARTS,
                     SALT_SIZE, SEPARATOR, PARAMETER_SEPARATOR)
from .salt import generate_random_bytes
from .default import default_engine, hash_password, verify_hash, needs_rehash
