"""Key derivation plugins: the algorithm contract, Argon2, and the registry."""
from .base import KeyDerivation
from .argon import Argon2, HASH_ID as ARGON2_ID
from .registry import AlgorithmRegistry, default_registry
from .errors import (HashError, BadFormatError, UnknownAlgorithmError, BadParametersError,
                     UnknownModeError, BadHashSizeError, RandomSourceError, DerivationError)
