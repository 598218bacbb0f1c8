from kdf.base import Password
from kdf.registry import default_registry

from .engine import RecordEngine

default_engine = RecordEngine(default_registry())


def hash_password(password: Password) -> str: return default_engine.hash(password)
def verify_hash(record: str, password: Password) -> bool: return default_engine.verify(record, password)
def needs_rehash(record: str) -> bool: return default_engine.needs_rehash(record)
