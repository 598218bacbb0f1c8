# kdf/settings.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _default_threads():
    # half the cores, never below one lane
    return max(1, (os.cpu_count() or 1) // 2)


def _argon_threads(default=None):
    default = default or _default_threads()
    raw = os.getenv("HASHRECORD_ARGON_THREADS")
    if not raw:
        return default
    try:
        threads = int(raw)
    except ValueError:
        logger.warning("ignoring HASHRECORD_ARGON_THREADS=%r, not an integer", raw)
        return default
    if threads < 1:
        logger.warning("ignoring HASHRECORD_ARGON_THREADS=%r, must be >= 1", raw)
        return default
    return threads


# Fixed for the life of the process. Not part of the record, so every
# process verifying a record must run with the same value that created it.
ARGON_THREADS = _argon_threads()
logger.debug("argon2 parallelism fixed at %d", ARGON_THREADS)
