"""Errors raised while building, parsing or verifying hash records."""


class HashError(ValueError):
    """Base class for every hash record failure."""


class BadFormatError(HashError):
    def __init__(self, msg: str = "invalid hash format"):
        super().__init__(msg)


class UnknownAlgorithmError(HashError):
    def __init__(self, identifier: str):
        super().__init__(f"unknown hash implementation: {identifier!r}")
        self.identifier = identifier


class BadParametersError(HashError):
    def __init__(self, msg: str = "malformed hash parameters"):
        super().__init__(msg)


class UnknownModeError(HashError):
    def __init__(self, mode: str):
        super().__init__(f"unknown hash mode: {mode!r}")
        self.mode = mode


class BadHashSizeError(HashError):
    def __init__(self, size: int):
        super().__init__(f"bad hash size: {size}")
        self.size = size


class RandomSourceError(HashError):
    def __init__(self, msg: str = "secure random source failed"):
        super().__init__(msg)


class DerivationError(HashError):
    """The underlying KDF library refused the inputs."""
