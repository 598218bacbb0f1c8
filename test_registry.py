import pytest

from kdf import AlgorithmRegistry, Argon2, UnknownAlgorithmError, default_registry
from kdf import settings


def test_default_registry_holds_argon2():
    reg = default_registry()
    assert "argon2" in reg
    assert list(reg) == ["argon2"]
    assert reg.get("argon2") == Argon2()


def test_lookup(registry, fast_argon):
    assert len(registry) == 2
    assert registry.get("argon2") is fast_argon
    assert registry.get("pbkdf2-test").identifier() == "pbkdf2-test"


def test_unknown_algorithm(registry):
    with pytest.raises(UnknownAlgorithmError) as exc:
        registry.get("Argon2")
    assert exc.value.identifier == "Argon2"


def test_duplicate_registration():
    with pytest.raises(ValueError):
        AlgorithmRegistry([Argon2(), Argon2(passes=1)])


@pytest.mark.parametrize("raw,expected", [("3", 3), ("0", 7), ("-2", 7), ("lots", 7), ("", 7)])
def test_thread_override(monkeypatch, raw, expected):
    monkeypatch.setenv("HASHRECORD_ARGON_THREADS", raw)
    assert settings._argon_threads(default=7) == expected


def test_thread_default_is_positive():
    assert settings.ARGON_THREADS >= 1
