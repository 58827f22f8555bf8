import pytest

from checkedint import settings as settings_module
from checkedint.settings import (
    Settings,
    anchor_settings,
    get_global_settings,
    set_global_settings,
)


def test_defaults():
    settings = Settings()
    assert settings.get_native_bits() == settings_module.CHECKEDINT_NATIVE_BITS
    assert settings.get_warn_lossy_cast() == settings_module.CHECKEDINT_WARN_LOSSY_CAST


def test_explicit_values():
    settings = Settings(native_bits=32, warn_lossy_cast=False)
    assert settings.get_native_bits() == 32
    assert settings.get_warn_lossy_cast() is False


@pytest.mark.parametrize("native_bits", [0, 12, -8, True, "64"])
def test_bad_native_bits(native_bits):
    with pytest.raises(AssertionError):
        Settings(native_bits=native_bits)


def test_native_bits_from_env(monkeypatch):
    monkeypatch.setenv("CHECKEDINT_NATIVE_BITS", "128")
    assert settings_module._native_bits_from_env() == 128
    monkeypatch.delenv("CHECKEDINT_NATIVE_BITS")
    assert settings_module._native_bits_from_env() == 64


@pytest.mark.parametrize("native_bits", ["0", "12", "-8"])
def test_bad_native_bits_from_env(monkeypatch, native_bits):
    monkeypatch.setenv("CHECKEDINT_NATIVE_BITS", native_bits)
    with pytest.raises(AssertionError):
        settings_module._native_bits_from_env()


def test_dict_roundtrip():
    settings = Settings(native_bits=128)
    assert settings.as_dict() == {"native_bits": 128}
    assert Settings.from_dict(settings.as_dict()) == settings


def test_anchor_settings_restores():
    before = get_global_settings()
    with anchor_settings(Settings(native_bits=16)):
        assert get_global_settings().get_native_bits() == 16
        with anchor_settings(Settings(native_bits=8)):
            assert get_global_settings().get_native_bits() == 8
        assert get_global_settings().get_native_bits() == 16
    assert get_global_settings() == before


def test_set_global_settings():
    before = get_global_settings()
    with anchor_settings(before):
        set_global_settings(Settings(native_bits=256))
        assert get_global_settings().get_native_bits() == 256
        set_global_settings(None)
        assert get_global_settings() == Settings()
    assert get_global_settings() == before
