import contextlib
import contextvars
import dataclasses
import os
from dataclasses import dataclass
from typing import Generator, Optional


def _check_native_bits(native_bits):
    assert isinstance(native_bits, int) and not isinstance(native_bits, bool)
    assert native_bits > 0 and native_bits % 8 == 0, f"invalid native_bits: {native_bits}"
    return native_bits


def _native_bits_from_env():
    return _check_native_bits(int(os.environ.get("CHECKEDINT_NATIVE_BITS", "64")))


# width of the widest native integer (`uintmax_t`). multiplication widens
# into a scratch integer of this width when the result type fits in half.
CHECKEDINT_NATIVE_BITS = _native_bits_from_env()

CHECKEDINT_WARN_LOSSY_CAST = os.environ.get("CHECKEDINT_WARN_LOSSY_CAST", "1") == "1"


@dataclass
class Settings:
    native_bits: Optional[int] = None
    warn_lossy_cast: Optional[bool] = None

    def __post_init__(self):
        # sanity check inputs
        if self.native_bits is not None:
            _check_native_bits(self.native_bits)
        if self.warn_lossy_cast is not None:
            assert isinstance(self.warn_lossy_cast, bool)

    def get_native_bits(self) -> int:
        if self.native_bits is None:
            return CHECKEDINT_NATIVE_BITS
        return self.native_bits

    def get_warn_lossy_cast(self) -> bool:
        if self.warn_lossy_cast is None:
            return CHECKEDINT_WARN_LOSSY_CAST
        return self.warn_lossy_cast

    def as_dict(self):
        ret = dataclasses.asdict(self)
        return {k: v for (k, v) in ret.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


# a context variable rather than a module global, so that threads and
# tasks each see their own anchored settings.
_settings: contextvars.ContextVar[Optional[Settings]] = contextvars.ContextVar(
    "checkedint_settings", default=None
)


def get_global_settings() -> Settings:
    settings = _settings.get()
    if settings is None:
        return Settings()
    return settings


def set_global_settings(new_settings: Optional[Settings]) -> None:
    assert isinstance(new_settings, Settings) or new_settings is None

    _settings.set(new_settings)


@contextlib.contextmanager
def anchor_settings(new_settings: Settings) -> Generator:
    """
    Set the globally available settings for the duration of this context manager
    """
    assert new_settings is not None
    token = _settings.set(new_settings)
    try:
        yield
    finally:
        _settings.reset(token)
