import hypothesis
import pytest

from checkedint.settings import Settings, anchor_settings

############
# PATCHING #
############


# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


def pytest_configure(config):
    config.addinivalue_line("markers", "fuzzing: run with hypothesis-generated inputs")


def pytest_addoption(parser):
    parser.addoption(
        "--native-bits",
        type=int,
        default=None,
        help="width of the widest native integer (defaults to CHECKEDINT_NATIVE_BITS)",
    )


@pytest.fixture(scope="session")
def native_bits_option(pytestconfig):
    return pytestconfig.getoption("native_bits")


@pytest.fixture(scope="session", autouse=True)
def global_settings(native_bits_option):
    settings = Settings(native_bits=native_bits_option, warn_lossy_cast=True)
    with anchor_settings(settings):
        yield settings
