"""Pytest configuration for the tldrkit test suite.

Hypothesis profiles (select with HYPOTHESIS_PROFILE, CI=true implies "ci"):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples
- verbose: 100 examples with progress output

Tests marked @pytest.mark.fuzz run many thousands of examples over arbitrary
text and are skipped unless requested with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from tldrkit.locale_utils import clear_locale_cache

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile: explicit override, then CI, then dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def locale_env(monkeypatch: pytest.MonkeyPatch):
    """Set or unset LANG and LANGUAGE in the process environment.

    Returns a callable ``prepare(lang, language)``; None unsets the variable.
    """

    def prepare(lang: str | None, language: str | None) -> None:
        for name, value in (("LANG", lang), ("LANGUAGE", language)):
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)

    return prepare


@pytest.fixture
def fresh_locale_cache():
    """Clear the Babel Locale cache before and after a test."""
    clear_locale_cache()
    yield
    clear_locale_cache()


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line("markers", "fuzz: long-running extraction fuzz tests")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the -m expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
