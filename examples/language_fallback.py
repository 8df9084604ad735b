"""Language Fallback Example - Which page directories does the client search?

Demonstrates how LANG/LANGUAGE and the configured cache languages turn into
the ordered list of page directories the client searches, and how the cache
update and page search passes deduplicate that list differently.

Scenarios covered:
1. No locale configured
2. Regional locale with a LANGUAGE override list
3. Languages set in the client configuration
4. Status messages with a Reporter

Python 3.13+.
"""

from __future__ import annotations

import sys

from tldrkit import (
    CacheSettings,
    Config,
    OutputSettings,
    Reporter,
    dedup_nosort,
    dedup_sorted,
    get_languages,
    get_languages_from_env,
    languages_to_langdirs,
)
from tldrkit.duration import duration_fmt
from tldrkit.locale_utils import describe_languages


def example_1_no_locale() -> None:
    """Example 1: LANG unset, only English is searched."""
    print("=" * 60)
    print("Example 1: No locale configured")
    print("=" * 60)

    languages = get_languages_from_env({"LANGUAGE": "it:cz"})
    print(f"Languages: {languages}")  # ['en']
    print()


def example_2_regional_locale() -> None:
    """Example 2: LANG=en_US.UTF-8, LANGUAGE=de_DE.UTF-8:pl:en."""
    print("=" * 60)
    print("Example 2: Regional locale with LANGUAGE override")
    print("=" * 60)

    env = {"LANG": "en_US.UTF-8", "LANGUAGE": "de_DE.UTF-8:pl:en"}
    languages = get_languages_from_env(env)
    print(f"Candidates:   {languages}")
    print(f"Search order: {languages_to_langdirs(dedup_nosort(languages))}")
    print(f"Cache update: {languages_to_langdirs(dedup_sorted(languages))}")
    print()


def example_3_configured_languages() -> None:
    """Example 3: Config languages win over the environment."""
    print("=" * 60)
    print("Example 3: Configured languages")
    print("=" * 60)

    config = Config(cache=CacheSettings(languages=["fr", "de"]))
    languages = get_languages(config, {"LANG": "it"})
    print(f"Languages: {languages}")  # ['fr', 'de', 'en']
    print(f"Config now: {config.cache.languages}")
    print()


def example_4_reporter() -> None:
    """Example 4: Status messages honour the quiet setting."""
    print("=" * 60)
    print("Example 4: Reporter")
    print("=" * 60)

    reporter = Reporter.from_settings(OutputSettings(), stream=sys.stdout)
    reporter.info(f"searching {describe_languages(['de', 'pl', 'en'])}")
    reporter.warn(f"cache is {duration_fmt(3 * 86400 + 7200)} old")

    quiet = Reporter.from_settings(OutputSettings(quiet=True), stream=sys.stdout)
    quiet.info("this is never printed")
    print()


if __name__ == "__main__":
    example_1_no_locale()
    example_2_regional_locale()
    example_3_configured_languages()
    example_4_reporter()
