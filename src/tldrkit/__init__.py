"""tldrkit - helper layer of a tldr documentation-lookup client.

Resolves which page languages to search, in priority order, following the
tldr client specification, and provides the small utilities the client's
cache and output layers share.

Public API:
    get_languages - Configured languages plus English, or derived from LANG/LANGUAGE
    get_languages_from_env - Languages derived from LANG/LANGUAGE
    languages_to_langdirs - Map languages to "pages.<lang>" directory names
    dedup_nosort - Order-preserving deduplication (page search)
    dedup_sorted - Sorted deduplication (cache update)
    Config - Client configuration (cache languages, output settings)
    Reporter - Quiet-aware warning/info messages

Submodules:
    tldrkit.pages - Page name and platform from a page path
    tldrkit.integrity - SHA-256 content fingerprints
    tldrkit.duration - Human-readable durations
    tldrkit.output - Color initialization and ANSI styling
    tldrkit.locale_utils - Babel-backed language display names
"""

from .collections_utils import dedup_nosort, dedup_sorted
from .config import CacheSettings, Config, OutputSettings
from .enums import ColorChoice
from .languages import get_languages, get_languages_from_env, languages_to_langdirs
from .output import Reporter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tldrkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# tldr client specification conformance
__client_spec_url__ = "https://github.com/tldr-pages/tldr/blob/main/CLIENT-SPECIFICATION.md"

__all__ = [
    "CacheSettings",
    "ColorChoice",
    "Config",
    "OutputSettings",
    "Reporter",
    "__client_spec_url__",
    "__version__",
    "dedup_nosort",
    "dedup_sorted",
    "get_languages",
    "get_languages_from_env",
    "languages_to_langdirs",
]
