# xface - multi-platform mobile project scaffolding and library management
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models and errors
from xface.errors import (
    FetchFailed,
    HookAborted,
    InvalidConfig,
    NotAPlatformProject,
    RequirementsCheckFailed,
    SubprocessFailed,
    UnrecognizedPlatform,
    XFaceError,
)
from xface.models import (
    CustomLocalSource,
    CustomRemoteSource,
    LibrarySource,
    PlatformSpec,
    StockSource,
)

# ABOUTME: Export the library and project sync entry points
from xface.config_parser import ConfigParser
from xface.fetcher import LibraryFetcher
from xface.hooks import HookDispatcher
from xface.merges import copy_merges
from xface.platforms import get_parser
from xface.resolver import resolve

__all__ = [
    "__version__",
    "ConfigParser",
    "CustomLocalSource",
    "CustomRemoteSource",
    "FetchFailed",
    "HookAborted",
    "HookDispatcher",
    "InvalidConfig",
    "LibraryFetcher",
    "LibrarySource",
    "NotAPlatformProject",
    "PlatformSpec",
    "RequirementsCheckFailed",
    "StockSource",
    "SubprocessFailed",
    "UnrecognizedPlatform",
    "XFaceError",
    "copy_merges",
    "get_parser",
    "resolve",
]
