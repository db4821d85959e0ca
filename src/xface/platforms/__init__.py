# Platform parser registry
from xface.errors import UnrecognizedPlatform
from xface.platforms.android import AndroidParser
from xface.platforms.base import PlatformParser
from xface.platforms.blackberry10 import Blackberry10Parser
from xface.platforms.firefoxos import FirefoxOSParser
from xface.platforms.ios import IosParser
from xface.platforms.wp7 import Wp7Parser
from xface.platforms.wp8 import Wp8Parser

# Registry of all available platform parsers, keyed by platform name
PARSERS: dict[str, type[PlatformParser]] = {
    parser_cls.name: parser_cls
    for parser_cls in (
        IosParser,
        AndroidParser,
        Wp7Parser,
        Wp8Parser,
        Blackberry10Parser,
        FirefoxOSParser,
    )
}

__all__ = [
    "PlatformParser",
    "AndroidParser",
    "Blackberry10Parser",
    "FirefoxOSParser",
    "IosParser",
    "Wp7Parser",
    "Wp8Parser",
    "PARSERS",
    "get_parser",
]


def get_parser(platform: str) -> type[PlatformParser]:
    """Return the parser class for a platform.

    ABOUTME: Raises UnrecognizedPlatform for names without a parser
    """
    try:
        return PARSERS[platform]
    except KeyError:
        raise UnrecognizedPlatform(platform) from None
