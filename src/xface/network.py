# Network configuration: proxy lookup for library downloads
import os
from urllib.parse import urlparse

from xface.models import NetworkConfig

# ABOUTME: Config keys mapped to the environment variables that back them
_ENV_KEYS: dict[str, tuple[str, ...]] = {
    "https-proxy": ("HTTPS_PROXY", "https_proxy"),
    "proxy": ("HTTP_PROXY", "http_proxy"),
}


class EnvNetworkConfig:
    """Network configuration read from the process environment.

    ABOUTME: Answers the `https-proxy` and `proxy` keys
    ABOUTME: Unknown keys and empty values return None
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> str | None:
        for name in _ENV_KEYS.get(key, ()):
            value = self._environ.get(name)
            if value:
                return value
        return None


def select_proxy(url: str, network_config: NetworkConfig | None) -> str | None:
    """Pick the proxy for a URL.

    ABOUTME: https:// URLs use `https-proxy`, http:// URLs use `proxy`
    ABOUTME: Any other scheme, or no configured proxy, yields None
    """
    if network_config is None:
        return None
    scheme = urlparse(url).scheme.lower()
    if scheme == "https":
        return network_config.get("https-proxy") or None
    if scheme == "http":
        return network_config.get("proxy") or None
    return None


def request_kwargs(url: str, network_config: NetworkConfig | None) -> dict[str, object]:
    """Build the keyword arguments for `requests.get`.

    ABOUTME: `proxies` is only present when a proxy applies to the URL
    """
    kwargs: dict[str, object] = {}
    proxy = select_proxy(url, network_config)
    if proxy:
        kwargs["proxies"] = {urlparse(url).scheme.lower(): proxy}
    return kwargs
