# Environment variable expansion for library entries in .xface/config.json
import os
import re
import warnings
from collections.abc import Iterable, Mapping

# ABOUTME: ${VAR_NAME} references; names are uppercase with digits/underscores
ENV_VAR_PATTERN = re.compile(r'\$\{([A-Z_][A-Z0-9_]*)\}')


def expand_env_vars(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Substitute ${VAR} references in a library uri, path or template.

    ABOUTME: Unknown variables stay literal and emit a UserWarning
    ABOUTME: `~` is not touched here; callers expand it when building a Path

    Args:
        value: Raw config value
        environ: Variables to read (defaults to os.environ)

    Examples:
        >>> expand_env_vars("${XFACE_SDK}/wp8", {"XFACE_SDK": "/opt/xface"})
        '/opt/xface/wp8'
    """
    env = os.environ if environ is None else environ

    def lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in env:
            return env[name]
        warnings.warn(
            f"Environment variable '{name}' not found, keeping original",
            UserWarning,
            stacklevel=2
        )
        return match.group(0)

    return ENV_VAR_PATTERN.sub(lookup, value)


def expand_fields(
    entry: Mapping[str, str],
    keys: Iterable[str],
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return a copy of `entry` with the named fields expanded; others verbatim."""
    result = dict(entry)
    for key in keys:
        if key in result:
            result[key] = expand_env_vars(result[key], environ)
    return result
