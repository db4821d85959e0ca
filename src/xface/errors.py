# Error taxonomy for xface
# ABOUTME: Every failure the core reports derives from XFaceError
# ABOUTME: Low-level causes are chained with `raise ... from err`


class XFaceError(Exception):
    """Base class for all xface errors."""


class UnrecognizedPlatform(XFaceError):
    """Platform name is not in the platform manifest and has no custom library."""

    def __init__(self, platform: str) -> None:
        super().__init__(f'xFace library "{platform}" not recognized.')
        self.platform = platform


class InvalidConfig(XFaceError):
    """Configuration object or project configuration entry is unusable."""


class NotAPlatformProject(XFaceError):
    """Directory does not hold the native project a parser expects."""

    def __init__(self, path: object, platform: str, cause: object) -> None:
        super().__init__(
            f'The provided path "{path}" is not a {platform} project. {cause}'
        )
        self.path = path
        self.platform = platform
        self.cause = cause


class FetchFailed(XFaceError):
    """Downloading or extracting a platform library failed.

    ABOUTME: Carries platform, id, version and url so the message is actionable
    """

    def __init__(
        self,
        platform: str,
        lib_id: str,
        version: str,
        url: str,
        cause: object,
    ) -> None:
        super().__init__(
            f"Failed to fetch {platform} library {lib_id}@{version} from {url}: {cause}"
        )
        self.platform = platform
        self.lib_id = lib_id
        self.version = version
        self.url = url
        self.cause = cause


class HookAborted(XFaceError):
    """A hook handler or script failed, aborting the operation in progress."""

    def __init__(self, event: str, cause: object) -> None:
        super().__init__(f'Hook "{event}" failed: {cause}')
        self.event = event
        self.cause = cause


class SubprocessFailed(XFaceError):
    """An external command exited nonzero or could not be launched."""

    def __init__(self, command: str, output: str, returncode: int | None = None) -> None:
        super().__init__(f"Command {command} failed: {output}")
        self.command = command
        self.output = output
        self.returncode = returncode


class RequirementsCheckFailed(XFaceError):
    """A platform's `bin/check_reqs` reported missing requirements."""

    def __init__(self, platform: str, output: str) -> None:
        super().__init__(f"Error while checking {platform} requirements: {output}")
        self.platform = platform
        self.output = output
