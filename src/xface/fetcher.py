# Library fetcher: download, extract and cache platform libraries once
import logging
import os
import tarfile
import threading
import uuid
from collections.abc import Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path

import requests
from urllib3.exceptions import HTTPError as StreamError

from xface.config import get_lib_dir
from xface.errors import FetchFailed
from xface.hooks import HookDispatcher
from xface.models import CustomLocalSource, LibrarySource, NetworkConfig
from xface.network import EnvNetworkConfig, request_kwargs
from xface.resolver import cache_path
from xface.utils import find_single_root, remove_path

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str, str]

_DEFAULT_FETCH_JOBS = 4
_MAX_FETCH_JOBS = 16

# Errors a dropped or stalled stream raises from response.raw; urllib3's are
# not requests.RequestException subclasses
_DOWNLOAD_ERRORS = (
    requests.RequestException,
    StreamError,
    tarfile.TarError,
    OSError,
    EOFError,
)


def get_fetch_jobs() -> int:
    """Return XFACE_FETCH_JOBS, default 4, capped at 16."""
    raw = (os.environ.get("XFACE_FETCH_JOBS") or "").strip()
    try:
        value = int(raw) if raw else 0
    except ValueError:
        return _DEFAULT_FETCH_JOBS
    if value <= 0:
        return _DEFAULT_FETCH_JOBS
    return min(value, _MAX_FETCH_JOBS)


def get_http_timeout() -> float | None:
    """Return XFACE_HTTP_TIMEOUT in seconds, or None for no limit."""
    raw = (os.environ.get("XFACE_HTTP_TIMEOUT") or "").strip()
    try:
        value = float(raw) if raw else 0.0
    except ValueError:
        return None
    return value if value > 0 else None


class LibraryFetcher:
    """Materializes LibrarySources on disk, at most once per cache key.

    ABOUTME: Existence of the destination directory is the cache-hit signal
    ABOUTME: Extraction goes to a sibling temp dir and is renamed into place
    ABOUTME: Concurrent fetches of one key share a single Future
    """

    def __init__(
        self,
        hooks: HookDispatcher,
        network_config: NetworkConfig | None = None,
        lib_root: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        self.hooks = hooks
        self.network_config = network_config if network_config is not None else EnvNetworkConfig()
        self.lib_root = Path(lib_root) if lib_root is not None else get_lib_dir()
        self.timeout = timeout if timeout is not None else get_http_timeout()
        self._lock = threading.Lock()
        self._in_flight: dict[CacheKey, Future[Path]] = {}

    def destination(self, source: LibrarySource) -> Path:
        return cache_path(source, self.lib_root)

    def fetch(self, source: LibrarySource) -> Path:
        """Return the directory holding `source`, downloading it if needed.

        Raises:
            HookAborted: before_library_download handler failed
            FetchFailed: Network or extraction failure
        """
        if isinstance(source, CustomLocalSource):
            return Path(source.path)

        dest = self.destination(source)
        if dest.exists():
            return dest

        key: CacheKey = (source.id, source.platform, source.version)
        with self._lock:
            pending = self._in_flight.get(key)
            owner = pending is None
            if owner:
                pending = Future()
                self._in_flight[key] = pending

        if not owner:
            logger.debug(f"Waiting for in-flight download of {source.platform} {source.id}@{source.version}")
            return pending.result()

        try:
            path = self._fetch_remote(source, dest)
        except BaseException as e:
            pending.set_exception(e)
            raise
        else:
            pending.set_result(path)
            return path
        finally:
            with self._lock:
                self._in_flight.pop(key, None)

    def fetch_all(self, sources: Sequence[LibrarySource], max_workers: int | None = None) -> list[Path]:
        """Fetch several sources concurrently, returning paths in input order.

        ABOUTME: One worker (or one source) fetches inline, in order
        ABOUTME: The first failure cancels fetches not yet started and is re-raised
        """
        jobs = max_workers if max_workers is not None else get_fetch_jobs()
        if jobs <= 1 or len(sources) <= 1:
            return [self.fetch(source) for source in sources]

        with ThreadPoolExecutor(max_workers=min(jobs, len(sources))) as executor:
            futures = [executor.submit(self.fetch, source) for source in sources]
            done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = [f for f in futures if f in done and f.exception() is not None]
            if failed:
                for future in futures:
                    future.cancel()
                raise failed[0].exception()
            return [future.result() for future in futures]

    def remove(self, source: LibrarySource) -> None:
        """Delete a cached library; local sources are never touched."""
        if isinstance(source, CustomLocalSource):
            return
        remove_path(self.destination(source))

    def _fetch_remote(self, source: LibrarySource, dest: Path) -> Path:
        if dest.exists():
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        meta = {
            "platform": source.platform,
            "url": source.url,
            "id": source.id,
            "version": source.version,
        }
        self.hooks.fire("before_library_download", meta)

        logger.info(f"Requesting {source.url}...")
        staging = dest.parent / f".{dest.name}.partial-{uuid.uuid4().hex}"
        try:
            self._download_and_extract(source.url, staging)
            os.replace(find_single_root(staging), dest)
        except _DOWNLOAD_ERRORS as e:
            raise FetchFailed(source.platform, source.id, source.version, source.url, e) from e
        finally:
            remove_path(staging)

        logger.info(f"Downloaded, unzipped and extracted {source.platform} library to {dest}")
        self.hooks.fire("after_library_download", {**meta, "path": str(dest), "symlink": False})
        return dest

    def _download_and_extract(self, url: str, target: Path) -> None:
        kwargs = request_kwargs(url, self.network_config)
        response = requests.get(url, stream=True, timeout=self.timeout, **kwargs)
        try:
            response.raise_for_status()
            target.mkdir(parents=True)
            with tarfile.open(fileobj=response.raw, mode="r|gz") as archive:
                if hasattr(tarfile, "data_filter"):
                    archive.extractall(target, filter="data")
                else:
                    archive.extractall(target)
        finally:
            response.close()
