import os
import os.path
import sys
import datetime
from pathlib import Path

import requests
from cachecontrol import CacheControl  # type: ignore
from cachecontrol.caches import FileCache  # type: ignore

from .. import __version__

USER_AGENT = f"anymc-installer/{__version__}"

DEFAULT_HTTP_TIMEOUT = 30
DEFAULT_MAX_DOWNLOADS = 8


def serialize_datetime(dt: datetime.datetime):
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc).isoformat()

    return dt.isoformat()


def utc_now():
    return datetime.datetime.now(datetime.timezone.utc)


def cache_path():
    if "ANYMC_CACHE_DIR" in os.environ:
        return os.environ["ANYMC_CACHE_DIR"]
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or os.path.join(str(Path.home()), "AppData", "Local")
    elif sys.platform == "darwin":
        base = os.path.join(str(Path.home()), "Library", "Caches")
    else:
        base = os.environ.get("XDG_CACHE_HOME") or os.path.join(str(Path.home()), ".cache")
    return os.path.join(base, "anymc")


def http_timeout() -> float:
    if "ANYMC_HTTP_TIMEOUT" in os.environ:
        return float(os.environ["ANYMC_HTTP_TIMEOUT"])
    return DEFAULT_HTTP_TIMEOUT


def max_downloads() -> int:
    if "ANYMC_MAX_DOWNLOADS" in os.environ:
        return max(1, int(os.environ["ANYMC_MAX_DOWNLOADS"]))
    return DEFAULT_MAX_DOWNLOADS


def default_minecraft_dir() -> Path:
    """The game directory the vanilla launcher uses on this platform."""
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home())) / ".minecraft"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "minecraft"
    return Path.home() / ".minecraft"


def default_session():
    """Session for metadata documents, cached on disk according to the HTTP cache headers."""
    cache = FileCache(os.path.join(cache_path(), "http_cache"))
    sess = CacheControl(requests.Session(), cache)

    sess.headers.update({"User-Agent": USER_AGENT})

    return sess


def download_session():
    """Uncached session for library jars; they are cached by path in the libraries directory instead."""
    sess = requests.Session()
    sess.headers.update({"User-Agent": USER_AGENT})
    return sess
