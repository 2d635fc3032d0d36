import concurrent.futures
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pydantic
import requests

from . import http_timeout, max_downloads
from ..exceptions import DecodeError, DownloadError, NetworkError
from ..model import ResolvedArtifact

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def get_json(sess, url: str, model: Any) -> Any:
    """
        GET url and decode the JSON body into model, either a pydantic model or a typing
        form of one like List[QuiltVersion]. No retries.
    """
    try:
        r = sess.get(url, timeout=http_timeout())
        r.raise_for_status()
    except requests.RequestException as e:
        raise NetworkError(f"Request failed for {url}: {e}") from e

    try:
        return pydantic.TypeAdapter(model).validate_json(r.content)
    except pydantic.ValidationError as e:
        raise DecodeError(f"Invalid document from {url}: {e}") from e


def download_binary_file(sess, path: Path, url: str):
    try:
        r = sess.get(url, stream=True, timeout=http_timeout())
    except requests.RequestException as e:
        raise NetworkError(f"Download failed for {url}: {e}") from e

    try:
        if not r.ok:
            raise DownloadError(url, r.status_code)

        # One temp file per download, the same coordinate may be fetched twice at once
        fd, part = tempfile.mkstemp(prefix=path.name, suffix=".part", dir=str(path.parent))
        try:
            with os.fdopen(fd, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
            os.replace(part, path)
        except requests.RequestException as e:
            os.unlink(part)
            raise NetworkError(f"Download failed for {url}: {e}") from e
        except BaseException:
            os.unlink(part)
            raise
    finally:
        r.close()


def download_library(sess, artifact: ResolvedArtifact) -> Path:
    path = artifact.local_path

    # Whatever is on disk is trusted, nothing is checksummed
    if path.exists():
        logger.info("Library %s already downloaded, skipping...", artifact.path)
        return path

    path.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading library %s", artifact.path)
    download_binary_file(sess, path, artifact.url)
    return path


def download_libraries(sess, artifacts: Sequence[ResolvedArtifact], max_workers: Optional[int] = None) -> List[Path]:
    """
        Downloads every artifact with at most max_workers in flight and returns the local paths
        in the order of artifacts. The first failure cancels downloads that haven't started and
        is raised; files that finished before it stay where they are.
    """
    artifacts = list(artifacts)
    if not artifacts:
        return []

    failed = threading.Event()

    def fetch(artifact):
        # work items the pool picks up after a failure never reach the network
        if failed.is_set():
            return None
        try:
            return download_library(sess, artifact)
        except BaseException:
            failed.set()
            raise

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers or max_downloads()) as executor:
        futures = [executor.submit(fetch, artifact) for artifact in artifacts]
        done, not_done = concurrent.futures.wait(futures, return_when=concurrent.futures.FIRST_EXCEPTION)

        for future in not_done:
            future.cancel()

        for future in futures:
            if future in done and future.exception() is not None:
                raise future.exception()

        return [future.result() for future in futures]
