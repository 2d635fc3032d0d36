import io
import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import List, Sequence, Tuple

from ..exceptions import PathError

logger = logging.getLogger(__name__)

MANIFEST_PATH = "META-INF/MANIFEST.MF"

# A manifest line holds at most 72 bytes, continuation lines spend one of them on the leading space
MANIFEST_LINE_LENGTH = 72
MANIFEST_CONTINUATION_LENGTH = MANIFEST_LINE_LENGTH - 1


def _split_utf8(data: bytes, limit: int) -> Tuple[bytes, bytes]:
    if len(data) <= limit:
        return data, b""
    cut = limit
    while cut > 0 and (data[cut] & 0xC0) == 0x80:
        cut -= 1
    return data[:cut], data[cut:]


def wrap_manifest_line(line: str) -> List[str]:
    """
        Splits a manifest header the way java.util.jar does: the first line takes the first
        72 bytes, every following line is a single space and up to 71 more bytes.
        Cuts never land inside a multi-byte character.
    """
    head, rest = _split_utf8(line.encode("utf-8"), MANIFEST_LINE_LENGTH)
    lines = [head.decode("utf-8")]
    while rest:
        chunk, rest = _split_utf8(rest, MANIFEST_CONTINUATION_LENGTH)
        lines.append(" " + chunk.decode("utf-8"))
    return lines


def relative_class_path(jar: Path, libraries: Sequence[Path]) -> List[str]:
    parent = Path(jar).parent
    paths = []
    for library in libraries:
        try:
            paths.append(Path(library).relative_to(parent).as_posix())
        except ValueError as e:
            raise PathError(f"Failed to make library path {library} relative to install directory {parent}") from e
    return paths


def manifest_lines(jar: Path, main_class: str, libraries: Sequence[Path]) -> List[str]:
    class_path = "Class-Path: " + " ".join(relative_class_path(jar, libraries))
    return [
        "Manifest-Version: 1.0",
        f"Main-Class: {main_class}",
        *wrap_manifest_line(class_path),
    ]


def write_atomic(path: Path, data: bytes):
    fd, tmp = tempfile.mkstemp(prefix=path.name, suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


def create_launch_jar(jar: Path, main_class: str, libraries: Sequence[Path]):
    """Writes a jar holding only a manifest that launches main_class with libraries on the class path."""
    logger.info("Creating server launch jar %s", jar)
    jar = Path(jar)

    manifest = "".join(line + "\n" for line in manifest_lines(jar, main_class, libraries))

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(MANIFEST_PATH, manifest.encode("utf-8"))

    write_atomic(jar, buf.getvalue())
