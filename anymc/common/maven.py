from pathlib import Path
from typing import AbstractSet, Iterable, List

from ..model import GradleSpecifier, Library, ResolvedArtifact


def get_maven_url(path: str, server: str) -> str:
    return server.rstrip("/") + "/" + path


def select_maven(path: str, primary_prefix: str, primary_maven: str, fallback_maven: str) -> str:
    if path.startswith(primary_prefix):
        return primary_maven
    return fallback_maven


def resolve_artifact(
    coordinate: str,
    libraries_dir: Path,
    primary_prefix: str,
    primary_maven: str,
    fallback_maven: str,
) -> ResolvedArtifact:
    """
        Maps a coordinate onto its maven path, the url to fetch it from and its place under libraries_dir.
        Pure; raises CoordinateParseError for anything that isn't group:artifact:version[:classifier][@ext].
    """
    path = GradleSpecifier.from_string(coordinate).path()
    maven = select_maven(path, primary_prefix, primary_maven, fallback_maven)
    return ResolvedArtifact(
        coordinate=coordinate,
        path=path,
        url=get_maven_url(path, maven),
        local_path=Path(libraries_dir).joinpath(*path.split("/")),
    )


def library_artifact(name: str) -> str:
    components = name.split("@")[0].split(":")
    return components[1] if len(components) > 1 else ""


def filter_libraries(libraries: Iterable[Library], conflicting: AbstractSet[str]) -> List[Library]:
    """Returns the libraries whose artifact name isn't in conflicting. The input is left untouched."""
    return [lib for lib in libraries if library_artifact(lib.name) not in conflicting]
