import json
from pathlib import Path
from typing import Optional, Dict, Any, List

import pydantic
from pydantic import ConfigDict

from ..exceptions import CoordinateParseError


class GradleSpecifier:
    """
        A gradle specifier - a maven coordinate. Like one of these:
        "org.quiltmc:quilt-loader:0.19.1"
        "net.fabricmc:intermediary:1.19.4"
        "org.ow2.asm:asm:9.4"
    """

    def __init__(self, group: str, artifact: str, version: str, classifier: Optional[str] = None,
                 extension: Optional[str] = None):
        if extension is None:
            extension = "jar"
        self.group = group
        self.artifact = artifact
        self.version = version
        self.classifier = classifier
        self.extension = extension

    def __str__(self):
        ext = ''
        if self.extension != 'jar':
            ext = "@%s" % self.extension
        if self.classifier:
            return "%s:%s:%s:%s%s" % (self.group, self.artifact, self.version, self.classifier, ext)
        else:
            return "%s:%s:%s%s" % (self.group, self.artifact, self.version, ext)

    def key(self):
        return "%s:%s" % (self.group, self.artifact)

    def filename(self):
        if self.classifier:
            return "%s-%s-%s.%s" % (self.artifact, self.version, self.classifier, self.extension)
        else:
            return "%s-%s.%s" % (self.artifact, self.version, self.extension)

    def base(self):
        return "%s/%s/%s/" % (self.group.replace('.', '/'), self.artifact, self.version)

    def path(self):
        return self.base() + self.filename()

    def __repr__(self):
        return f"GradleSpecifier('{self}')"

    def __eq__(self, other):
        return str(self) == str(other)

    @classmethod
    def from_string(cls, v: str):
        ext_split = v.split('@')
        if len(ext_split) > 2:
            raise CoordinateParseError(f"Failed to build maven artifact from library name: {v!r}")

        components = ext_split[0].split(':')
        if len(components) not in (3, 4) or not all(components):
            raise CoordinateParseError(f"Failed to build maven artifact from library name: {v!r}")
        group = components[0]
        artifact = components[1]
        version = components[2]

        extension = None
        if len(ext_split) == 2:
            extension = ext_split[1]

        classifier = None
        if len(components) == 4:
            classifier = components[3]
        return cls(group, artifact, version, classifier, extension)


class MetaBase(pydantic.BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def dump(self, exclude_none: bool = True) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)

    def to_json(self, exclude_none: bool = True) -> str:
        return json.dumps(self.dump(exclude_none=exclude_none), sort_keys=True, indent=4)

    def write(self, file_path, exclude_none: bool = True):
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.to_json(exclude_none=exclude_none))


class GameVersion(MetaBase):
    model_config = ConfigDict(frozen=True)

    version: str
    stable: bool

    def __str__(self):
        return self.version


class Library(MetaBase):
    model_config = ConfigDict(extra="allow")

    name: str
    url: Optional[str] = None

    def specifier(self) -> GradleSpecifier:
        return GradleSpecifier.from_string(self.name)


class Arguments(MetaBase):
    model_config = ConfigDict(extra="allow")

    game: List[Any] = []


class ResolvedArtifact(MetaBase):
    """A library coordinate mapped onto its maven path, download url and place on disk."""

    model_config = ConfigDict(frozen=True)

    coordinate: str
    path: str
    url: str
    local_path: Path


def default_game_version(versions: List[GameVersion]) -> Optional[GameVersion]:
    return next((v for v in versions if v.stable), None)


def visible_game_versions(versions: List[GameVersion], show_snapshots: bool = False) -> List[GameVersion]:
    return [v for v in versions if show_snapshots or v.stable]
