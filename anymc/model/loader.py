from enum import Enum
from pathlib import Path
from typing import ClassVar, Union

from pydantic import ConfigDict

from . import GameVersion, MetaBase
from .fabric import FabricVersion
from .quilt import QuiltVersion
from ..common import fabric, forge, quilt


class Side(str, Enum):
    CLIENT = "client"
    SERVER = "server"


class Loader(str, Enum):
    FABRIC = "fabric"
    FORGE = "forge"
    QUILT = "quilt"


class LoaderVersionBase(MetaBase):
    model_config = ConfigDict(frozen=True)

    loader: ClassVar[Loader]
    name: ClassVar[str]
    icon_file: ClassVar[str]

    def icon(self) -> bytes:
        with open(self.icon_file, "rb") as f:
            return f.read()


class FabricLoader(LoaderVersionBase):
    loader = Loader.FABRIC
    name = fabric.LOADER_NAME
    icon_file = fabric.ICON_FILE

    version: FabricVersion

    def __str__(self):
        return str(self.version)


class ForgeLoader(LoaderVersionBase):
    loader = Loader.FORGE
    name = forge.LOADER_NAME
    icon_file = forge.ICON_FILE

    version: bool

    def __str__(self):
        return str(self.version).lower()


class QuiltLoader(LoaderVersionBase):
    loader = Loader.QUILT
    name = quilt.LOADER_NAME
    icon_file = quilt.ICON_FILE

    version: QuiltVersion

    def __str__(self):
        return str(self.version)


LoaderVersion = Union[FabricLoader, ForgeLoader, QuiltLoader]


def profile_id(loader_version: LoaderVersion, minecraft) -> str:
    """The versions/ directory and launcher profile name, e.g. quilt-loader-0.19.1-1.19.4."""
    return f"{loader_version.name}-{loader_version}-{minecraft}"


class InstallRequest(MetaBase):
    model_config = ConfigDict(frozen=True)

    loader_version: LoaderVersion
    side: Side
    directory: Path
    minecraft: GameVersion
    generate: bool

    def profile_id(self) -> str:
        return profile_id(self.loader_version, self.minecraft)
