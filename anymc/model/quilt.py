from typing import List, Optional

from pydantic import ConfigDict, Field

from . import Arguments, Library, MetaBase


class QuiltVersion(MetaBase):
    model_config = ConfigDict(frozen=True)

    separator: str
    build: int
    maven: str
    version: str

    @property
    def is_beta(self) -> bool:
        return "beta" in self.version

    def __str__(self):
        return self.version


class QuiltProfile(MetaBase):
    """Launch profile document served by Quilt meta. Fields this installer doesn't know are kept."""

    model_config = ConfigDict(extra="allow")

    id: str
    inherits_from: str = Field(alias="inheritsFrom")
    release_time: str = Field(alias="releaseTime")
    time: str
    type: str
    main_class: str = Field(alias="mainClass")
    arguments: Arguments
    libraries: List[Library]


class QuiltClientProfile(QuiltProfile):
    pass


class QuiltServerProfile(QuiltProfile):
    launcher_main_class: str = Field(alias="launcherMainClass")


def default_version(versions: List[QuiltVersion]) -> Optional[QuiltVersion]:
    return next((v for v in versions if not v.is_beta), None)


def visible_versions(versions: List[QuiltVersion], show_betas: bool = False) -> List[QuiltVersion]:
    return [v for v in versions if show_betas or not v.is_beta]
