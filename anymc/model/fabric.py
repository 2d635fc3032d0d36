from typing import List, Optional

from pydantic import ConfigDict

from . import MetaBase


class FabricVersion(MetaBase):
    model_config = ConfigDict(frozen=True)

    separator: str
    build: int
    maven: str
    version: str
    stable: bool

    def __str__(self):
        return self.version


def default_version(versions: List[FabricVersion]) -> Optional[FabricVersion]:
    return versions[0] if versions else None
