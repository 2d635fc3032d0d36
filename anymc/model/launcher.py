from typing import Any, Dict

from pydantic import ConfigDict, Field

from . import MetaBase

PROFILE_TYPE_CUSTOM = "custom"


class LauncherProfile(MetaBase):
    name: str
    type: str = PROFILE_TYPE_CUSTOM
    created: str
    last_version_id: str = Field(alias="lastVersionId")
    icon: str


class LauncherProfiles(MetaBase):
    """
        launcher_profiles.json of the vanilla launcher.
        Existing profiles are kept as they were read, so rewriting the file only changes the inserted entry.
    """

    model_config = ConfigDict(extra="allow")

    profiles: Dict[str, Dict[str, Any]]
    settings: Any
    version: int

    def insert(self, profile_id: str, profile: LauncherProfile):
        self.profiles[profile_id] = profile.dump()
