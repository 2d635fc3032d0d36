import base64
import logging
import shutil
import stat
from pathlib import Path

import pydantic

from . import serialize_datetime, utc_now
from ..exceptions import DecodeError
from ..model import GameVersion, MetaBase
from ..model.launcher import LauncherProfile, LauncherProfiles, PROFILE_TYPE_CUSTOM
from ..model.loader import profile_id

logger = logging.getLogger(__name__)

VERSIONS_DIR = "versions"
LIBRARIES_DIR = "libraries"
LAUNCHER_PROFILES_FILE = "launcher_profiles.json"


def icon_data_uri(icon: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(icon).decode("ascii")


def write_version_profile(directory: Path, profile_id: str, profile: MetaBase) -> Path:
    """
        Replaces versions/<profile_id>/ with the profile document and an empty jar.
        The jar only exists so the vanilla launcher finds one.
    """
    profile_dir = Path(directory) / VERSIONS_DIR / profile_id

    if profile_dir.exists():
        logger.info("Removing existing profile directory %s", profile_dir)
        shutil.rmtree(profile_dir)

    profile_dir.mkdir(parents=True)

    (profile_dir / f"{profile_id}.jar").touch()
    profile.write(profile_dir / f"{profile_id}.json")

    return profile_dir


def load_launcher_profiles(path: Path) -> LauncherProfiles:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    try:
        return LauncherProfiles.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise DecodeError(f"Invalid launcher profiles file {path}: {e}") from e


def generate_profile(directory: Path, minecraft: GameVersion, loader_version) -> str:
    """
        Adds (or replaces) the launcher profile for loader_version on minecraft in launcher_profiles.json.
        The file has to exist already. Returns the profile id.
    """
    version_id = profile_id(loader_version, minecraft)
    path = Path(directory) / LAUNCHER_PROFILES_FILE

    profiles = load_launcher_profiles(path)
    profiles.insert(version_id, LauncherProfile(
        name=f"{loader_version.name}-{minecraft}",
        type=PROFILE_TYPE_CUSTOM,
        created=serialize_datetime(utc_now()),
        last_version_id=version_id,
        icon=icon_data_uri(loader_version.icon()),
    ))

    logger.info("Writing launcher profile %s to %s", version_id, path)
    profiles.write(path, exclude_none=False)

    return version_id


def write_launch_scripts(directory: Path, jar_name: str):
    directory = Path(directory)

    sh = directory / "start.sh"
    with open(sh, "w", encoding="utf-8", newline="\n") as f:
        f.write("#!/usr/bin/env sh\n")
        f.write(f'exec java -jar "{jar_name}" nogui "$@"\n')
    sh.chmod(sh.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    bat = directory / "start.bat"
    with open(bat, "w", encoding="utf-8", newline="\r\n") as f:
        f.write("@echo off\n")
        f.write(f'java -jar "{jar_name}" nogui %*\n')
        f.write("pause\n")

    logger.info("Wrote launch scripts to %s", directory)
    return [sh, bat]
