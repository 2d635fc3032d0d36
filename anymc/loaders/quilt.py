import logging
from pathlib import Path
from typing import List

from ..common import default_session, download_session
from ..common.http import get_json, download_libraries
from ..common.jar import create_launch_jar
from ..common.launcher import LIBRARIES_DIR, generate_profile, write_launch_scripts, write_version_profile
from ..common.maven import filter_libraries, resolve_artifact
from ..common import fabric as fabric_common
from ..common.quilt import (
    CONFLICTING_LIBRARIES,
    GAME_URL,
    LOADER_URL,
    MAVEN,
    MAVEN_PREFIX,
    SERVER_LAUNCH_JAR,
    profile_url,
    server_profile_url,
)
from ..model import GameVersion
from ..model.loader import InstallRequest, Side
from ..model.quilt import QuiltClientProfile, QuiltServerProfile, QuiltVersion

logger = logging.getLogger(__name__)


def fetch_minecraft(sess=None) -> List[GameVersion]:
    return get_json(sess or default_session(), GAME_URL, List[GameVersion])


def fetch_versions(sess=None) -> List[QuiltVersion]:
    return get_json(sess or default_session(), LOADER_URL, List[QuiltVersion])


def fetch_client_profile(sess, minecraft: str, version: str) -> QuiltClientProfile:
    return get_json(sess, profile_url(minecraft, version), QuiltClientProfile)


def fetch_server_profile(sess, minecraft: str, version: str) -> QuiltServerProfile:
    return get_json(sess, server_profile_url(minecraft, version), QuiltServerProfile)


def install(request: InstallRequest, sess=None):
    if request.side is Side.CLIENT:
        install_client(request, sess or default_session())
    else:
        install_server(request, sess or default_session(), sess or download_session())


def install_client(request: InstallRequest, sess):
    profile_id = request.profile_id()
    logger.info("Installing Quilt client profile %s into %s", profile_id, request.directory)

    profile = fetch_client_profile(sess, str(request.minecraft), str(request.loader_version))
    profile = profile.model_copy(update={"libraries": filter_libraries(profile.libraries, CONFLICTING_LIBRARIES)})

    write_version_profile(request.directory, profile_id, profile)

    if request.generate:
        generate_profile(request.directory, request.minecraft, request.loader_version)


def install_server(request: InstallRequest, sess, download_sess):
    logger.info("Installing Quilt server %s for %s into %s",
                request.loader_version, request.minecraft, request.directory)

    profile = fetch_server_profile(sess, str(request.minecraft), str(request.loader_version))
    libraries = filter_libraries(profile.libraries, CONFLICTING_LIBRARIES)

    libraries_dir = Path(request.directory) / LIBRARIES_DIR
    artifacts = [
        resolve_artifact(lib.name, libraries_dir, MAVEN_PREFIX, MAVEN, fabric_common.MAVEN)
        for lib in libraries
    ]
    library_paths = download_libraries(download_sess, artifacts)

    jar = Path(request.directory) / SERVER_LAUNCH_JAR
    create_launch_jar(jar, profile.launcher_main_class, library_paths)

    if request.generate:
        write_launch_scripts(request.directory, SERVER_LAUNCH_JAR)
