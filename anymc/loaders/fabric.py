import logging
from typing import List

from ..common import default_session
from ..common.fabric import GAME_URL, LOADER_URL
from ..common.http import get_json
from ..model import GameVersion
from ..model.fabric import FabricVersion
from ..model.loader import InstallRequest

logger = logging.getLogger(__name__)


def fetch_minecraft(sess=None) -> List[GameVersion]:
    return get_json(sess or default_session(), GAME_URL, List[GameVersion])


def fetch_versions(sess=None) -> List[FabricVersion]:
    return get_json(sess or default_session(), LOADER_URL, List[FabricVersion])


def install(request: InstallRequest, sess=None):
    logger.warning("Fabric %s installs are not implemented, nothing was installed", request.side.value)
