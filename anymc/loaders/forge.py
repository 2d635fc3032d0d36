import logging

from ..model.loader import InstallRequest

logger = logging.getLogger(__name__)


def install(request: InstallRequest, sess=None):
    logger.warning("Forge %s installs are not implemented, nothing was installed", request.side.value)
