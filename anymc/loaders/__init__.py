import logging
from pathlib import Path

from . import fabric, forge, quilt
from ..exceptions import ValidationError
from ..model import GameVersion
from ..model.loader import FabricLoader, ForgeLoader, InstallRequest, LoaderVersion, QuiltLoader, Side

logger = logging.getLogger(__name__)


def install(
    loader_version: LoaderVersion,
    side: Side,
    directory: Path,
    minecraft: GameVersion,
    generate: bool,
    sess=None,
):
    """
        Installs loader_version for minecraft into directory, which has to exist already.
        sess replaces the HTTP sessions of every request made during the install.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ValidationError(f"Installation directory doesn't exist: {directory}")

    request = InstallRequest(
        loader_version=loader_version,
        side=side,
        directory=directory,
        minecraft=minecraft,
        generate=generate,
    )
    logger.info("Installing %s %s (%s) for Minecraft %s", loader_version.name, loader_version, request.side.value, minecraft)

    if isinstance(loader_version, FabricLoader):
        fabric.install(request, sess)
    elif isinstance(loader_version, ForgeLoader):
        forge.install(request, sess)
    elif isinstance(loader_version, QuiltLoader):
        quilt.install(request, sess)
    else:
        raise TypeError(f"Unknown loader version {loader_version!r}")
