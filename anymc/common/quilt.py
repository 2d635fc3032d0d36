from os.path import join, dirname

META = "https://meta.quiltmc.org/v3/versions"
GAME_URL = META + "/game"
LOADER_URL = META + "/loader"
MAVEN = "https://maven.quiltmc.org/repository/release"

# Libraries under this maven path prefix come from the Quilt maven, everything else from Fabric's
MAVEN_PREFIX = "org/quiltmc"

LOADER_NAME = "quilt-loader"
ICON_FILE = join(dirname(__file__), "icons", "quilt.png")

SERVER_LAUNCH_JAR = "quilt-server-launch.jar"

# Quilt meta lists both hashed and intermediary. With both on the classpath quilt-loader
# silently fails to remap, so any hashed artifact is dropped from every profile.
CONFLICTING_LIBRARIES = {
    "hashed",
}


def profile_url(minecraft: str, loader: str) -> str:
    return f"{LOADER_URL}/{minecraft}/{loader}/profile/json"


def server_profile_url(minecraft: str, loader: str) -> str:
    return f"{LOADER_URL}/{minecraft}/{loader}/server/json"
