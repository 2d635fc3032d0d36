from os.path import join, dirname

META = "https://meta.fabricmc.net/v2/versions"
GAME_URL = META + "/game"
LOADER_URL = META + "/loader"
MAVEN = "https://maven.fabricmc.net/"

LOADER_NAME = "fabric-loader"
ICON_FILE = join(dirname(__file__), "icons", "fabric.png")
