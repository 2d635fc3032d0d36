from os.path import join, dirname

LOADER_NAME = "forge"
ICON_FILE = join(dirname(__file__), "icons", "forge.png")
