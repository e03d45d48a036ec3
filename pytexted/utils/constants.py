APP_ORG = "QuickTools"
APP_NAME = "PyTextEditor"

# Window title prefix; the open file path is appended as "<name> - <path>"
BASE_WINDOW_NAME = "PyTextEditor"

DEFAULT_ENCODING = "utf-8"
DEFAULT_WINDOW_SIZE = (800, 600)

EXIT_KEYWORDS = ("close", "quit", "exit")
SAVE_KEYWORD = "save"
SAVEAS_PREFIX = "saveas"
OPEN_PREFIX = "open"

MSG_SAVE_FAILED = "ERROR: COULD NOT SAVE FILE"
MSG_SAVED = "Saved contents to file: {path}"
MSG_SAVEAS_USAGE = "Must specify file after command 'saveas'"
MSG_OPEN_USAGE = "Must specify filename after command 'open'"
MSG_UNKNOWN = "That doesn't make sense!"

FILE_FILTER = "Text (*.txt);;All files (*)"

SETTINGS_GEOMETRY = "window/geometry"
