
import logging, sys
from os import path, environ
# payuri version
PU_CORE_VERSION = '0.1.0'

# global payuri constants
PU_APP_NAME = "payuri"

# Exit status codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ARGERROR = 2

from chromalog.log import (
    ColorizingStreamHandler,
    ColorizingFormatter,
)
from chromalog.colorizer import GenericColorizer, MonochromaticColorizer
from colorama import Fore, Back, Style

# magic; importing e.g. 'info' actually instantiates
# that as a function that uses the color map
# defined below. ( noqa because flake doesn't understand)
from chromalog.mark.helpers.simple import (  # noqa: F401
    debug,
    info,
    important,
    success,
    warning,
    error,
    critical,
)

# our chosen colorings for log messages:
pu_color_map = {
    'debug': (Style.DIM + Fore.LIGHTBLUE_EX, Style.RESET_ALL),
    'info': (Style.BRIGHT + Fore.BLUE, Style.RESET_ALL),
    'important': (Style.BRIGHT, Style.RESET_ALL),
    'success': (Fore.GREEN, Style.RESET_ALL),
    'warning': (Fore.YELLOW, Style.RESET_ALL),
    'error': (Fore.RED, Style.RESET_ALL),
    'critical': (Back.RED, Style.RESET_ALL),
}

_printers = {
    'debug': debug,
    'info': info,
    'important': important,
    'success': success,
    'warning': warning,
    'error': error,
    'critical': critical,
}

class PUColorizer(GenericColorizer):
    default_color_map = pu_color_map

pu_colorizer = PUColorizer()

logFormatter = ColorizingFormatter(
    "%(asctime)s [%(levelname)s]  %(message)s")
log = logging.getLogger(PU_APP_NAME)
log.setLevel(logging.DEBUG)

debug_silence = [False]

class PUStreamHandler(ColorizingStreamHandler):

    def __init__(self):
        super().__init__(colorizer=pu_colorizer)

    def emit(self, record):
        if not debug_silence[0]:
            super().emit(record)

handler = PUStreamHandler()
handler.setFormatter(logFormatter)
handler.setLevel(logging.INFO)
log.addHandler(handler)

def puprint(msg, level="info"):
    """ Provides the ability to print messages
    with consistent formatting, outside the logging system
    (in case you don't want the standard log format).
    Used by the command line script to print results,
    which must not be interleaved with log timestamps.
    """
    if not level in pu_color_map.keys():
        raise Exception("Unsupported formatting")

    # .colorize_message function does a .format() on the string,
    # which does not work with string-ified json; this should
    # result in output as intended:
    msg = msg.replace('{', '{{')
    msg = msg.replace('}', '}}')

    fmtfn = _printers[level]
    print(pu_colorizer.colorize_message(fmtfn(msg)))

def get_log():
    """
    provides payuri logging instance
    :return: log instance
    """
    return log

def set_logging_level(level):
    handler.setLevel(level)

def set_logging_color(colored=False):
    if colored:
        handler.colorizer = pu_colorizer
    else:
        handler.colorizer = MonochromaticColorizer()

def lookup_appdata_folder(appname):
    """ Given an appname as a string,
    return the correct directory for storing
    data for the given OS environment.
    """
    if sys.platform == 'darwin':
        if "HOME" in environ:
            data_folder = path.join(environ["HOME"],
                                   "Library/Application support/",
                                   appname) + '/'
        else:
            puprint("Could not find home folder")
            sys.exit(EXIT_FAILURE)

    elif 'win32' in sys.platform or 'win64' in sys.platform:
        data_folder = path.join(environ['APPDATA'], appname) + '\\'
    else:
        data_folder = path.expanduser(path.join("~", "." + appname + "/"))
    return data_folder

def print_pu_version(option, opt_str, value, parser):
    print("payuri " + PU_CORE_VERSION)
    sys.exit(EXIT_SUCCESS)
