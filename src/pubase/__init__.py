
from .support import (get_log, debug_silence, puprint, set_logging_level,
                      set_logging_color, lookup_appdata_folder,
                      print_pu_version, EXIT_ARGERROR, EXIT_FAILURE,
                      EXIT_SUCCESS, PU_APP_NAME, PU_CORE_VERSION)
