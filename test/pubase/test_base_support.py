import logging
import sys

import pytest

from pubase import (get_log, puprint, set_logging_level, set_logging_color,
                    lookup_appdata_folder, PU_APP_NAME)
from pubase.support import handler, pu_colorizer


def test_get_log():
    log = get_log()
    assert log.name == PU_APP_NAME
    assert handler in log.handlers


def test_set_logging_level():
    set_logging_level(logging.DEBUG)
    assert handler.level == logging.DEBUG
    set_logging_level(logging.INFO)
    assert handler.level == logging.INFO


def test_set_logging_color():
    set_logging_color(False)
    assert handler.colorizer is not pu_colorizer
    set_logging_color(True)
    assert handler.colorizer is pu_colorizer


def test_puprint(capsys):
    set_logging_color(False)
    puprint('{"address": "175tWpb8K1S7NmH4Zx6rewF9WQrcZv245W"}')
    out, err = capsys.readouterr()
    assert '{"address": "175tWpb8K1S7NmH4Zx6rewF9WQrcZv245W"}' in out
    with pytest.raises(Exception):
        puprint("no such level", level="shout")


@pytest.mark.skipif(sys.platform != "linux", reason="posix layout only")
def test_lookup_appdata_folder():
    folder = lookup_appdata_folder(PU_APP_NAME)
    assert folder.endswith("." + PU_APP_NAME + "/")
