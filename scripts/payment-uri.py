#!/usr/bin/env python3

from pubase import puprint
from puclient import uri_tool_main

if __name__ == "__main__":
    puprint(uri_tool_main(), "success")
