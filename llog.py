# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"

logging_initialized = False

def init():
    global logging_initialized

    if logging_initialized:
        return

    config_file = "logging.ini"
    if len(sys.argv) >= 3:
        if sys.argv[1] == "-l":
            config_file = sys.argv[2]

    if os.path.isfile(config_file):
        logging.config.fileConfig(config_file, disable_existing_loggers=False)
    else:
        # Running outside of the source tree (installed, or under pytest from
        # elsewhere).
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    logging_initialized = True

if not logging_initialized:
    init()
