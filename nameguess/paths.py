import logging

logger = logging.getLogger("nameguess")

DATA_PACKAGE = "nameguess.data"
