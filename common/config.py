from datetime import date
import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CINEMA_BIRTH_DATE = date(1895, 12, 28)
DESCRIPTION_MAX_LENGTH = 200


def configure_logging():
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
