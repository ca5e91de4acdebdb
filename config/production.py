import os

LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
