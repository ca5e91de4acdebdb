import os

# IANA zone used as "local time"; empty means the system zone
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
