import os

# Pinned so results do not depend on the machine running the tests
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "UTC")

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
