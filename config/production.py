import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "/var/lib/attendance-eligibility/attendance-data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
