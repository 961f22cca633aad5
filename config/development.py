import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single JSON file holding the whole store
DATA_FILE = os.getenv("DATA_FILE", "attendance-data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
