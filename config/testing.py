import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "attendance-data.test.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
