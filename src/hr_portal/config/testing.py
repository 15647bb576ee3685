import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", "instance/test-storage")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
