import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Directory holding the storage slots (snapshot, auth token, pending verification)
DATA_DIR = os.getenv("DATA_DIR", "instance/storage")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
