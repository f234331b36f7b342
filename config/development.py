import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Durable key-value store (users, settings, entries, remembered login)
DATA_FILE = os.getenv("DATA_FILE", "instance/work_hours.json")

# "Remember me" cookie lifetime
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
