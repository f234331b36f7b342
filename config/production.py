import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", os.path.expanduser("~/.work_hours/work_hours.json"))

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
