import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "instance/work_hours_test.json")

SESSION_DAYS = 1

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
