import os

EMPLOYEE_DB = os.getenv("EMPLOYEE_DB")

if not EMPLOYEE_DB:
    raise RuntimeError("EMPLOYEE_DB environment variable is not set")

RABBIT_URL = os.getenv("RABBIT_URL")  # optional in dev, required if you want events

LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"
LOG_FORMAT = os.getenv("LOG_FORMAT") or "json"
