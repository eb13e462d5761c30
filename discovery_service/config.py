import os

EMPLOYEE_SERVICE_URL = os.getenv("EMPLOYEE_SERVICE_URL") or "http://employee-service:8000"

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT") or "2.0")

# Deadline around the whole record-store query, on top of the HTTP timeout.
REPOSITORY_TIMEOUT_SECONDS = float(os.getenv("REPOSITORY_TIMEOUT_SECONDS") or "3.0")

DEFAULT_RADIUS_KM = float(os.getenv("DEFAULT_RADIUS_KM") or "10")

LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"
LOG_FORMAT = os.getenv("LOG_FORMAT") or "json"
