"""HTTP header names and performance thresholds."""

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Log requests slower than 1 second
SLOW_REQUEST_THRESHOLD = 1.0
