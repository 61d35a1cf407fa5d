"""Package-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "networking"


class TRANSPORT_EVENT:
    REQUEST_SENT = "request_sent"
    RESPONSE_RECEIVED = "response_received"
    ERROR_RECEIVED = "error_received"


class DISPATCH_STATE:
    BUILT = "BUILT"
    DISPATCHED = "DISPATCHED"
    DECODED = "DECODED"
    FAILED = "FAILED"
