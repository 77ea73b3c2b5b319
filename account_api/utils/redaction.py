"""
Log sanitizing for request and response payloads
"""

from typing import Any

SENSITIVE_FIELD_PATTERNS = [
    'password', 'token', 'secret', 'authorization', 'bearer', 'credential'
]
MAX_BODY_LOG_SIZE = 2000
REDACTED = "***REDACTED***"


def is_sensitive_field(field_name: str) -> bool:
    """Check if a field contains sensitive data"""
    field_lower = field_name.lower()
    return any(pattern in field_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def redact(data: Any) -> Any:
    """Recursively mask sensitive values before they reach the logs"""
    if isinstance(data, dict):
        return {
            key: REDACTED if is_sensitive_field(str(key)) else redact(value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [redact(item) for item in data]
    elif isinstance(data, str) and len(data) > MAX_BODY_LOG_SIZE:
        return data[:MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
    else:
        return data
