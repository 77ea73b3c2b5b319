"""
Lightweight API testing configuration
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class SuiteConfig:
    """API testing configuration resolved from the environment"""

    # Remote services
    api_base_url: str = field(default_factory=lambda: _env('DEMOQA_BASE_URL', 'https://demoqa.com'))
    users_api_base_url: str = field(default_factory=lambda: _env('USERS_API_BASE_URL', 'https://api.example.com'))

    # Timeouts (seconds)
    request_timeout: float = field(default_factory=lambda: float(_env('REQUEST_TIMEOUT', '10')))
    test_timeout: float = field(default_factory=lambda: float(_env('TEST_TIMEOUT', '15')))

    # Test data
    test_data_prefix: str = field(default_factory=lambda: _env('TEST_DATA_PREFIX', 'testuser'))
    default_password: str = field(default_factory=lambda: _env('TEST_USER_PASSWORD', 'TestPassword123!'))

    def __post_init__(self):
        self.api_base_url = self.api_base_url.rstrip('/')
        self.users_api_base_url = self.users_api_base_url.rstrip('/')

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        for name in ('api_base_url', 'users_api_base_url'):
            parsed = urlparse(getattr(self, name))
            if parsed.scheme not in ('http', 'https') or not parsed.netloc:
                errors.append(f"{name} must be an absolute http(s) URL")

        if self.request_timeout <= 0:
            errors.append("request_timeout must be positive")
        if self.test_timeout <= 0:
            errors.append("test_timeout must be positive")
        if not self.test_data_prefix:
            errors.append("test_data_prefix must not be empty")

        return errors


def get_config() -> SuiteConfig:
    """Get validated test configuration"""
    config = SuiteConfig()
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
