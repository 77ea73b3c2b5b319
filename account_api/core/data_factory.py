"""
Lightweight test data factory
Generates clearly-marked account credentials that satisfy DemoQA password rules
"""

import time
from typing import Dict, Optional

from faker import Faker

from account_api.config import SuiteConfig, get_config

NONEXISTENT_USER_ID = "00000000-0000-0000-0000-000000000000"


class DataFactory:
    """Lightweight test data generator"""

    def __init__(self, config: Optional[SuiteConfig] = None, seed: Optional[int] = None):
        self.config = config or get_config()
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def generate_user(self, **overrides) -> Dict[str, str]:
        """Generate credentials for a user that does not exist yet"""
        user_name = f"{self.config.test_data_prefix}_{int(time.time() * 1000)}_{self.fake.lexify('????')}"
        data = {
            "userName": user_name,
            "password": self.config.default_password,
        }
        data.update(overrides)
        return data

    def generate_invalid_user(self, **overrides) -> Dict[str, str]:
        """Credentials with an empty password"""
        data = {
            "userName": f"{self.config.test_data_prefix}_invalid",
            "password": "",
        }
        data.update(overrides)
        return data

    def generate_password(self) -> str:
        # DemoQA requires upper, lower, digit and a non alphanumeric character
        return self.fake.password(length=14, special_chars=True, digits=True,
                                  upper_case=True, lower_case=True)

    def generate_wrong_password(self, credentials: Dict[str, str]) -> Dict[str, str]:
        """Same user name, a different but well-formed password"""
        password = self.generate_password()
        while password == credentials.get("password"):
            password = self.generate_password()
        return {"userName": credentials["userName"], "password": password}
