"""
DemoQA account API test toolkit
REST client, data factory and expectation helpers shared by the live and mock suites
"""

__version__ = "1.0.0"
