"""
In-process fake of the DemoQA account endpoints for offline tests
"""

import json
import uuid

import httpx
import pytest

from account_api.config import SuiteConfig


class FakeDemoQA:
    """Minimal stateful stand-in for /Account/v1/*"""

    def __init__(self):
        self.users = {}
        self.tokens = {}
        self.requests = []
        self.delete_status = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/Account/v1/User":
            body = json.loads(request.content)
            if not body.get("password"):
                return httpx.Response(400, json={"code": "1200", "message": "UserName and Password required."})
            if any(user["username"] == body["userName"] for user in self.users.values()):
                return httpx.Response(406, json={"code": "1204", "message": "User exists!"})
            user_id = str(uuid.uuid4())
            self.users[user_id] = {"username": body["userName"], "password": body["password"]}
            return httpx.Response(201, json={"userID": user_id, "username": body["userName"], "books": []})

        if request.method == "POST" and path == "/Account/v1/GenerateToken":
            body = json.loads(request.content)
            for user_id, user in self.users.items():
                if user["username"] == body["userName"] and user["password"] == body["password"]:
                    token = uuid.uuid4().hex
                    self.tokens[token] = user_id
                    return httpx.Response(200, json={
                        "token": token,
                        "expires": "2030-01-01T00:00:00.000Z",
                        "status": "Success",
                        "result": "User authorized successfully.",
                    })
            return httpx.Response(200, json={
                "token": None, "expires": None, "status": "Failed", "result": "User authorization failed.",
            })

        if path.startswith("/Account/v1/User/"):
            user_id = path.rsplit("/", 1)[-1]
            token = request.headers.get("Authorization", "").replace("Bearer ", "")
            if self.tokens.get(token) != user_id:
                return httpx.Response(401, json={"code": "1207", "message": "User not found!"})
            if request.method == "GET":
                user = self.users[user_id]
                return httpx.Response(200, json={"userId": user_id, "username": user["username"], "books": []})
            if request.method == "DELETE":
                if self.delete_status is not None:
                    return httpx.Response(self.delete_status)
                del self.users[user_id]
                return httpx.Response(204)

        return httpx.Response(404, text="Not Found")


@pytest.fixture
def unit_config() -> SuiteConfig:
    return SuiteConfig(
        api_base_url="https://demoqa.test",
        users_api_base_url="https://users.test",
        request_timeout=5,
        test_timeout=5,
        test_data_prefix="unit",
        default_password="UnitPassword123!",
    )


@pytest.fixture
def fake_demoqa() -> FakeDemoQA:
    return FakeDemoQA()


@pytest.fixture
def fake_transport(fake_demoqa) -> httpx.MockTransport:
    return httpx.MockTransport(fake_demoqa.handler)
