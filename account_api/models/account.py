"""
DemoQA Account API Pydantic models
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictStr


class TokenStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


class CreatedUser(BaseModel):
    """Body of a successful POST /Account/v1/User"""
    userID: StrictStr
    username: StrictStr
    books: List[Any]


class TokenResult(BaseModel):
    """Body of POST /Account/v1/GenerateToken

    A rejected login still answers 200 with status Failed and no token.
    """
    token: Optional[StrictStr] = None
    expires: Optional[str] = None
    status: TokenStatus
    result: StrictStr


class UserAccount(BaseModel):
    """Body of GET /Account/v1/User/{UUID}"""
    userId: StrictStr
    username: StrictStr
    books: List[Any]


class ApiMessage(BaseModel):
    """Error envelope used by the account endpoints"""
    code: Optional[str] = None
    message: StrictStr = Field(min_length=1)
