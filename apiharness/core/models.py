from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


# ----------------------------------------------------------------------
# Account service payloads
# ----------------------------------------------------------------------
class TestUser(BaseModel):
    """Credentials for a throwaway account, serialised with the wire names."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(alias="userName")
    password: str

    def credentials(self) -> dict:
        return self.model_dump(by_alias=True)


class Session(BaseModel):
    user: TestUser
    user_id: str
    token: str
    released: bool = False


class Book(BaseModel):
    isbn: str
    title: Optional[str] = None


class CreatedUser(BaseModel):
    user_id: str = Field(alias="userID")
    username: str
    books: List[Book] = Field(default_factory=list)


class TokenResponse(BaseModel):
    # Success fills token/expires, failure fills status/result with a null token
    token: Optional[str] = None
    expires: Optional[str] = None
    status: Optional[str] = None
    result: Optional[str] = None


class AccountUser(BaseModel):
    user_id: str = Field(alias="userId")
    username: str
    books: List[Book] = Field(default_factory=list)


# ----------------------------------------------------------------------
# Profile API payloads
# ----------------------------------------------------------------------
class _Strict(BaseModel):
    model_config = ConfigDict(extra="allow")


class Address(_Strict):
    street: StrictStr
    city: StrictStr
    state: StrictStr
    zipcode: StrictStr
    country: StrictStr


class Company(_Strict):
    name: StrictStr
    industry: StrictStr
    position: StrictStr


class Preferences(_Strict):
    language: StrictStr
    timezone: StrictStr
    notifications_enabled: StrictBool


class UserProfile(_Strict):
    id: StrictInt
    name: StrictStr
    email: StrictStr
    username: StrictStr
    phone: StrictStr
    address: Address
    company: Company
    dob: StrictStr
    profile_picture_url: StrictStr
    is_active: StrictBool
    created_at: StrictStr
    updated_at: StrictStr
    preferences: Preferences


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: StrictStr
    details: StrictStr
