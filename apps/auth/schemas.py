"""
Auth schemas for API.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from apps.users.schemas import UserProfileOut


class LoginIn(Schema):
    email: str
    password: str


class AuthOut(Schema):
    user: UserProfileOut
    token: str
    expiresAt: datetime


class SessionOut(Schema):
    id: UUID
    user: UserProfileOut
    expiresAt: datetime


class MessageOut(Schema):
    message: str
