"""
Pydantic 序列化模型定义入口。
查询结果统一转换为这里的模型，再由视图层 dump 为 JSON。
"""

import re
from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserSchema(BaseModel):
    id: int
    email: str
    login: str
    name: str
    birthday: Optional[date] = None

    class Config:
        from_attributes = True


class MpaSchema(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class UserCreateSchema(BaseModel):
    """创建用户的请求体校验"""

    email: str
    login: str
    name: Optional[str] = None
    birthday: Optional[date] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value):
            raise ValueError("邮箱格式不正确")
        return value

    @field_validator("login")
    @classmethod
    def check_login(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("登录名不能为空且不能包含空格")
        return value

    @field_validator("birthday")
    @classmethod
    def check_birthday(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("生日不能是未来的日期")
        return value

    @model_validator(mode="after")
    def fill_name(self):
        # 名字为空时使用登录名
        if not self.name or not self.name.strip():
            self.name = self.login
        return self


class UserUpdateSchema(UserCreateSchema):
    id: int
