"""
用户服务层

负责用户资料的增删改查和字段校验，存储层只处理已校验的数据
"""

import logging
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from filmorate.core.exceptions import (
    USER_NOT_FOUND_MESSAGE,
    UserNotFoundError,
    UserValidationError,
)
from filmorate.core.pydantic_schemas import UserCreateSchema, UserSchema, UserUpdateSchema
from filmorate.services.validation import validate_exists

logger = logging.getLogger(__name__)


class UserService:
    """用户服务类"""

    def __init__(self, user_storage):
        self.user_storage = user_storage

    def create(self, payload: Dict[str, Any]) -> UserSchema:
        data = self._parse(UserCreateSchema, payload)
        logger.debug(f"UserService: 创建用户 {data.login}")
        if self.user_storage.login_taken(data.login):
            raise UserValidationError("登录名已存在")
        return self.user_storage.create(data)

    def update(self, payload: Dict[str, Any]) -> UserSchema:
        data = self._parse(UserUpdateSchema, payload)
        logger.debug(f"UserService: 更新用户 {data.id}")
        self.validate_user_exists(data.id)
        if self.user_storage.login_taken(data.login, exclude_id=data.id):
            raise UserValidationError("登录名已存在")
        return self.user_storage.update(data.id, data)

    def get(self, user_id: int) -> UserSchema:
        self.validate_user_exists(user_id)
        return self.user_storage.get(user_id)

    def find_all(self) -> List[UserSchema]:
        return self.user_storage.find_all()

    def delete(self, user_id: int) -> UserSchema:
        logger.debug(f"UserService: 删除用户 {user_id}")
        self.validate_user_exists(user_id)
        return self.user_storage.delete(user_id)

    def validate_user_exists(self, user_id: int) -> None:
        validate_exists(
            self.user_storage, user_id, UserNotFoundError, USER_NOT_FOUND_MESSAGE
        )

    @staticmethod
    def _parse(schema: Type[BaseModel], payload: Dict[str, Any]):
        if not isinstance(payload, dict):
            raise UserValidationError("请求体必须是JSON对象")
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise UserValidationError(f"参数错误: {messages}") from e
