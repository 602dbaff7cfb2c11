"""
用户存储

UserDbStorage 基于 users 表；InMemoryUserStorage 基于字典，
两者都满足 Storage 接口，可以互换注入到服务层。
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from filmorate.blueprints.users.models import Friendship, User
from filmorate.core.exceptions import (
    USER_NOT_FOUND_MESSAGE,
    StorageError,
    UserNotFoundError,
    UserValidationError,
)
from filmorate.core.pydantic_schemas import UserCreateSchema, UserSchema
from filmorate.storage.base import Storage, is_valid_id, storage_errors
from filmorate.storage.row_mapper import map_row_to_user, user_columns

logger = logging.getLogger(__name__)


class UserDbStorage(Storage):
    """users 表存储"""

    def __init__(self, db_session):
        self.db_session = db_session

    def exists(self, user_id: int) -> bool:
        if not is_valid_id(user_id):
            return False
        with storage_errors(self.db_session, f"检查用户 {user_id}"):
            row = self.db_session.query(User.id).filter(User.id == user_id).first()
        return row is not None

    def get(self, user_id: int) -> UserSchema:
        logger.debug(f"UserDbStorage: 查询用户 {user_id}")
        with storage_errors(self.db_session, f"查询用户 {user_id}"):
            row = (
                self.db_session.query(*user_columns(User))
                .filter(User.id == user_id)
                .first()
            )
        if row is None:
            raise UserNotFoundError(USER_NOT_FOUND_MESSAGE)
        return map_row_to_user(row._mapping)

    def find_all(self) -> List[UserSchema]:
        with storage_errors(self.db_session, "查询全部用户"):
            rows = self.db_session.query(*user_columns(User)).order_by(User.id).all()
        return [map_row_to_user(row._mapping) for row in rows]

    def login_taken(self, login: str, exclude_id: Optional[int] = None) -> bool:
        with storage_errors(self.db_session, f"检查登录名 {login}"):
            query = self.db_session.query(User.id).filter(User.login == login)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            return query.first() is not None

    def create(self, data: UserCreateSchema) -> UserSchema:
        user = User(
            email=data.email,
            login=data.login,
            name=data.name,
            birthday=data.birthday,
        )
        self.db_session.add(user)
        self._commit(f"创建用户 {data.login}")
        logger.info(f"用户创建成功: {user.login}, ID: {user.id}")
        return self.get(user.id)

    def update(self, user_id: int, data: UserCreateSchema) -> UserSchema:
        with storage_errors(self.db_session, f"更新用户 {user_id}"):
            user = self.db_session.get(User, user_id)
        if user is None:
            raise UserNotFoundError(USER_NOT_FOUND_MESSAGE)
        user.email = data.email
        user.login = data.login
        user.name = data.name
        user.birthday = data.birthday
        self._commit(f"更新用户 {user_id}")
        logger.info(f"用户更新成功: ID: {user_id}")
        return self.get(user_id)

    def delete(self, user_id: int) -> UserSchema:
        """删除用户，同时删除该用户作为任意一端的好友关系"""
        deleted = self.get(user_id)
        with storage_errors(self.db_session, f"删除用户 {user_id}"):
            removed_edges = (
                self.db_session.query(Friendship)
                .filter(
                    or_(Friendship.user_id == user_id, Friendship.friend_id == user_id)
                )
                .delete(synchronize_session=False)
            )
            self.db_session.query(User).filter(User.id == user_id).delete(
                synchronize_session=False
            )
            self.db_session.commit()
        logger.info(f"用户删除成功: ID: {user_id}, 同时删除 {removed_edges} 条好友关系")
        return deleted

    def _commit(self, action: str):
        try:
            self.db_session.commit()
        except IntegrityError as e:
            self.db_session.rollback()
            logger.warning(f"{action} 违反唯一约束: {e}")
            raise UserValidationError("登录名已存在") from e
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(f"数据库操作失败: {action}, 错误: {e}")
            raise StorageError(f"数据库操作失败: {action}") from e


class InMemoryUserStorage(Storage):
    """字典实现的用户存储，不依赖数据库"""

    def __init__(self, users: Optional[Iterable[UserSchema]] = None):
        self._users: Dict[int, UserSchema] = {}
        for user in users or []:
            self._users[user.id] = user

    def exists(self, user_id: int) -> bool:
        return is_valid_id(user_id) and user_id in self._users

    def get(self, user_id: int) -> UserSchema:
        if not self.exists(user_id):
            raise UserNotFoundError(USER_NOT_FOUND_MESSAGE)
        return self._users[user_id]

    def find_all(self) -> List[UserSchema]:
        return [self._users[key] for key in sorted(self._users)]

    def add(self, user: UserSchema):
        self._users[user.id] = user
