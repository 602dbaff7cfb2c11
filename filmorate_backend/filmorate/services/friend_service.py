"""
好友服务层

所有好友操作先按顺序校验涉及的每个用户 id（发起方在前，目标方在后），
校验全部通过后才调用存储层。校验失败时存储层不会被调用。
"""

import logging
from typing import List

from filmorate.core.exceptions import USER_NOT_FOUND_MESSAGE, UserNotFoundError
from filmorate.core.pydantic_schemas import UserSchema
from filmorate.services.validation import validate_exists
from filmorate.storage.base import Storage

logger = logging.getLogger(__name__)


class FriendService:
    """好友服务类"""

    def __init__(self, user_storage: Storage, friend_storage):
        self.user_storage = user_storage
        self.friend_storage = friend_storage

    def add_friend(self, user_id: int, friend_id: int) -> List[UserSchema]:
        logger.debug(f"FriendService: 用户 {user_id} 请求添加好友 {friend_id}")
        self.validate_friend_exists(user_id)
        self.validate_friend_exists(friend_id)
        return self.friend_storage.add_friend(user_id, friend_id)

    def delete_friend(self, user_id: int, friend_id: int) -> List[UserSchema]:
        logger.debug(f"FriendService: 用户 {user_id} 请求删除好友 {friend_id}")
        self.validate_friend_exists(user_id)
        self.validate_friend_exists(friend_id)
        return self.friend_storage.delete_friend(user_id, friend_id)

    def find_all(self, user_id: int) -> List[UserSchema]:
        logger.debug(f"FriendService: 查询用户 {user_id} 的全部好友")
        self.validate_friend_exists(user_id)
        return self.friend_storage.get_all_friends(user_id)

    def get_common_friends(self, user_id: int, other_id: int) -> List[UserSchema]:
        logger.debug(f"FriendService: 查询用户 {user_id} 和 {other_id} 的共同好友")
        self.validate_friend_exists(user_id)
        self.validate_friend_exists(other_id)
        return self.friend_storage.get_common_friends(user_id, other_id)

    def validate_friend_exists(self, user_id: int) -> None:
        validate_exists(
            self.user_storage, user_id, UserNotFoundError, USER_NOT_FOUND_MESSAGE
        )
