"""
好友关系存储

friendships 表中的每一行是一条有向边 (user_id, friend_id)：
user_id 把 friend_id 加为好友，反向边需要单独添加。

本模块不校验用户是否存在，调用方（FriendService）负责校验。
每次变更都是单行操作并立即提交，不在进程内缓存任何边的状态。
"""

import logging
from typing import List

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import aliased

from filmorate.blueprints.users.models import Friendship, User
from filmorate.core.exceptions import StorageError
from filmorate.core.pydantic_schemas import UserSchema
from filmorate.storage.base import Storage, storage_errors
from filmorate.storage.row_mapper import map_row_to_user, user_columns

logger = logging.getLogger(__name__)


class FriendDbStorage:
    """有向好友边的持久化与集合查询"""

    def __init__(self, db_session, user_storage: Storage):
        self.db_session = db_session
        self.user_storage = user_storage

    def has_friend(self, user_id: int, friend_id: int) -> bool:
        with storage_errors(self.db_session, f"查询好友关系 {user_id}->{friend_id}"):
            row = (
                self.db_session.query(Friendship.user_id)
                .filter(
                    Friendship.user_id == user_id,
                    Friendship.friend_id == friend_id,
                )
                .first()
            )
        return row is not None

    def add_friend(self, user_id: int, friend_id: int) -> List[UserSchema]:
        """
        添加好友边，边已存在时视为成功

        返回:
            List[UserSchema]: [发起方, 目标方] 的完整记录
        """
        logger.debug(f"FriendDbStorage: 用户 {user_id} 添加好友 {friend_id}")
        if not self.has_friend(user_id, friend_id):
            self._insert_edge(user_id, friend_id)
        else:
            logger.debug(f"好友关系 {user_id}->{friend_id} 已存在，跳过插入")
        return [self.user_storage.get(user_id), self.user_storage.get(friend_id)]

    def delete_friend(self, user_id: int, friend_id: int) -> List[UserSchema]:
        """
        删除好友边，边不存在时视为成功

        返回:
            List[UserSchema]: [发起方, 目标方] 的完整记录
        """
        logger.debug(f"FriendDbStorage: 用户 {user_id} 删除好友 {friend_id}")
        with storage_errors(self.db_session, f"删除好友关系 {user_id}->{friend_id}"):
            removed = (
                self.db_session.query(Friendship)
                .filter(
                    Friendship.user_id == user_id,
                    Friendship.friend_id == friend_id,
                )
                .delete(synchronize_session=False)
            )
            self.db_session.commit()
        if removed:
            logger.info(f"好友关系已删除: {user_id}->{friend_id}")
        return [self.user_storage.get(user_id), self.user_storage.get(friend_id)]

    def get_all_friends(self, user_id: int) -> List[UserSchema]:
        """按用户 id 升序返回 user_id 的全部好友"""
        logger.debug(f"FriendDbStorage: 查询用户 {user_id} 的好友列表")
        with storage_errors(self.db_session, f"查询用户 {user_id} 的好友"):
            rows = (
                self.db_session.query(*user_columns(User))
                .join(Friendship, Friendship.friend_id == User.id)
                .filter(Friendship.user_id == user_id)
                .order_by(User.id)
                .all()
            )
        return [map_row_to_user(row._mapping) for row in rows]

    def get_common_friends(self, user_id: int, other_id: int) -> List[UserSchema]:
        """
        共同好友：同时存在 (user_id, x) 和 (other_id, x) 两条边的 x

        用一次自连接交给数据库求交集，连接顺序由数据库决定，
        结果与两侧好友数量的差距无关。
        """
        logger.debug(f"FriendDbStorage: 查询用户 {user_id} 和 {other_id} 的共同好友")
        mine = aliased(Friendship)
        theirs = aliased(Friendship)
        with storage_errors(self.db_session, f"查询共同好友 {user_id}&{other_id}"):
            rows = (
                self.db_session.query(*user_columns(User))
                .join(mine, mine.friend_id == User.id)
                .join(theirs, theirs.friend_id == User.id)
                .filter(mine.user_id == user_id, theirs.user_id == other_id)
                .distinct()
                .order_by(User.id)
                .all()
            )
        return [map_row_to_user(row._mapping) for row in rows]

    def _insert_edge(self, user_id: int, friend_id: int):
        try:
            self.db_session.execute(
                insert(Friendship).values(user_id=user_id, friend_id=friend_id)
            )
            self.db_session.commit()
        except IntegrityError as e:
            self.db_session.rollback()
            # 并发请求可能已经插入了同一条边，此时视为成功
            if self.has_friend(user_id, friend_id):
                logger.warning(f"好友关系 {user_id}->{friend_id} 已被并发写入，忽略重复插入")
                return
            logger.error(f"插入好友关系失败: {user_id}->{friend_id}, 错误: {e}")
            raise StorageError(f"数据库操作失败: 添加好友关系 {user_id}->{friend_id}") from e
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(f"插入好友关系失败: {user_id}->{friend_id}, 错误: {e}")
            raise StorageError(f"数据库操作失败: 添加好友关系 {user_id}->{friend_id}") from e
        logger.info(f"好友关系已添加: {user_id}->{friend_id}")
