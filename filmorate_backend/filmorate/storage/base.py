"""
存储抽象

所有实体存储共享同一形态：“表 T 中是否存在该 id 的行”以及按 id 读取。
服务层只依赖这个接口，具体实现（数据库表、内存字典）通过构造函数注入。
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError

from filmorate.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class Storage(ABC):
    """按整数 id 查询的实体存储"""

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """id 对应的记录是否存在"""

    @abstractmethod
    def get(self, entity_id: int) -> Any:
        """读取记录，不存在时抛出 NotFoundError 子类"""

    @abstractmethod
    def find_all(self) -> List[Any]:
        """按 id 升序返回全部记录"""


def is_valid_id(entity_id) -> bool:
    # bool 是 int 的子类，需要排除
    return (
        isinstance(entity_id, int)
        and not isinstance(entity_id, bool)
        and entity_id > 0
    )


@contextmanager
def storage_errors(db_session, action: str):
    """把数据库异常回滚后转换为 StorageError，业务异常原样抛出"""
    try:
        yield
    except SQLAlchemyError as e:
        db_session.rollback()
        logger.error(f"数据库操作失败: {action}, 错误: {e}")
        raise StorageError(f"数据库操作失败: {action}") from e
