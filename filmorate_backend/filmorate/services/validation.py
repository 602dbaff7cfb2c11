"""
存在性校验

用户和评级共用同一个检查：“该 id 在对应存储中是否存在”。
任何依赖某个 id 的操作都必须先通过这里，不存在时立即抛出对应的业务异常。
"""

import logging
from typing import Type

from filmorate.core.exceptions import NotFoundError
from filmorate.storage.base import Storage

logger = logging.getLogger(__name__)


def validate_exists(
    storage: Storage,
    entity_id: int,
    error_cls: Type[NotFoundError],
    message: str,
) -> None:
    """
    校验 id 是否存在

    参数:
        storage (Storage): 被检查的存储
        entity_id (int): 实体ID
        error_cls (Type[NotFoundError]): 不存在时抛出的异常类型
        message (str): 异常信息
    """
    logger.debug(f"{type(storage).__name__}: 检查 id {entity_id} 是否存在")
    if not storage.exists(entity_id):
        raise error_cls(message)
