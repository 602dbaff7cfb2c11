import logging
from typing import List

from filmorate.core.exceptions import MPA_NOT_FOUND_MESSAGE, MpaNotFoundError
from filmorate.core.pydantic_schemas import MpaSchema
from filmorate.services.validation import validate_exists
from filmorate.storage.base import Storage

logger = logging.getLogger(__name__)


class MpaService:
    """评级目录服务"""

    def __init__(self, mpa_storage: Storage):
        self.mpa_storage = mpa_storage

    def find_all(self) -> List[MpaSchema]:
        logger.debug("MpaService: 查询全部评级")
        return self.mpa_storage.find_all()

    def get(self, mpa_id: int) -> MpaSchema:
        logger.debug(f"MpaService: 查询评级 {mpa_id}")
        self.validate_mpa_exists(mpa_id)
        return self.mpa_storage.get(mpa_id)

    def validate_mpa_exists(self, mpa_id: int) -> None:
        validate_exists(self.mpa_storage, mpa_id, MpaNotFoundError, MPA_NOT_FOUND_MESSAGE)
