import logging
from typing import List

from filmorate.blueprints.mpa.models import DEFAULT_MPA_RATINGS, Mpa
from filmorate.core.exceptions import MPA_NOT_FOUND_MESSAGE, MpaNotFoundError
from filmorate.core.pydantic_schemas import MpaSchema
from filmorate.storage.base import Storage, is_valid_id, storage_errors
from filmorate.storage.row_mapper import map_row_to_mpa, mpa_columns

logger = logging.getLogger(__name__)


class MpaDbStorage(Storage):
    """mpa 评级表存储，只读"""

    def __init__(self, db_session):
        self.db_session = db_session

    def exists(self, mpa_id: int) -> bool:
        if not is_valid_id(mpa_id):
            return False
        with storage_errors(self.db_session, f"检查评级 {mpa_id}"):
            row = self.db_session.query(Mpa.id).filter(Mpa.id == mpa_id).first()
        return row is not None

    def get(self, mpa_id: int) -> MpaSchema:
        logger.debug(f"MpaDbStorage: 查询评级 {mpa_id}")
        with storage_errors(self.db_session, f"查询评级 {mpa_id}"):
            row = (
                self.db_session.query(*mpa_columns(Mpa)).filter(Mpa.id == mpa_id).first()
            )
        if row is None:
            raise MpaNotFoundError(MPA_NOT_FOUND_MESSAGE)
        return map_row_to_mpa(row._mapping)

    def find_all(self) -> List[MpaSchema]:
        with storage_errors(self.db_session, "查询全部评级"):
            rows = self.db_session.query(*mpa_columns(Mpa)).order_by(Mpa.id).all()
        return [map_row_to_mpa(row._mapping) for row in rows]


def seed_mpa_ratings(db_session) -> int:
    """写入缺失的标准评级，可重复执行，返回新增条数"""
    with storage_errors(db_session, "初始化评级数据"):
        existing = {row[0] for row in db_session.query(Mpa.id).all()}
        added = 0
        for mpa_id, name in DEFAULT_MPA_RATINGS:
            if mpa_id not in existing:
                db_session.add(Mpa(id=mpa_id, name=name))
                added += 1
        db_session.commit()
    if added:
        logger.info(f"已写入 {added} 条评级数据")
    return added
