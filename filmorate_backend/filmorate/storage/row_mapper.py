"""
查询结果行到记录对象的唯一转换入口

存储层在 SELECT 时用下列标签命名列，转换只在这里发生：

    user_id        -> UserSchema.id
    user_email     -> UserSchema.email
    user_login     -> UserSchema.login
    user_name      -> UserSchema.name
    user_birthday  -> UserSchema.birthday
    mpa_id         -> MpaSchema.id
    mpa_name       -> MpaSchema.name

row 可以是 SQLAlchemy 的 RowMapping，也可以是普通 dict。
缺少必需列时抛出 KeyError。
"""

from typing import Any, Mapping

from filmorate.core.pydantic_schemas import MpaSchema, UserSchema


def map_row_to_user(row: Mapping[str, Any]) -> UserSchema:
    return UserSchema(
        id=row["user_id"],
        email=row["user_email"],
        login=row["user_login"],
        name=row["user_name"],
        birthday=row.get("user_birthday"),
    )


def map_row_to_mpa(row: Mapping[str, Any]) -> MpaSchema:
    return MpaSchema(id=row["mpa_id"], name=row["mpa_name"])


def user_columns(user_table):
    """按转换约定给 users 表的列加标签"""
    return (
        user_table.id.label("user_id"),
        user_table.email.label("user_email"),
        user_table.login.label("user_login"),
        user_table.name.label("user_name"),
        user_table.birthday.label("user_birthday"),
    )


def mpa_columns(mpa_table):
    return (mpa_table.id.label("mpa_id"), mpa_table.name.label("mpa_name"))
