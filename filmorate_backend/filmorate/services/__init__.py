"""
服务层

服务和存储在 create_app 中按依赖顺序显式构造，挂在 app.extensions["filmorate"] 上，
视图通过 get_services() 取用，不使用模块级单例。
"""

from dataclasses import dataclass

from flask import current_app

from filmorate.services.friend_service import FriendService
from filmorate.services.mpa_service import MpaService
from filmorate.services.user_service import UserService

EXTENSION_KEY = "filmorate"


@dataclass
class FilmorateServices:
    user_service: UserService
    friend_service: FriendService
    mpa_service: MpaService


def get_services() -> FilmorateServices:
    """获取当前应用的服务容器"""
    return current_app.extensions[EXTENSION_KEY]
