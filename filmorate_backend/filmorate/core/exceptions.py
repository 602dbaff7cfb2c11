"""
业务异常定义与统一错误响应

- NotFoundError 及其子类: 引用的实体不存在，返回 404
- UserValidationError: 请求字段不合法，返回 400
- StorageError: 数据库故障（连接、非幂等的约束冲突等），返回 500
"""

import logging

from flask import jsonify
from pydantic import ValidationError

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "该id的用户不存在"
MPA_NOT_FOUND_MESSAGE = "该id的评级不存在"


class FilmorateError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(FilmorateError):
    status_code = 404


class UserNotFoundError(NotFoundError):
    pass


class MpaNotFoundError(NotFoundError):
    pass


class UserValidationError(FilmorateError):
    status_code = 400


class StorageError(FilmorateError):
    status_code = 500


def register_error_handlers(app):
    """注册统一的错误处理器"""

    @app.errorhandler(FilmorateError)
    def handle_filmorate_error(error):
        if error.status_code >= 500:
            logger.error(f"请求处理失败: {error.message}", exc_info=error)
        else:
            logger.info(f"请求被拒绝({error.status_code}): {error.message}")
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        messages = "; ".join(e["msg"] for e in error.errors())
        logger.info(f"请求参数校验失败: {messages}")
        return jsonify({"error": messages}), 400
