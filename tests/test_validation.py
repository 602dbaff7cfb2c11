"""
存在性校验测试
"""

import pytest

from filmorate.core.exceptions import (
    MPA_NOT_FOUND_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    MpaNotFoundError,
    UserNotFoundError,
)
from filmorate.core.pydantic_schemas import UserSchema
from filmorate.services.validation import validate_exists
from filmorate.storage.user_storage import InMemoryUserStorage


@pytest.fixture
def storage():
    return InMemoryUserStorage(
        [UserSchema(id=1, email="a@b.cd", login="alice", name="Alice")]
    )


def test_existing_id_passes(storage):
    validate_exists(storage, 1, UserNotFoundError, USER_NOT_FOUND_MESSAGE)


def test_missing_id_raises_given_error(storage):
    with pytest.raises(UserNotFoundError) as exc_info:
        validate_exists(storage, 2, UserNotFoundError, USER_NOT_FOUND_MESSAGE)
    assert exc_info.value.message == USER_NOT_FOUND_MESSAGE
    assert exc_info.value.status_code == 404


def test_error_type_is_parameterized(storage):
    with pytest.raises(MpaNotFoundError):
        validate_exists(storage, 5, MpaNotFoundError, MPA_NOT_FOUND_MESSAGE)


@pytest.mark.parametrize("bad_id", [0, -1, None, "1", True])
def test_invalid_ids_never_exist(storage, bad_id):
    with pytest.raises(UserNotFoundError):
        validate_exists(storage, bad_id, UserNotFoundError, USER_NOT_FOUND_MESSAGE)
