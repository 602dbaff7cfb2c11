"""
好友服务层测试

用户存储使用内存实现，好友存储使用 Mock，只验证校验顺序和委托行为
"""

from unittest.mock import MagicMock

import pytest

from filmorate.core.exceptions import USER_NOT_FOUND_MESSAGE, UserNotFoundError
from filmorate.core.pydantic_schemas import UserSchema
from filmorate.services.friend_service import FriendService
from filmorate.storage.user_storage import InMemoryUserStorage


def _user(user_id):
    return UserSchema(
        id=user_id, email=f"u{user_id}@mail.ru", login=f"u{user_id}", name=f"U{user_id}"
    )


@pytest.fixture
def user_storage():
    return InMemoryUserStorage([_user(1), _user(2), _user(3)])


@pytest.fixture
def friend_storage():
    return MagicMock()


@pytest.fixture
def service(user_storage, friend_storage):
    return FriendService(user_storage, friend_storage)


def test_add_friend_delegates_after_validation(service, friend_storage):
    friend_storage.add_friend.return_value = [_user(1), _user(2)]
    result = service.add_friend(1, 2)
    friend_storage.add_friend.assert_called_once_with(1, 2)
    assert [u.id for u in result] == [1, 2]


def test_delete_friend_delegates_after_validation(service, friend_storage):
    service.delete_friend(1, 2)
    friend_storage.delete_friend.assert_called_once_with(1, 2)


def test_find_all_delegates(service, friend_storage):
    friend_storage.get_all_friends.return_value = [_user(2)]
    assert service.find_all(1) == [_user(2)]
    friend_storage.get_all_friends.assert_called_once_with(1)


def test_common_friends_delegates(service, friend_storage):
    friend_storage.get_common_friends.return_value = [_user(3)]
    assert service.get_common_friends(1, 2) == [_user(3)]
    friend_storage.get_common_friends.assert_called_once_with(1, 2)


@pytest.mark.parametrize(
    "operation, args",
    [
        ("add_friend", (99, 1)),
        ("add_friend", (1, 99)),
        ("delete_friend", (99, 1)),
        ("delete_friend", (1, 99)),
        ("find_all", (99,)),
        ("get_common_friends", (99, 1)),
        ("get_common_friends", (1, 99)),
    ],
)
def test_missing_user_short_circuits(service, friend_storage, operation, args):
    with pytest.raises(UserNotFoundError) as exc_info:
        getattr(service, operation)(*args)
    assert exc_info.value.message == USER_NOT_FOUND_MESSAGE
    # 校验失败时存储层一次都不会被调用
    assert friend_storage.method_calls == []


def test_owner_is_validated_before_target(user_storage, friend_storage):
    checked = []
    original_exists = user_storage.exists

    def recording_exists(user_id):
        checked.append(user_id)
        return original_exists(user_id)

    user_storage.exists = recording_exists
    service = FriendService(user_storage, friend_storage)

    with pytest.raises(UserNotFoundError):
        service.add_friend(98, 99)
    # 两个 id 都不存在时，只报告先检查的发起方
    assert checked == [98]

    checked.clear()
    service.get_common_friends(2, 3)
    assert checked == [2, 3]


def test_self_friendship_is_allowed(service, friend_storage):
    service.add_friend(1, 1)
    friend_storage.add_friend.assert_called_once_with(1, 1)
