from . import users_bp
from flask import jsonify
from flask import request
from filmorate.services import get_services


def _dump(records):
    return [record.model_dump(mode="json") for record in records]


@users_bp.route("/users", methods=["POST"])
def create_user():
    """
    创建用户
    ---
    description: |
      name 为空时使用 login 作为名字。
    tags:
      - Users
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - email
            - login
          properties:
            email:
              type: string
              example: mail@example.com
            login:
              type: string
              example: dolore
            name:
              type: string
              example: Nick Name
            birthday:
              type: string
              format: date
              example: "1946-08-20"
    responses:
      200:
        description: 创建成功，返回用户
      400:
        description: 参数错误（邮箱格式、登录名含空格、生日在未来、登录名重复）
    """
    user = get_services().user_service.create(request.get_json(silent=True) or {})
    return jsonify(user.model_dump(mode="json")), 200


@users_bp.route("/users", methods=["PUT"])
def update_user():
    """
    更新用户
    ---
    tags:
      - Users
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - id
            - email
            - login
          properties:
            id:
              type: integer
              example: 1
            email:
              type: string
            login:
              type: string
            name:
              type: string
            birthday:
              type: string
              format: date
    responses:
      200:
        description: 更新成功，返回用户
      400:
        description: 参数错误
      404:
        description: 用户不存在
    """
    user = get_services().user_service.update(request.get_json(silent=True) or {})
    return jsonify(user.model_dump(mode="json")), 200


@users_bp.route("/users", methods=["GET"])
def list_users():
    """
    获取用户列表
    ---
    tags:
      - Users
    responses:
      200:
        description: 按 id 升序的用户列表
    """
    return jsonify(_dump(get_services().user_service.find_all())), 200


@users_bp.route("/users/<int:user_id>", methods=["GET"])
def get_user(user_id):
    """
    获取用户详情
    ---
    tags:
      - Users
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
        description: 用户ID
        example: 1
    responses:
      200:
        description: 用户详情
      404:
        description: 用户不存在
    """
    user = get_services().user_service.get(user_id)
    return jsonify(user.model_dump(mode="json")), 200


@users_bp.route("/users/<int:user_id>", methods=["DELETE"])
def delete_user(user_id):
    """
    删除用户，同时删除与该用户相关的全部好友关系
    ---
    tags:
      - Users
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
        description: 用户ID
    responses:
      200:
        description: 删除成功，返回被删除的用户
      404:
        description: 用户不存在
    """
    user = get_services().user_service.delete(user_id)
    return jsonify(user.model_dump(mode="json")), 200


@users_bp.route("/users/<int:user_id>/friends/<int:friend_id>", methods=["PUT"])
def add_friend(user_id, friend_id):
    """
    添加好友（单向）
    ---
    description: |
      user_id 把 friend_id 加为好友，不会自动建立反向关系。重复添加视为成功。
    tags:
      - Friends
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
        description: 发起方用户ID
        example: 1
      - in: path
        name: friend_id
        type: integer
        required: true
        description: 要添加的好友ID
        example: 2
    responses:
      200:
        description: 添加成功，返回 [发起方, 好友] 两个用户
      404:
        description: 用户不存在
    """
    users = get_services().friend_service.add_friend(user_id, friend_id)
    return jsonify(_dump(users)), 200


@users_bp.route("/users/<int:user_id>/friends/<int:friend_id>", methods=["DELETE"])
def remove_friend(user_id, friend_id):
    """
    删除好友
    ---
    description: |
      好友关系不存在时同样返回成功。
    tags:
      - Friends
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
        description: 发起方用户ID
      - in: path
        name: friend_id
        type: integer
        required: true
        description: 要删除的好友ID
    responses:
      200:
        description: 删除成功，返回 [发起方, 好友] 两个用户
      404:
        description: 用户不存在
    """
    users = get_services().friend_service.delete_friend(user_id, friend_id)
    return jsonify(_dump(users)), 200


@users_bp.route("/users/<int:user_id>/friends", methods=["GET"])
def list_friends(user_id):
    """
    获取好友列表
    ---
    tags:
      - Friends
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
        description: 用户ID
    responses:
      200:
        description: 按 id 升序的好友列表
        schema:
          type: array
          items:
            type: object
            properties:
              id:
                type: integer
              email:
                type: string
              login:
                type: string
              name:
                type: string
              birthday:
                type: string
      404:
        description: 用户不存在
    """
    friends = get_services().friend_service.find_all(user_id)
    return jsonify(_dump(friends)), 200


@users_bp.route("/users/<int:user_id>/friends/common/<int:other_id>", methods=["GET"])
def list_common_friends(user_id, other_id):
    """
    获取两个用户的共同好友
    ---
    tags:
      - Friends
    parameters:
      - in: path
        name: user_id
        type: integer
        required: true
      - in: path
        name: other_id
        type: integer
        required: true
    responses:
      200:
        description: 共同好友列表
      404:
        description: 用户不存在
    """
    friends = get_services().friend_service.get_common_friends(user_id, other_id)
    return jsonify(_dump(friends)), 200
