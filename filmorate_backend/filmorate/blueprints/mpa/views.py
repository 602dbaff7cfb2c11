from . import mpa_bp
from flask import jsonify
from filmorate.services import get_services


@mpa_bp.route("/mpa", methods=["GET"])
def list_mpa():
    """
    获取全部评级
    ---
    tags:
      - MPA
    responses:
      200:
        description: 按 id 升序的评级列表
        schema:
          type: array
          items:
            type: object
            properties:
              id:
                type: integer
              name:
                type: string
    """
    ratings = get_services().mpa_service.find_all()
    return jsonify([mpa.model_dump() for mpa in ratings]), 200


@mpa_bp.route("/mpa/<int:mpa_id>", methods=["GET"])
def get_mpa(mpa_id):
    """
    获取评级详情
    ---
    tags:
      - MPA
    parameters:
      - in: path
        name: mpa_id
        type: integer
        required: true
        description: 评级ID
        example: 1
    responses:
      200:
        description: 评级详情
      404:
        description: 评级不存在
    """
    mpa = get_services().mpa_service.get(mpa_id)
    return jsonify(mpa.model_dump()), 200
