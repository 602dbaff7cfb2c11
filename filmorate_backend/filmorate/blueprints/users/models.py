from filmorate.models.base import BaseModel
from filmorate.core.extensions import db


class User(BaseModel):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False)
    login = db.Column(db.String(64), unique=True, nullable=False)
    name = db.Column(db.String(128), nullable=False)
    birthday = db.Column(db.Date, nullable=True)


class Friendship(BaseModel):
    """有向好友关系：user_id 把 friend_id 加为好友，不代表反向关系存在"""

    __tablename__ = "friendships"
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    friend_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    __table_args__ = (db.Index("ix_friendships_friend_id", "friend_id"),)
