from filmorate.core.extensions import db


class Mpa(db.Model):
    __tablename__ = "mpa"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(16), unique=True, nullable=False)


# 初始化数据库时写入的标准分级
DEFAULT_MPA_RATINGS = [
    (1, "G"),
    (2, "PG"),
    (3, "PG-13"),
    (4, "R"),
    (5, "NC-17"),
]
