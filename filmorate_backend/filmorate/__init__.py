import logging

import click
from flask import Flask, jsonify
from flask.cli import with_appcontext
from flasgger import Swagger
from sqlalchemy import event
from dotenv import load_dotenv

from filmorate.config import (
    DevelopmentConfig,
    TestingConfig,
    ProductionConfig,
)
from filmorate.core.extensions import db, migrate
from filmorate.core.exceptions import register_error_handlers

# 导入所有模型以确保它们被注册到SQLAlchemy元数据中
from filmorate.blueprints.users.models import User, Friendship
from filmorate.blueprints.mpa.models import Mpa

# 注册蓝图
from filmorate.blueprints.users import users_bp
from filmorate.blueprints.mpa import mpa_bp

from filmorate.services import EXTENSION_KEY, FilmorateServices
from filmorate.services.friend_service import FriendService
from filmorate.services.mpa_service import MpaService
from filmorate.services.user_service import UserService
from filmorate.storage.friend_storage import FriendDbStorage
from filmorate.storage.mpa_storage import MpaDbStorage, seed_mpa_ratings
from filmorate.storage.user_storage import UserDbStorage

# 加载.env文件
load_dotenv()

logger = logging.getLogger(__name__)

swagger_template = {
    "swagger": "2.0",
    "info": {
        "title": "Filmorate API",
        "description": "Filmorate 用户、好友关系与评级目录接口文档。",
        "version": "1.0.0",
    },
    "schemes": ["http", "https"],
}

swagger_config = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/apispec.json",
            "rule_filter": lambda rule: True,  # 所有路由
            "model_filter": lambda tag: True,  # 所有模型
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",  # 仅开发环境下生效
}


def create_app(config_name="development"):
    """应用工厂函数"""
    app = Flask(__name__)

    # 根据配置名称选择配置类
    if config_name == "testing":
        config_class = TestingConfig
    elif config_name == "production":
        config_class = ProductionConfig
    else:
        config_class = DevelopmentConfig

    app.config.from_object(config_class)
    setup_logging(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            _enable_sqlite_foreign_keys(db.engine)

    # 注册蓝图
    app.register_blueprint(users_bp)
    app.register_blueprint(mpa_bp)
    register_error_handlers(app)

    # 按依赖顺序显式构造存储和服务
    user_storage = UserDbStorage(db.session)
    friend_storage = FriendDbStorage(db.session, user_storage)
    mpa_storage = MpaDbStorage(db.session)
    app.extensions[EXTENSION_KEY] = FilmorateServices(
        user_service=UserService(user_storage),
        friend_service=FriendService(user_storage, friend_storage),
        mpa_service=MpaService(mpa_storage),
    )

    app.cli.add_command(init_db_command)

    # 仅开发/测试环境下启用默认Swagger UI
    if config_name in ("development", "testing"):
        Swagger(app, template=swagger_template, config=swagger_config)
    else:
        Swagger(
            app, template=swagger_template, config={"swagger_ui": False, "specs": []}
        )

    # 基础路由，用于检查服务是否运行
    @app.route("/")
    def root():
        return jsonify({"message": "Filmorate is running"})

    logger.debug(f"应用创建完成, 配置: {config_class.__name__}")
    return app


def setup_logging(level="INFO"):
    """设置日志配置"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("filmorate").setLevel(level)


def init_db():
    """建表并写入评级数据，可重复执行；需要在应用上下文中调用"""
    db.create_all()
    seed_mpa_ratings(db.session)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """初始化数据库表和评级数据"""
    init_db()
    click.echo("数据库初始化完成")


def _enable_sqlite_foreign_keys(engine):
    # SQLite 默认不检查外键，删除用户时需要级联删除好友关系
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, _):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
