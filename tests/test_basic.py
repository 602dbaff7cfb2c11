"""
基本功能测试
验证应用是否能正常启动和基本功能
"""

from filmorate import create_app, init_db
from filmorate.blueprints.mpa.models import Mpa
from filmorate.core.extensions import db
from filmorate.services import FilmorateServices, get_services


def test_app_creation():
    """测试应用创建"""
    app = create_app("testing")
    assert app is not None
    assert app.config["TESTING"] is True


def test_database_creation():
    """测试数据库创建"""
    app = create_app("testing")
    with app.app_context():
        init_db()

        inspector = db.inspect(db.engine)
        tables = inspector.get_table_names()
        assert {"users", "friendships", "mpa"} <= set(tables)

        db.drop_all()


def test_init_db_is_idempotent():
    """重复初始化不会重复写入评级"""
    app = create_app("testing")
    with app.app_context():
        init_db()
        init_db()
        assert db.session.query(Mpa).count() == 5
        db.session.remove()
        db.drop_all()


def test_init_db_command():
    app = create_app("testing")
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0
    with app.app_context():
        assert db.session.query(Mpa).count() == 5
        db.session.remove()
        db.drop_all()


def test_services_are_wired_per_app():
    first = create_app("testing")
    second = create_app("testing")
    with first.app_context():
        services = get_services()
        assert isinstance(services, FilmorateServices)
        assert (
            services.friend_service.user_storage
            is services.user_service.user_storage
        )
    with second.app_context():
        assert get_services() is not services


def test_root_endpoint():
    app = create_app("testing")
    resp = app.test_client().get("/")
    assert resp.status_code == 200
