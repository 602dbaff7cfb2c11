"""
Flask 扩展实例统一管理：
- db: SQLAlchemy
- migrate: Flask-Migrate
"""

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
