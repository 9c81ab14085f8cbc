import os
from dotenv import load_dotenv
from models import db

load_dotenv()


def _database_uri():
    if os.getenv('DATABASE_URL'):
        return os.getenv('DATABASE_URL')
    if os.getenv('MYSQL_HOST'):
        return "mysql+mysqlconnector://{user}:{password}@{host}/{database}".format(
            user=os.getenv('MYSQL_USER', ''),
            password=os.getenv('MYSQL_PASSWORD', ''),
            host=os.getenv('MYSQL_HOST'),
            database=os.getenv('MYSQL_DATABASE', 'budget_db'),
        )
    return 'sqlite:///finance.db'


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET = os.getenv('JWT_SECRET')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_EXPIRES_IN = int(os.getenv('JWT_EXPIRES_IN', '3600'))

    MYSQL_HOST = os.getenv('MYSQL_HOST')
    MYSQL_USER = os.getenv('MYSQL_USER')
    MYSQL_PASSWORD = os.getenv('MYSQL_PASSWORD')
    MYSQL_DATABASE = os.getenv('MYSQL_DATABASE', 'budget_db')
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    ENFORCE_AVAILABLE_FUNDS = os.getenv('ENFORCE_AVAILABLE_FUNDS', 'true').lower() in ('1', 'true', 'yes')

    @staticmethod
    def init_db(app):
        db.init_app(app)
