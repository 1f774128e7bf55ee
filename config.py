import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # read variables from .env


def _mysql_uri():
    user = os.getenv('DB_USER')
    password = os.getenv('DB_PASSWORD')
    host = os.getenv('DB_HOST', 'localhost')
    name = os.getenv('DB_NAME', 'cvforge')
    # PyMySQL driver
    if not password:
        return f"mysql+pymysql://{user}@{host}/{name}"
    return f"mysql+pymysql://{user}:{password}@{host}/{name}"


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv('JWT_ACCESS_TOKEN_HOURS', '3')))

    DB_HOST = os.getenv('DB_HOST')
    DB_USER = os.getenv('DB_USER')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or _mysql_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # create the MySQL schema on startup when missing
    ENSURE_DATABASE = True


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    ENSURE_DATABASE = False
    LOG_LEVEL = 'WARNING'
