# surveydemo/config.py
import os
import re
import ssl
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import URL, make_url

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

# Managed MySQL hosts that only accept TLS connections
SSL_HOST_PATTERN = re.compile(r"(\.rlwy\.net|railway|proxy)", re.IGNORECASE)

# (primary, fallback) variable names; the fallbacks are what Railway's MySQL plugin exports
DB_ENV_NAMES = {
    "host": ("DB_HOST", "MYSQLHOST"),
    "port": ("DB_PORT", "MYSQLPORT"),
    "user": ("DB_USER", "MYSQLUSER"),
    "password": ("DB_PASSWORD", "MYSQLPASSWORD"),
    "database": ("DB_NAME", "MYSQLDATABASE"),
}

DEFAULT_DB_PORT = 3306
SQLITE_FALLBACK_URI = "sqlite:///surveydemo.db"


def _first_set(environ, names):
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def should_use_ssl(host, flag=None):
    """SSL is on when DB_SSL says "true" or the host looks like a managed proxy."""
    if flag and flag.strip().lower() == "true":
        return True
    return bool(host) and SSL_HOST_PATTERN.search(host) is not None


def resolve_database_settings(environ=None):
    """
    Work out how to reach the database from the environment.

    Precedence:
      1. DATABASE_URL, used as-is (mysql:// is pointed at the PyMySQL driver)
      2. DB_* variables, each falling back to its MYSQL* counterpart
      3. no host at all -> local SQLite file for development
    SSL is decided by ``should_use_ssl`` from DB_SSL and the host name.
    """
    environ = os.environ if environ is None else environ

    values = {key: _first_set(environ, names) for key, names in DB_ENV_NAMES.items()}
    host = values["host"]
    ssl_flag = environ.get("DB_SSL")

    url = environ.get("DATABASE_URL")
    if url:
        if url.startswith("mysql://"):
            url = url.replace("mysql://", "mysql+pymysql://", 1)
        # the host in the URL is the one actually dialled
        host = make_url(url).host or host
        return {"uri": url, "ssl": should_use_ssl(host, ssl_flag), "host": host}

    if not host:
        return {"uri": SQLITE_FALLBACK_URI, "ssl": False, "host": None}

    uri = URL.create(
        "mysql+pymysql",
        username=values["user"],
        password=values["password"],
        host=host,
        port=int(values["port"] or DEFAULT_DB_PORT),
        database=values["database"],
    )
    return {"uri": uri.render_as_string(hide_password=False), "ssl": should_use_ssl(host, ssl_flag), "host": host}


def build_connect_args(uri, use_ssl, connect_timeout):
    if not uri.startswith("mysql"):
        return {}
    args = {"connect_timeout": connect_timeout, "charset": "utf8mb4"}
    if use_ssl:
        # same as rejectUnauthorized: false, the proxies present self-signed certs
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        args["ssl"] = ctx
    return args


class Config:
    """Base configuration class"""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PORT = int(os.environ.get("PORT", 3000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*").split(",")
    STATIC_DIR = os.environ.get("STATIC_DIR") or str(BASE_DIR / "web")
    MAX_CONTENT_LENGTH = 1024 * 1024

    # background | inline | off
    BOOTSTRAP_MODE = os.environ.get("BOOTSTRAP_MODE", "background")

    DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE", 4))
    DB_POOL_TIMEOUT = int(os.environ.get("DB_POOL_TIMEOUT", 20))
    DB_CONNECT_TIMEOUT = int(os.environ.get("DB_CONNECT_TIMEOUT", 10))

    def __init__(self, environ=None):
        self._database = resolve_database_settings(environ)

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        return self._database["uri"]

    @property
    def SQLALCHEMY_ENGINE_OPTIONS(self):
        return {
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": 0,
            "pool_timeout": self.DB_POOL_TIMEOUT,
            "pool_pre_ping": True,
            "connect_args": build_connect_args(
                self.SQLALCHEMY_DATABASE_URI, self._database["ssl"], self.DB_CONNECT_TIMEOUT
            ),
        }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    BOOTSTRAP_MODE = "inline"
    LOG_LEVEL = "DEBUG"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        return "sqlite:///surveydemo-test.db"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
