# src/config.py
import logging
import os

from dotenv import load_dotenv

# .env 파일의 환경 변수를 불러옵니다.
load_dotenv()

# 데이터베이스 연결 문자열 (기본값은 로컬 SQLite 파일)
SQLALCHEMY_DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///tracker_metadata.db")

# "1"이면 SQLAlchemy가 실행하는 SQL을 출력합니다.
SQL_ECHO: bool = os.environ.get("SQL_ECHO") == "1"

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# db_init.py가 최초 실행 시 생성하는 기본 데이터
SEED_ADMIN_USERNAME: str = os.environ.get("SEED_ADMIN_USERNAME", "admin")
SEED_ADMIN_PASSWORD: str = os.environ.get("SEED_ADMIN_PASSWORD", "admin")
SEED_PROJECT_KEY: str = os.environ.get("SEED_PROJECT_KEY", "DEMO")
SEED_PROJECT_NAME: str = os.environ.get("SEED_PROJECT_NAME", "Demo Project")


def configure_logging(level: str = LOG_LEVEL):
    """루트 로거를 설정합니다. 스크립트 진입점에서 한 번만 호출합니다."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
