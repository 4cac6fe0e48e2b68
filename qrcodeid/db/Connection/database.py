import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from qrcodeid.core.config import settings
from redis.connection import ConnectionPool
import redis
from sqlalchemy import text

logger = logging.getLogger(__name__)

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, future=True, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

pool = ConnectionPool(
    host=settings.REDIS_HOST,
    port=settings.REDIS_PORT,
    decode_responses=True,
    max_connections=50,
    socket_connect_timeout=2,
    socket_keepalive=True,
    retry_on_timeout=True,
)

redis_client = redis.Redis(connection_pool=pool)

def verify_redis_connection():
    if not settings.REDIS_ENABLED:
        logger.info("Redis lookup cache disabled")
        return False
    try:
        redis_client.ping()
        logger.info("Redis connection verified")
        return True
    except redis.exceptions.ConnectionError as e:
        logger.warning(f"Redis connection failed: {e}. Lookups will go straight to the database.")
        return False
    except Exception as e:
        logger.error(f"Unexpected Redis error: {e}")
        return False


def verify_database_connection():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
