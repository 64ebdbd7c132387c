import psycopg2
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)

def create_database():
    """Create the PostgreSQL database if it doesn't exist."""
    if not settings.DATABASE_URL.startswith("postgresql"):
        logger.info("Non-PostgreSQL database configured, skipping database creation.")
        return
    try:
        # Connect to default 'postgres' database to check/create target DB
        con = psycopg2.connect(
            user=settings.POSTGRES_USER,
            password=settings.POSTGRES_PASSWORD,
            host=settings.POSTGRES_SERVER,
            port=settings.POSTGRES_PORT,
            dbname="postgres"
        )
        con.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
        cur = con.cursor()

        cur.execute(
            "SELECT 1 FROM pg_catalog.pg_database WHERE datname = %s",
            (settings.POSTGRES_DB,),
        )
        exists = cur.fetchone()

        if not exists:
            logger.info("Database %s does not exist. Creating...", settings.POSTGRES_DB)
            cur.execute(f'CREATE DATABASE "{settings.POSTGRES_DB}"')
            logger.info("Database %s created successfully.", settings.POSTGRES_DB)
        else:
            logger.info("Database %s already exists.", settings.POSTGRES_DB)

        cur.close()
        con.close()
    except psycopg2.Error as e:
        # Connection params may point straight at an existing target DB
        logger.error("Error creating database: %s", e)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_database()
