import sqlite3
import logging
import os
import re
from typing import Optional, List, Dict
from contextlib import contextmanager

from psycopg2 import pool
from psycopg2.extras import RealDictCursor

logger = logging.getLogger(__name__)

PING_CONFIG_COLUMNS = (
    "id, guild_id, name, description, required_role_id, target_role_id, created_at, updated_at"
)


class CursorWrapper:
    """Wrapper for PostgreSQL cursor that automatically adapts ? to %s"""
    def __init__(self, cursor, database):
        self.cursor = cursor
        self.database = database

    def execute(self, sql, params=()):
        """Execute with automatic parameter adaptation"""
        # Ensure params is a tuple
        if params is None:
            params = ()
        elif not isinstance(params, (tuple, list)):
            params = (params,)

        adapted_sql, adapted_params = self.database._adapt_params(sql, tuple(params))

        logger.debug(f"SQL: {adapted_sql[:100]}...")
        logger.debug(f"Params: {adapted_params}")

        return self.cursor.execute(adapted_sql, adapted_params)

    def fetchone(self):
        return self.cursor.fetchone()

    def fetchall(self):
        return self.cursor.fetchall()

    @property
    def rowcount(self):
        return self.cursor.rowcount

    def __getattr__(self, name):
        """Delegate all other attributes to the wrapped cursor"""
        return getattr(self.cursor, name)


class Database:
    def __init__(self, db_path: str = "bot_data.db"):
        """Initialize database connection"""
        # DATABASE_URL selects PostgreSQL, otherwise a local SQLite file
        self.database_url = os.getenv('DATABASE_URL')

        if self.database_url:
            self.db_type = 'postgresql'
            self.db_path = None
            self._init_postgres_pool()
            logger.info("🐘 Using PostgreSQL database")
        else:
            self.db_type = 'sqlite'
            self.db_path = db_path
            self.connection_pool = None
            logger.info(f"📁 Using SQLite database: {db_path}")

        self.init_database()

    def _init_postgres_pool(self):
        """Initialize PostgreSQL connection pool"""
        try:
            self.connection_pool = pool.SimpleConnectionPool(
                1,  # minconn
                10,  # maxconn
                self.database_url
            )
            logger.info("✅ PostgreSQL connection pool created")
        except Exception as e:
            logger.error(f"Error creating PostgreSQL connection pool: {e}")
            raise

    @contextmanager
    def get_connection(self):
        """Get a database connection with automatic commit/rollback and cleanup"""
        if self.db_type == 'postgresql':
            conn = self.connection_pool.getconn()
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                self.connection_pool.putconn(conn)
        else:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                conn.close()

    def _get_cursor(self, conn):
        """Get a cursor with appropriate row factory for the database type"""
        if self.db_type == 'postgresql':
            cursor = conn.cursor(cursor_factory=RealDictCursor)
            return CursorWrapper(cursor, self)
        return conn.cursor()

    def _adapt_params(self, sql: str, params: tuple) -> tuple:
        """Convert ? placeholders to psycopg2's %s"""
        if self.db_type == 'postgresql':
            return re.sub(r'\?', '%s', sql), params
        return sql, params

    def init_database(self):
        """Initialize database and create tables"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                self.create_tables_with_cursor(cursor)
            db_info = self.database_url.split('@')[-1] if self.database_url else self.db_path
            logger.info(f"✅ Database initialized: {db_info}")
        except Exception as e:
            logger.error(f"Error initializing database: {e}")
            raise

    def create_tables_with_cursor(self, cursor):
        """Create all necessary tables"""
        # Auto-increment syntax differs between SQLite and PostgreSQL
        id_column = 'SERIAL PRIMARY KEY' if self.db_type == 'postgresql' else 'INTEGER PRIMARY KEY AUTOINCREMENT'

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS guilds (
                id BIGINT PRIMARY KEY,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS ping_configs (
                id {id_column},
                guild_id BIGINT NOT NULL REFERENCES guilds(id) ON DELETE CASCADE,
                name TEXT NOT NULL,
                description TEXT,
                required_role_id BIGINT,
                target_role_id BIGINT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE(guild_id, name)
            )
        """)

        logger.info("✅ Database tables created")

    # ==================== GUILD OPERATIONS ====================

    def ensure_guild_exists(self, guild_id: int) -> bool:
        """Insert the guild row if it is missing"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                cursor.execute("""
                    INSERT INTO guilds (id) VALUES (?)
                    ON CONFLICT(id) DO NOTHING
                """, (guild_id,))
            return True
        except Exception as e:
            logger.error(f"Error ensuring guild {guild_id} exists: {e}")
            return False

    # ==================== PING CONFIG OPERATIONS ====================

    def get_ping_config(self, guild_id: int, name: str) -> Optional[Dict]:
        """Get a single ping configuration by name"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                cursor.execute(f"""
                    SELECT {PING_CONFIG_COLUMNS} FROM ping_configs
                    WHERE guild_id = ? AND name = ?
                """, (guild_id, name))
                row = cursor.fetchone()
            return dict(row) if row else None
        except Exception as e:
            logger.error(f"Error getting ping config '{name}': {e}")
            return None

    def get_ping_configs(self, guild_id: int) -> List[Dict]:
        """Get every ping configuration for a guild, ordered by name"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                cursor.execute(f"""
                    SELECT {PING_CONFIG_COLUMNS} FROM ping_configs
                    WHERE guild_id = ? ORDER BY name
                """, (guild_id,))
                rows = cursor.fetchall()
            return [dict(row) for row in rows]
        except Exception as e:
            logger.error(f"Error getting ping configs: {e}")
            return []

    def add_ping_config(self, guild_id: int, name: str, description: Optional[str],
                        required_role_id: Optional[int], target_role_id: int) -> bool:
        """Create a ping configuration. Returns False on failure (including duplicates)"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                cursor.execute("""
                    INSERT INTO ping_configs (guild_id, name, description, required_role_id, target_role_id)
                    VALUES (?, ?, ?, ?, ?)
                """, (guild_id, name, description, required_role_id, target_role_id))
            return True
        except Exception as e:
            logger.error(f"Error adding ping config '{name}': {e}")
            return False

    def remove_ping_config(self, guild_id: int, name: str) -> bool:
        """Delete a ping configuration. Returns True if a row was removed"""
        try:
            with self.get_connection() as conn:
                cursor = self._get_cursor(conn)
                cursor.execute("""
                    DELETE FROM ping_configs WHERE guild_id = ? AND name = ?
                """, (guild_id, name))
                removed = cursor.rowcount > 0
            return removed
        except Exception as e:
            logger.error(f"Error removing ping config '{name}': {e}")
            return False

    def close(self):
        """Close all pooled connections"""
        if self.connection_pool:
            self.connection_pool.closeall()
            logger.info("✅ PostgreSQL connection pool closed")
