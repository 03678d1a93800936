from __future__ import annotations

import os
import pathlib
import uuid
from typing import Optional

import aiosqlite

PRAGMAS: list[str] = [
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA foreign_keys=ON;",
    "PRAGMA temp_store=MEMORY;",
]

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS goals (
  id TEXT PRIMARY KEY,
  user_id TEXT NOT NULL,
  title TEXT NOT NULL,
  description TEXT,
  goal_type TEXT NOT NULL DEFAULT 'weekly',
  status TEXT NOT NULL DEFAULT 'active',
  priority_level INTEGER NOT NULL DEFAULT 3,
  category TEXT,
  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
  updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_user_cat ON goals(user_id, category);
CREATE INDEX IF NOT EXISTS idx_user_priority ON goals(user_id, priority_level, created_at DESC);
"""

class SQLiteManager:
    """SQLite goal store."""

    def __init__(self, db_path: str) -> None:
        self.db_path = os.path.expanduser(db_path) if db_path != ":memory:" else db_path
        self.conn: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        if self.db_path != ":memory:":
            pathlib.Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = await aiosqlite.connect(self.db_path)
        self.conn.row_factory = aiosqlite.Row

        for p in PRAGMAS:
            await self.conn.execute(p)

        await self.conn.executescript(SCHEMA_SQL)
        await self.conn.commit()

    async def close(self) -> None:
        if self.conn:
            await self.conn.close()
            self.conn = None

    # ---------------- Writes ----------------

    async def insert_goal(
        self,
        *,
        user_id: str,
        title: str,
        description: str | None = None,
        goal_type: str = "weekly",
        status: str = "active",
        priority_level: int = 3,
        category: str | None = None,
        id: str | None = None,
    ) -> dict:
        assert self.conn is not None
        goal_id = id or str(uuid.uuid4())
        await self.conn.execute(
            """
            INSERT INTO goals
              (id, user_id, title, description, goal_type, status, priority_level, category)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (goal_id, user_id, title, description, goal_type, status, priority_level, category),
        )
        await self.conn.commit()
        row = await self.fetch_goal(goal_id)
        assert row is not None
        return row

    async def update_goal_category(self, id: str, category: str) -> int:
        assert self.conn is not None
        cur = await self.conn.execute(
            """
            UPDATE goals
            SET category = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (category, id),
        )
        await self.conn.commit()
        return cur.rowcount

    # ---------------- Reads ----------------

    async def fetch_goal(self, id: str) -> Optional[dict]:
        assert self.conn is not None
        cur = await self.conn.execute("SELECT * FROM goals WHERE id = ?", (id,))
        row = await cur.fetchone()
        return dict(row) if row else None

    async def fetch_goals_for_user(self, user_id: str) -> list[dict]:
        assert self.conn is not None
        cur = await self.conn.execute(
            """
            SELECT * FROM goals
            WHERE user_id = ?
            ORDER BY priority_level ASC, created_at DESC, rowid DESC
            """,
            (user_id,),
        )
        return [dict(r) for r in await cur.fetchall()]

    async def count_goals(self, user_id: str | None = None) -> int:
        assert self.conn is not None
        if user_id is None:
            cur = await self.conn.execute("SELECT COUNT(*) AS c FROM goals")
        else:
            cur = await self.conn.execute("SELECT COUNT(*) AS c FROM goals WHERE user_id = ?", (user_id,))
        return int((await cur.fetchone())["c"])
