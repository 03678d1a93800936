import asyncio

from lifeos_categorizer.storage.sqlite_manager import SQLiteManager
from lifeos_categorizer.tools.categorize_goals import categorize_goals_tool

DB = "~/.lifeos/smoke.db"

async def main():
    db = SQLiteManager(DB)
    await db.initialize()

    # insert, deliberately miscategorized
    g = await db.insert_goal(
        user_id="smoke",
        title="Book flight for vacation",
        description="need to relax",
        category="job",
    )
    print("inserted", g["id"], g["category"])

    # fetch one
    one = await db.fetch_goal(g["id"])
    print("fetch_one:", one["category"], one["title"][:24])

    # sweep
    res = await categorize_goals_tool(db=db, user_id="smoke")
    print(res["message"])
    for r in res["results"]:
        print(" ", r["title"][:24], r["old_category"], "->", r["new_category"])

    print("count:", await db.count_goals("smoke"))
    await db.close()

if __name__ == "__main__":
    asyncio.run(main())
