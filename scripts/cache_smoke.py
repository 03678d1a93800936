import asyncio
from lifeos_categorizer.storage.redis_cache import RedisCache

async def main():
    rc = RedisCache("redis://127.0.0.1:6379/0", user_id="default")
    await rc.initialize()
    print("enabled:", rc.enabled)

    await rc.set_prediction("Book flight for vacation", "need to relax", "gpt-4o-mini", "good_living")
    v = await rc.get_prediction("book flight  for vacation", "need to relax", "gpt-4o-mini")
    print("prediction:", v)

    await rc.touch_last_write()
    print("lw:", await rc.last_write_ts())

    await rc.close()

if __name__ == "__main__":
    asyncio.run(main())
