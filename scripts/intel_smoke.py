import asyncio

from lifeos_categorizer.config import settings
from lifeos_categorizer.intelligence.categorize import classify, matching_keywords
from lifeos_categorizer.intelligence.llm import AIClassifier, build_prompt
from lifeos_categorizer.intelligence.predict import predict_category

SAMPLES = [
    ("Pay off credit card debt", ""),
    ("Book flight for vacation", "need to relax"),
    ("Server is down, critical outage", ""),
    ("urgent: fix my workout schedule", ""),
    ("purple elephant dancing", ""),
]

async def main():
    for title, desc in SAMPLES:
        print(f"{title!r:40} -> {classify(title, desc).value:18} {matching_keywords(title, desc)}")

    print()
    print(build_prompt(*SAMPLES[0]))

    # 2) AI path, only when a key is configured
    ai = AIClassifier.from_settings(settings)
    if ai is None:
        print("\nai: disabled")
        return
    for title, desc in SAMPLES:
        pred = await predict_category(title, desc, ai=ai)
        print(f"{title!r:40} -> {pred.category.value:18} ({pred.method})")
    await ai.close()

if __name__ == "__main__":
    asyncio.run(main())
