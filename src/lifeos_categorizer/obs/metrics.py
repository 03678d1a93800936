from __future__ import annotations
import asyncio
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Dict

@dataclass
class _TimerAgg:
    sum_ms: float = 0.0
    count: int = 0

@dataclass
class _Counter:
    value: int = 0

class Metrics:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._timers: Dict[str, _TimerAgg] = {}
        self._counters: Dict[str, _Counter] = {}

    async def observe_ms(self, name: str, ms: float) -> None:
        async with self._lock:
            agg = self._timers.setdefault(name, _TimerAgg())
            agg.sum_ms += float(ms)
            agg.count += 1

    async def inc(self, name: str, n: int = 1) -> None:
        async with self._lock:
            c = self._counters.setdefault(name, _Counter())
            c.value += int(n)

    @asynccontextmanager
    async def timed(self, name: str, counter: str | None = None) -> AsyncIterator[None]:
        """Records wall time under `name`, bumps `counter` unless the block raised."""
        t0 = time.perf_counter()
        yield
        await self.observe_ms(name, (time.perf_counter() - t0) * 1000.0)
        if counter:
            await self.inc(counter)

    async def counter(self, name: str) -> int:
        async with self._lock:
            c = self._counters.get(name)
            return c.value if c else 0

    async def export_prom(self) -> str:
        lines: list[str] = []
        async with self._lock:
            for k, v in sorted(self._counters.items()):
                lines.append(f'# TYPE {k} counter')
                lines.append(f'{k} {v.value}')
            for k, v in sorted(self._timers.items()):
                lines.append(f'# TYPE {k}_ms summary')
                lines.append(f'{k}_ms_sum {v.sum_ms:.3f}')
                lines.append(f'{k}_ms_count {v.count}')
        return "\n".join(lines) + "\n"

METRICS = Metrics()
