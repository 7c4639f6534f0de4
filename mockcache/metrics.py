from prometheus_client import Counter, generate_latest

CACHE_HITS = Counter("mockcache_hits_total", "Reads that found a live entry")
CACHE_MISSES = Counter("mockcache_misses_total", "Reads that found no live entry")
CACHE_WRITES = Counter("mockcache_writes_total", "Entries written")
CACHE_DELETES = Counter("mockcache_deletes_total", "Entries removed by delete")
CLOCK_ADVANCED = Counter(
    "mockcache_clock_advanced_seconds_total", "Virtual seconds the clock was moved forward"
)


def render_metrics() -> bytes:
    return generate_latest()
