"""
Benchmark suite for jparse JSON parsing performance.

Compares jparse against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different data types.
"""
