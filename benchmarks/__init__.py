"""
Benchmark suite for jspan lookup performance.

Compares fetching one value from a document with jspan against decoding
the whole document with:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures lookup speed and peak memory across different document shapes.
"""
