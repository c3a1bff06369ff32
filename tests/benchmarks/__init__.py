"""Masking throughput benchmarks (pytest-benchmark).

Compares direct facade calls with sequential and thread-pooled engine
batches over the same 10,000 customers::

    pytest tests/benchmarks/ --benchmark-sort=median
    pytest tests/benchmarks/ --benchmark-disable   # correctness only
"""
