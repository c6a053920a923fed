#!/usr/bin/env python3
"""
Basic lrukit Demo
=================

Walks a capacity-2 cache through puts, gets, an eviction, a delete and a
reset, printing each lookup result.
"""

from lrukit import LruCache
from lrukit.utils.logging_config import configure_from_environment


def basic_demo():
    """Exercise every public cache operation."""
    print("🚀 Basic lrukit Demo")
    print("=" * 40)

    cache = LruCache(2, name="demo")

    cache.put(1, 1)
    cache.put(2, 2)
    print(f"get(1) -> {cache.get(1)}")

    # 2 is now least recently used and gets evicted
    cache.put(3, 3)
    print(f"get(2) -> {cache.get(2)}")

    cache.put(4, 4)
    print(f"get(1) -> {cache.get(1)}")
    print(f"get(3) -> {cache.get(3)}")
    print(f"get(4) -> {cache.get(4)}")

    cache.delete(3)
    print(f"get(3) after delete -> {cache.get(3)}")

    cache.reset()
    print(f"get(4) after reset -> {cache.get(4)}")

    print("\n📊 Metrics:")
    for name, value in cache.get_metrics().to_dict().items():
        print(f"  {name}: {value}")


if __name__ == "__main__":
    configure_from_environment()
    basic_demo()
