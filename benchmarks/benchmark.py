import random

from pyinstrument import Profiler
from flatmap import FlatMap


def fill_tail(n):
    m = FlatMap()
    for k in range(n):
        m.insert(k, k)
    return m


def fill_front(n):
    m = FlatMap()
    for k in range(n, 0, -1):
        m.insert(k, k)
    return m


def fill_random(n, seed=0):
    rng = random.Random(seed)
    keys = list(range(n))
    rng.shuffle(keys)
    m = FlatMap()
    for k in keys:
        m.insert(k, k)
    return m


def drain_tail(m):
    while m:
        m.remove(next(reversed(m)))


def drain_front(m):
    while m:
        m.remove(next(iter(m)))


def benchmark_large(n=50_000):
    profiler = Profiler()
    profiler.start()

    print(f"Filling {n} keys at the tail / front / random positions...")
    fill_tail(n)
    fill_front(n)
    fill_random(n)
    print("Draining from the tail / front...")
    drain_tail(fill_tail(n))
    drain_front(fill_tail(n))
    print("Done.")

    profiler.stop()
    profiler.print()

    with open("flatmap_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
