#!/usr/bin/env python3
"""
Signing Benchmark
=================

Benchmark the overhead of signing and verifying cookie values.

ValueSigner uses HMAC-SHA256 over the plaintext. Signing happens on every
SignedJar.add(), verification on every SignedJar.get().

Measures:
  - Raw sign / verify micro-cost for growing value sizes
  - Rejection cost per failure kind (they should be in the same ballpark)
  - End-to-end add/get through a signed jar vs the bare jar
"""

import logging
import statistics
import time

from signedjar import Cookie, CookieJar, Key, ValueSigner

# Suppress rejection warnings during benchmarks
logging.getLogger("signedjar").setLevel(logging.ERROR)


# ── Helpers ──────────────────────────────────────────────────────────────────


def time_op(func, iterations: int = 100) -> float:
    """Return average ms per call."""
    for _ in range(min(5, iterations)):
        func()
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    return ((time.perf_counter() - start) / iterations) * 1000


# ── Benchmarks ───────────────────────────────────────────────────────────────


def benchmark_raw_sign_verify():
    """Micro-benchmark of sign and verify alone."""
    print("\n🔐 Raw sign / verify Micro-Benchmark")
    print("-" * 60)

    signer = ValueSigner(Key.generate())

    print(f"  {'Value bytes':>12} {'Sign μs':>10} {'Verify μs':>10}")
    print("  " + "-" * 34)

    for size in [16, 256, 4096]:
        value = "v" * size
        framed = signer.sign(value)

        sign_t = time_op(lambda: signer.sign(value), iterations=5000)
        verify_t = time_op(lambda: signer.verify(framed), iterations=5000)

        print(f"  {size:>12} {sign_t * 1000:10.2f} {verify_t * 1000:10.2f}")


def benchmark_rejection_kinds():
    """Cost of each rejection path for a 256-byte value."""
    print("\n🚫 Rejection Cost by Kind")
    print("-" * 60)

    signer = ValueSigner(Key.generate())
    framed = signer.sign("v" * 256)

    cases = {
        "malformed framing": "too short",
        "bad digest encoding": "!" * 44 + "v" * 256,
        "tag mismatch": framed[:-1] + "X",
    }

    for label, value in cases.items():
        t = time_op(lambda: signer.verify(value), iterations=5000)
        print(f"  {label:22} {t * 1000:8.2f} μs")


def benchmark_jar_signed_vs_plain():
    """End-to-end add/get with and without the signed view."""
    print("\n⚡ Add/Get: Signed Jar vs Plain Jar")
    print("-" * 60)

    key = Key.generate()
    count = 1000

    print(f"    {'Mode':20} {'Add μs':>8} {'Get μs':>8}")
    print("    " + "-" * 38)

    for signing in [False, True]:
        jar = CookieJar()
        store = jar.signed(key) if signing else jar

        add_times = []
        for i in range(count):
            cookie = Cookie(f"cookie_{i}", f"session=user_{i}")
            start = time.perf_counter()
            store.add(cookie)
            add_times.append((time.perf_counter() - start) * 1_000_000)

        get_times = []
        for i in range(0, count, 10):
            start = time.perf_counter()
            store.get(f"cookie_{i}")
            get_times.append((time.perf_counter() - start) * 1_000_000)

        label = f"signing={'ON' if signing else 'OFF'}"
        print(
            f"    {label:20} {statistics.mean(add_times):8.2f} "
            f"{statistics.mean(get_times):8.2f}"
        )


def main():
    print("🔐 Signing Benchmark")
    print("=" * 60)
    print("Benchmarking cookie value signing/verification overhead")
    print()

    try:
        benchmark_raw_sign_verify()
        benchmark_rejection_kinds()
        benchmark_jar_signed_vs_plain()

        print()
        print("🎯 Interpretation Guide")
        print("=" * 60)
        print("• HMAC-SHA256 is fast (~1-5 μs per sign for small values)")
        print("• Cost grows linearly with value size")
        print("• Jar lookup by name is linear in jar size; get times include it")
        print()
        print("✅ Benchmark complete!")

    except KeyboardInterrupt:
        print("\n⚠️  Benchmark interrupted by user")


if __name__ == "__main__":
    main()
