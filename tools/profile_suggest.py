# tools/profile_suggest.py
"""
Small profiling harness for Checker.suggest.
Usage:
  python tools/profile_suggest.py -d words.txt -c corpus.txt --warm 20 --iters 500
  python tools/profile_suggest.py -d words.txt -c corpus.txt --verify

Prints mean/median/p90 latency and nodes visited per query. With --verify,
every returned suggestion is checked against a plain Levenshtein distance.
"""
import argparse
import json
import random
import statistics
import time
from pathlib import Path

from spell_suggester.core.checker import MAX_EDIT_DISTANCE, Checker
from spell_suggester.core.distance import levenshtein_with_cutoff
from spell_suggester.core.text_utils import LETTERS, sanitize
from spell_suggester.utils.logger_utils import Log

log = Log(path="logs/profile.log")


def mutate(word, rng, edits=1):
    """Apply `edits` random single-letter typos to `word`."""
    for _ in range(edits):
        op = rng.choice(("insert", "delete", "substitute"))
        i = rng.randrange(len(word) + 1)
        if op == "insert" or not word:
            word = word[:i] + rng.choice(LETTERS) + word[i:]
        elif op == "delete":
            i = min(i, len(word) - 1)
            word = word[:i] + word[i + 1:]
        else:
            i = min(i, len(word) - 1)
            word = word[:i] + rng.choice(LETTERS) + word[i + 1:]
    return word


def make_queries(checker, count, rng):
    words = [w for w, _ in checker.words()]
    if not words:
        return []
    return [mutate(rng.choice(words), rng, rng.randint(0, 2)) for _ in range(count)]


def benchmark(checker, queries):
    """Return (latencies_ms, nodes_visited_per_query)."""
    times, visits = [], []
    for q in queries:
        before = checker.nodes_visited
        t0 = time.perf_counter()
        checker.suggest(q)
        times.append((time.perf_counter() - t0) * 1000.0)
        visits.append(checker.nodes_visited - before)
    return times, visits


def verify(checker, queries):
    """Count suggestions whose reported distance disagrees with Levenshtein."""
    bad = 0
    for q in queries:
        target = sanitize(q)
        for s in checker.suggest(q):
            d = levenshtein_with_cutoff(target, s.string)
            if d != s.edit_distance or d > MAX_EDIT_DISTANCE:
                log.error(f"{q!r}: {s} but distance is {d}")
                bad += 1
    return bad


def summarize(times, visits):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": max(times_sorted),
        "mean_nodes_visited": statistics.mean(visits),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-d", "--dictionary", required=True, help="word list file")
    parser.add_argument("-c", "--corpus", required=True, help="corpus file")
    parser.add_argument("--warm", type=int, default=20, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verify", action="store_true", help="check distances")
    parser.add_argument("--out", default="tools/last_profile.json")
    args = parser.parse_args()

    with log.time_block("load dictionary"):
        checker = Checker.from_files(args.dictionary, args.corpus)
    log.info(f"dictionary stats: {checker.stats()}")

    rng = random.Random(args.seed)
    print("Warming up...")
    benchmark(checker, make_queries(checker, args.warm, rng))

    print("Measuring...")
    queries = make_queries(checker, args.iters, rng)
    if not queries:
        print("Dictionary is empty, nothing to profile.")
        return
    times, visits = benchmark(checker, queries)
    s = summarize(times, visits)
    print("Profiling summary:", s)
    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.out).write_text(json.dumps(s, indent=2))
    print(f"Saved profile summary to {args.out}")

    if args.verify:
        bad = verify(checker, queries)
        print(f"verify: {bad} bad suggestions over {len(queries)} queries")

    sample = queries[0]
    print(f"Sample suggest output for {sample!r}:", [str(x) for x in checker.suggest(sample, limit=5)])


if __name__ == "__main__":
    main()
