import sys, os, queue
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from chunksort.partitioner import make_chunks
from chunksort.parallel_sorter import sort_chunks_concurrently
from chunksort.merge import merge
from chunksort.pipeline import SortPipeline, partition_and_sort
from chunksort.sources import generate_random
from chunksort.config import SortSettings

results = []

# Test 1: Concrete N=10 scenario
try:
    nums = [5, -3, 5, 0, 9, -3, 2, 7, 1, 4]
    chunks = make_chunks(nums)
    ok = chunks == [[5, -3, 5], [0, 9, -3], [2, 7], [1, 4]]
    sort_chunks_concurrently(chunks)
    ok = ok and chunks == [[-3, 5, 5], [-3, 0, 9], [2, 7], [1, 4]]
    ok = ok and merge(chunks) == [-3, -3, 0, 1, 2, 4, 5, 5, 7, 9]
    results.append("PASS" if ok else "FAIL")
    print("T1(scenario): " + str(merge(chunks)) + " - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T1 ERROR: " + str(ex))

# Test 2: All equal
try:
    r2 = merge(partition_and_sort([3] * 10))
    ok2 = r2 == [3] * 10
    results.append("PASS" if ok2 else "FAIL")
    print("T2(equal): " + str(r2) + " - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T2 ERROR: " + str(ex))

# Test 3: N=100 scaling
try:
    nums3 = generate_random(100, seed=100)
    chunks3 = partition_and_sort(nums3)
    r3 = merge(chunks3)
    ok3 = len(chunks3) == 10 and all(len(c) == 10 for c in chunks3) and r3 == sorted(nums3)
    results.append("PASS" if ok3 else "FAIL")
    print("T3(n=100): " + str(len(chunks3)) + " chunks - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T3 ERROR: " + str(ex))

# Test 4: Larger random input, both algorithms, metrics streamed
try:
    nums4 = generate_random(50_000, seed=4)
    ok4 = True
    for algo in ("builtin", "merge_sort"):
        mq = queue.Queue()
        run = SortPipeline(settings=SortSettings(algorithm=algo), metrics_queue=mq).run(nums4)
        ok4 = ok4 and run.merged == sorted(nums4) and mq.qsize() == len(run.chunks)
        print("  " + algo + ": " + str(round(run.total_ms, 2)) + "ms, " + str(len(run.chunks)) + " chunks")
    results.append("PASS" if ok4 else "FAIL")
    print("T4(n=50000): " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T4 ERROR: " + str(ex))

passed = results.count("PASS")
failed = results.count("FAIL")
print("---")
print("TOTAL: " + str(passed) + " passed, " + str(failed) + " failed")
