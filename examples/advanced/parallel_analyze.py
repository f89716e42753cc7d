"""Analyze 1000 buffers in parallel."""

from concurrent.futures import ThreadPoolExecutor

from arroba import analyze

buffers = [f"@option id={i} mode={'fast' if i % 2 else 'slow'}\nbody {i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(analyze, buffers))

print(f"Analyzed {len(results)} buffers in parallel")
print("All valid:", all(result.ok for result in results))
print("Last directive:", results[-1].parsed)
