"""Re-analyze the header on every keystroke, as the editor does."""

from arroba import DictAnalysisCache, analyze, complete_header
from arroba.serialization import spans_to_json

target = "@multi_option size=3"
cache = DictAnalysisCache()

for i in range(1, len(target) + 1):
    buffer = target[:i] + "\nfirst line of content"
    result = analyze(buffer, cache=cache)
    completion = complete_header(buffer)
    status = completion.status if completion else "-"
    error = result.error.message if result.error else "ok"
    print(f"{target[:i]:<22} {status:<8} {error}")

print()
print("Last spans:", spans_to_json(cache.last().spans))
