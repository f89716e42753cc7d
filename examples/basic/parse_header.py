"""Parse a header line and highlight it with zero config."""

from arroba import parse_first_line, tokenize_first_line

buffer = "\n@option key=value count=10\nbody text"

print(parse_first_line(buffer))
for span in tokenize_first_line(buffer):
    print(f"{span.kind.value:>6} {span.start:>3}:{span.end:<3} {span.text!r}")
