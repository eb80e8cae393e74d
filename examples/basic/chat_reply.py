"""Parse an assistant reply and render it for the chat panel with zero config."""

from chatmark import parse, render, render_text

reply = """Here are the totals:

| Region | Total |
|--------|-------|
| North  | 120   |

- **North** leads
- `South` is next"""

doc = parse(reply)
print(render(doc))
print(render_text(doc, inline_markers=False))
