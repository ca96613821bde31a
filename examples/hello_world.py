"""
binary_clock — Hello World

One clock state, many displays. Displays run in registration order
and receive the same immutable snapshot.
"""

import io

from binary_clock import ClockStateBuilder, DisplayRegistry, ErrorCode, TimeComponents
from binary_clock.renderers import AsciiRenderer, CompactRenderer, EmojiRenderer, JsonRenderer

# ─── Your display (anything callable with (state, context)) ───


def log_line(state, context) -> None:
    context.append(f"{state.time_string()} @ {state.timestamp}")


def main():
    # ──────────────────────────────────────
    #  1. Create the builder and the registry
    # ──────────────────────────────────────
    builder = ClockStateBuilder()
    registry = DisplayRegistry(builder=builder)

    # ──────────────────────────────────────
    #  2. Register displays (order = dispatch order)
    # ──────────────────────────────────────
    history: list[str] = []
    json_buffer = io.StringIO()

    emoji_id = registry.register(EmojiRenderer())
    registry.register(AsciiRenderer())
    registry.register(JsonRenderer(), json_buffer)
    registry.register(log_line, history)

    # ──────────────────────────────────────
    #  3. Dispatch the current time
    # ──────────────────────────────────────
    print("=== Current time ===\n")
    state = registry.update_all()
    if not state.ok:
        print("Could not read the clock")
        return

    print(f"\nJSON display wrote {len(json_buffer.getvalue())} characters")
    print(f"History: {history}")

    # ──────────────────────────────────────
    #  4. Encode a specific time
    # ──────────────────────────────────────
    print("\n=== 14:30:45 ===\n")
    assert registry.unregister(emoji_id) is ErrorCode.SUCCESS
    registry.dispatch_all(builder.from_time(TimeComponents(14, 30, 45)))

    # Invalid times come back with timestamp == 0
    bad = builder.from_time(TimeComponents(25, 30, 45))
    print(f"\n25:30:45 valid? {bad.ok}")

    # ──────────────────────────────────────
    #  5. Compact one-liners
    # ──────────────────────────────────────
    compact = CompactRenderer()
    for hms in [(0, 0, 0), (9, 5, 3), (23, 59, 59)]:
        print(compact.format(builder.from_time(TimeComponents(*hms))), end="")


if __name__ == "__main__":
    main()
