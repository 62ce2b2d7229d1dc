"""Basic isotile usage example.

Demonstrates:
- Seeding a map and painting on it
- Multi-cell edits that undo as one transaction
- Reading next-edit predictions after each tick
- Tick tracing with an in-memory history store
"""

import logging

from isotile import (
    Coordinate,
    Editor,
    EditorSettings,
    Set,
    Undo,
    seed_grid,
)

PATH = 3
RAMP = 20


def print_predictions(editor: Editor) -> None:
    for context, ranking in editor.predictions().items():
        best, count = ranking[0]
        print(f"  after {[(k.layer_change, k.tile_type) for k in context]}")
        print(f"    likely next: layer {best.layer_change:+d}, tile {best.tile_type} ({count}x)")


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    editor = Editor.from_settings(EditorSettings(trace_max_ticks=100))
    seed_grid(editor.store, width=8, height=8, layers=1)
    print(f"Seeded {len(editor.store)} cells")

    # A designer lays paths and puts a ramp one layer up at the end of each
    for x in range(5):
        editor.submit(Set([Coordinate(x, 0, 0), Coordinate(x, 1, 0)], PATH))
        editor.tick()
        editor.submit(Set([Coordinate(x, 2, 0)], PATH))
        editor.tick()
        editor.submit(Set([Coordinate(x, 2, 1)], RAMP))
        editor.tick()

    print(f"\n--- After {editor.tick_count} ticks ---")
    print(f"Cells: {len(editor.store)}, undo entries: {len(editor.undo_entries)}")
    print_predictions(editor)

    # Shift-drag: one Set, one transaction
    line = [Coordinate(x, 5, 0) for x in range(8)]
    editor.submit(Set(line, PATH))
    editor.tick()
    print(f"\nPainted line of {len(line)}, tile at (7, 5): {editor.tile_at(line[-1])}")

    editor.submit(Undo())
    editor.tick()
    print(f"Undone, tile at (7, 5): {editor.tile_at(line[-1])}")

    if editor.history is not None:
        first, last = editor.history.get_tick_range() or (0, 0)
        print(f"\nTraced ticks {first}..{last}")


if __name__ == "__main__":
    main()
