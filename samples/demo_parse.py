"""
wktedit walkthrough
Loads a WKT site plan, measures it, then edits and saves it headlessly.
Run from the repo root: python samples/demo_parse.py
"""
import io
import json
from pathlib import Path

from wktedit.engine import CursorMode, EditingSession, Rect, Viewport
from wktedit.engine.measure import measure, to_shapely

SAMPLE = Path(__file__).with_name("site.wkt")

session = EditingSession()
session.document_changed.connect(lambda: print("  [document changed]"))
session.selection_changed.connect(lambda sel: print(f"  [selection -> {sorted(sel)}]"))

# ============================================================
# STEP 1: Parse WKT (unknown types are skipped)
# ============================================================
print("=" * 60)
print("STEP 1: PARSE WKT")
print("=" * 60)

elements = session.open_file(SAMPLE)
for i, element in enumerate(elements):
    rect = element.bounding_rectangle()
    length, area = measure(element)
    print(f"\n--- Element {i} ({element.kind}) ---")
    print(f"  WKT: {element.to_wkt()[:70]}")
    print(f"  Bounding box: {tuple(rect) if rect else None}")
    print(f"  Length: {length:.2f}  Area: {area:.2f}")


# ============================================================
# STEP 2: Relationships (shapely)
# ============================================================
print("\n" + "=" * 60)
print("STEP 2: RELATIONSHIPS")
print("=" * 60)

parcel = to_shapely(elements[0])
for i, element in enumerate(elements[1:], start=1):
    geom = to_shapely(element)
    print(f"  Element {i}: within parcel={geom.within(parcel)} distance={geom.distance(parcel):.2f}")


# ============================================================
# STEP 3: Select (click and rubber band)
# ============================================================
print("\n" + "=" * 60)
print("STEP 3: SELECT")
print("=" * 60)

viewport = Viewport()
viewport.zoom_by(5, cx=0, cy=0)
x, y = viewport.to_model(161, 41)
print(f"  Click at screen (161, 41) -> model ({x}, {y})")
print(f"  Hit: {session.add_point(x, y)}")
print(f"  Rubber band: {sorted(session.select_within(viewport.screen_rect_to_model(0, 0, 200, 200)))}")


# ============================================================
# STEP 4: Draw a new line and save
# ============================================================
print("\n" + "=" * 60)
print("STEP 4: DRAW AND SAVE")
print("=" * 60)

session.set_mode(CursorMode.LINE)
for x, y in [(100, 50), (140, 50), (140, 90)]:
    session.add_point(x, y)
session.end_current_element()

buf = io.StringIO()
session.save(buf)
print(buf.getvalue())

summary = {
    "elements": len(session.elements),
    "inside_parcel": sorted(session.elements_within(Rect(0, 0, 100, 100))),
}
print(json.dumps(summary, indent=2))
