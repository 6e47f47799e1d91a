"""
Synthetic pixel-space hands for the classifier tests.

Upright hand, wrist at the bottom, thumb out to the right (mirrored webcam).
Extended fingers point straight up; curled ones fold their tip back below
the knuckle.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from HandData import HandData, Landmark

WRIST = (300.0, 400.0)
THUMB_CMC = (330.0, 385.0)
THUMB_MCP = (350.0, 360.0)

# MCP (knuckle) positions, index..pinky
FINGER_MCPS = {
    "index": (315.0, 300.0),
    "middle": (290.0, 295.0),
    "ring": (265.0, 300.0),
    "pinky": (240.0, 310.0),
}
FINGER_BASE_INDEX = {"index": 5, "middle": 9, "ring": 13, "pinky": 17}
TIP_INDEX = {"thumb": 4, "index": 8, "middle": 12, "ring": 16, "pinky": 20}


def make_landmarks(thumb=False, index=False, middle=False, ring=False, pinky=False, **tips):
    """
    21 landmarks with the given fingers extended. Keyword args named after a
    finger with a "_tip" suffix move that tip, e.g. index_tip=(300, 370).
    """
    pts = [None] * 21
    pts[0] = WRIST
    pts[1] = THUMB_CMC
    pts[2] = THUMB_MCP
    tx, ty = THUMB_MCP
    if thumb:
        pts[3] = (tx + 30, ty - 10)
        pts[4] = (tx + 60, ty - 20)
    else:
        pts[3] = (tx + 10, ty - 15)
        pts[4] = (tx, ty - 25)

    flags = {"index": index, "middle": middle, "ring": ring, "pinky": pinky}
    for name, (mx, my) in FINGER_MCPS.items():
        base = FINGER_BASE_INDEX[name]
        pts[base] = (mx, my)
        if flags[name]:
            pts[base + 1] = (mx, my - 40)
            pts[base + 2] = (mx, my - 70)
            pts[base + 3] = (mx, my - 100)
        else:
            pts[base + 1] = (mx, my - 30)
            pts[base + 2] = (mx + 5, my - 10)
            pts[base + 3] = (mx + 5, my + 10)

    for key, xy in tips.items():
        pts[TIP_INDEX[key[: -len("_tip")]]] = xy

    return [Landmark(float(x), float(y)) for x, y in pts]


def make_hand(handedness="Right", score=0.95, **kwargs):
    return HandData(make_landmarks(**kwargs), handedness=handedness, score=score)


OPEN = dict(thumb=True, index=True, middle=True, ring=True, pinky=True)
# index tip tucked in next to the wrist
TIGHT_FIST = dict(index_tip=(300.0, 370.0))
