from dataclasses import dataclass
from typing import List, Sequence

from Angles import compute_finger_angles
from HandData import Landmark

WRIST = 0
# thumb, index, middle, ring, pinky
FINGERTIPS = (4, 8, 12, 16, 20)
MCP_JOINTS = (2, 5, 9, 13, 17)

# How far (px) a tip must clear its base joint to count as extended.
EXTENSION_MARGIN_PX = 20.0


@dataclass
class FingerGeometry:
    angles: List[List[float]]
    extended: List[bool]

    @property
    def extended_count(self) -> int:
        return sum(1 for e in self.extended if e)


def extended_fingers(landmarks: Sequence[Landmark]) -> List[bool]:
    """
    Per-finger extension flags, thumb..pinky.

    Thumb is judged horizontally (tip right of its MCP), the rest vertically
    (tip above its MCP, image y grows downward). This assumes a mirrored,
    front-facing camera with the hand upright; a rotated wrist or the other
    hand can read wrong.
    """
    flags = []
    thumb_tip = landmarks[FINGERTIPS[0]]
    thumb_mcp = landmarks[MCP_JOINTS[0]]
    flags.append(thumb_tip.x > thumb_mcp.x + EXTENSION_MARGIN_PX)

    for tip_idx, mcp_idx in zip(FINGERTIPS[1:], MCP_JOINTS[1:]):
        flags.append(landmarks[tip_idx].y < landmarks[mcp_idx].y - EXTENSION_MARGIN_PX)
    return flags


class HandFeatureExtractor:
    """
    Computes per-finger joint angles and extension flags for one frame.
    Stateless: smoothing happens upstream on the landmarks themselves.
    """

    def analyze(self, landmarks: Sequence[Landmark]) -> FingerGeometry:
        return FingerGeometry(
            angles=compute_finger_angles(landmarks),
            extended=extended_fingers(landmarks),
        )
