from typing import List, Sequence, Tuple

from HandData import Landmark
from helpers import angle

# Four consecutive landmark indices per finger, base to tip.
FINGER_JOINTS: Tuple[Tuple[int, int, int, int], ...] = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 16),
    (17, 18, 19, 20),
)


def finger_angles(landmarks: Sequence[Landmark], joints: Sequence[int]) -> List[float]:
    """Angles (degrees) at each inner joint of one finger, base first."""
    values: List[float] = []
    for i in range(len(joints) - 2):
        p1 = landmarks[joints[i]]
        p2 = landmarks[joints[i + 1]]
        p3 = landmarks[joints[i + 2]]
        values.append(angle(p1, p2, p3))
    return values


def compute_finger_angles(
    landmarks: Sequence[Landmark],
    finger_definitions: Sequence[Sequence[int]] = FINGER_JOINTS,
) -> List[List[float]]:
    """
    2D joint angles for every finger, ordered thumb..pinky.
    A straight finger reads close to 180, a curled one much lower.
    """
    return [finger_angles(landmarks, joints) for joints in finger_definitions]
