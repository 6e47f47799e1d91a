from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Landmark:
    """One hand keypoint in frame pixel coordinates. z is optional depth."""

    x: float
    y: float
    z: Optional[float] = None

    def to_dict(self):
        d = {"x": self.x, "y": self.y}
        if self.z is not None:
            d["z"] = self.z
        return d


class HandData:
    """
    Simple container for one detected hand, as returned by the detector.
    Replaced every frame, never persisted.
    """

    def __init__(self, keypoints=None, handedness="Unknown", score=0.0):
        # 21 Landmark objects, pixel space
        self.keypoints: List[Landmark] = list(keypoints or [])

        # "Left" / "Right"
        self.handedness = handedness

        # detector confidence for this hand
        self.score = score

    def to_dict(self):
        return {
            "keypoints": [lm.to_dict() for lm in self.keypoints],
            "handedness": self.handedness,
            "score": self.score,
        }


class GestureResult:
    """
    The unit emitted once per processed frame.

    hand_data holds the frame's own landmarks/angles/extended flags/handedness,
    while gesture may be the debounced majority label of recent frames.
    hands is every hand the detector returned; only hands[0] is classified.
    """

    def __init__(self, gesture, confidence=0.0, hand_data=None, hands=None):
        self.gesture = gesture
        self.confidence = confidence
        self.hand_data = hand_data
        self.hands: List[HandData] = list(hands or [])

    def __repr__(self):
        return f"GestureResult({self.gesture!r}, {self.confidence:.2f})"

    def to_dict(self):
        """Serialize to JSON-friendly dict."""
        d = {
            "gesture": self.gesture,
            "confidence": self.confidence,
            "hands": [h.to_dict() for h in self.hands],
        }
        if self.hand_data is not None:
            hd = self.hand_data
            d["handData"] = {
                "landmarks": [lm.to_dict() for lm in hd["landmarks"]],
                "angles": [list(a) for a in hd["angles"]],
                "extendedFingers": list(hd["extended_fingers"]),
                "handedness": hd["handedness"],
            }
        return d
