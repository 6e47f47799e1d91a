# GestureClassifier.py
from typing import Sequence, Tuple

from HandData import Landmark
from HandFeatures import FINGERTIPS, WRIST
from helpers import clamp01, dist

FIST = "Fist"
OPEN_HAND = "Open Hand"
POINTING = "Pointing"
PEACE_SIGN = "Peace Sign"
THUMBS_UP = "Thumbs Up"
OK_SIGN = "OK Sign"
ROCK_SIGN = "Rock Sign"
CALL_ME = "Call Me"
UNCERTAIN = "Uncertain"
NO_HANDS = "No hands detected"

DEFAULT_SENSITIVITY = 0.7

# Thumb and index tips closer than this (px) make a ring.
OK_SIGN_MAX_GAP_PX = 30.0


def finger_count_label(n: int) -> str:
    return f"{n} Finger" if n == 1 else f"{n} Fingers"


class GestureClassifier:
    """
    Flat decision table over the extension pattern, first match wins.
    Each branch yields a confidence in [0, 1]; anything under the
    sensitivity floor is reported as "Uncertain" with confidence 0.
    """

    def __init__(self, sensitivity: float = DEFAULT_SENSITIVITY):
        self.sensitivity = sensitivity

    def classify(
        self,
        extended: Sequence[bool],
        landmarks: Sequence[Landmark],
        angles=None,
        handedness: str = None,
    ) -> Tuple[str, float]:
        # angles and handedness are accepted for parity with hand data but
        # the table only looks at positions.
        gesture, confidence = self._match(extended, landmarks)
        confidence = clamp01(confidence)

        if confidence < self.sensitivity:
            return UNCERTAIN, 0.0
        return gesture, confidence

    def _match(self, extended, landmarks) -> Tuple[str, float]:
        thumb, index, middle, ring, pinky = (bool(e) for e in extended)
        count = sum((thumb, index, middle, ring, pinky))

        wrist = landmarks[WRIST]
        thumb_tip, index_tip, middle_tip, _, pinky_tip = (landmarks[i] for i in FINGERTIPS)

        if count == 0:
            # tighter fist keeps the index tip near the wrist
            compactness = dist(index_tip, wrist)
            return FIST, (100.0 - compactness) / 50.0

        if count == 5:
            spread = dist(thumb_tip, pinky_tip)
            return OPEN_HAND, spread / 200.0

        if index and not (thumb or middle or ring or pinky):
            return POINTING, 0.9

        if index and middle and not ring and not pinky:
            separation = dist(index_tip, middle_tip)
            return PEACE_SIGN, separation / 50.0

        if thumb and not (index or middle or ring or pinky):
            return THUMBS_UP, 0.85

        if (
            thumb
            and index
            and not (middle or ring or pinky)
            and dist(thumb_tip, index_tip) < OK_SIGN_MAX_GAP_PX
        ):
            return OK_SIGN, 0.8

        if index and pinky and not middle and not ring:
            return ROCK_SIGN, 0.75

        if thumb and pinky and not (index or middle or ring):
            return CALL_ME, 0.7

        return finger_count_label(count), 0.6
