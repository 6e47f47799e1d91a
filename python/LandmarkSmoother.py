from typing import Dict, List, Sequence

from HandData import Landmark


class LandmarkSmoother:
    """
    Exponential moving average over landmarks, one history per hand slot.

    Slots are detection indices, not hand identities: whatever hand the
    detector reports first this frame is smoothed against slot 0's history.

        S_t = alpha * S_{t-1} + (1 - alpha) * Y_t

    A higher alpha keeps more of the previous position (smoother, laggier).
    """

    def __init__(self, alpha: float = 0.8):
        self.alpha = alpha
        # SmootherState: slot -> most recent smoothed landmarks
        self._prev: Dict[int, List[Landmark]] = {}

    def reset(self) -> None:
        self._prev.clear()

    def has_slot(self, slot: int) -> bool:
        return slot in self._prev

    def smooth(self, current: Sequence[Landmark], slot: int = 0) -> List[Landmark]:
        prev = self._prev.get(slot)

        if prev is None:
            # First frame for this slot, just store raw
            first = list(current)
            self._prev[slot] = first
            return first

        a = self.alpha
        b = 1.0 - a
        smoothed = []
        for p, c in zip(prev, current):
            if p.z is not None and c.z is not None:
                z = p.z * a + c.z * b
            else:
                z = c.z
            smoothed.append(Landmark(p.x * a + c.x * b, p.y * a + c.y * b, z))

        self._prev[slot] = smoothed
        return smoothed
