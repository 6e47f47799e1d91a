from collections import Counter, deque

from GestureClassifier import DEFAULT_SENSITIVITY
from LandmarkSmoother import LandmarkSmoother
from helpers import clamp_step

SENSITIVITY_RANGE = (0.1, 1.0, 0.1)
SMOOTHING_RANGE = (0.0, 0.95, 0.05)
DEFAULT_SMOOTHING = 0.8
HISTORY_LEN = 5


class GestureHistory:
    """
    Rolling window of raw per-frame labels; push() returns the majority.
    Ties go to the label that entered the window first, not the newest.
    """

    def __init__(self, size: int = HISTORY_LEN):
        self.size = max(1, int(size))
        self._labels = deque(maxlen=self.size)

    def __len__(self):
        return len(self._labels)

    def labels(self):
        return list(self._labels)

    def reset(self) -> None:
        self._labels.clear()

    def push(self, label: str) -> str:
        self._labels.append(label)
        # Counter keeps insertion order and most_common() is stable
        return Counter(self._labels).most_common(1)[0][0]


class GestureSettings:
    """
    The two runtime knobs. Written by config reloads or a UI, read once per
    frame by the processor; values are clamped and snapped on write.
    """

    def __init__(self, sensitivity=DEFAULT_SENSITIVITY, smoothing=DEFAULT_SMOOTHING):
        self._sensitivity = DEFAULT_SENSITIVITY
        self._smoothing = DEFAULT_SMOOTHING
        self.sensitivity = sensitivity
        self.smoothing = smoothing

    @property
    def sensitivity(self) -> float:
        return self._sensitivity

    @sensitivity.setter
    def sensitivity(self, value) -> None:
        self._sensitivity = clamp_step(value, *SENSITIVITY_RANGE)

    @property
    def smoothing(self) -> float:
        return self._smoothing

    @smoothing.setter
    def smoothing(self, value) -> None:
        self._smoothing = clamp_step(value, *SMOOTHING_RANGE)

    def update_config(self, cfg) -> None:
        """Apply cfg["gesture"]; a value that isn't a number keeps the old one."""
        g = (cfg or {}).get("gesture", {})
        for name in ("sensitivity", "smoothing"):
            if name not in g:
                continue
            try:
                setattr(self, name, g[name])
            except (TypeError, ValueError):
                print(f"[PY] Ignoring invalid gesture.{name}: {g[name]!r}")

    def to_dict(self):
        return {"sensitivity": self.sensitivity, "smoothing": self.smoothing}


class GestureState:
    """
    Per-session state that persists between frames: landmark smoothing
    buffers, label history, and the frame counter. Created when tracking
    starts and reset whenever it (re)starts.
    """

    def __init__(self, smoothing=DEFAULT_SMOOTHING, history_len=HISTORY_LEN):
        self.smoother = LandmarkSmoother(alpha=smoothing)
        self.history = GestureHistory(size=history_len)
        self.frame_count = 0
        self.last_hands = []

    def clear_buffers(self) -> None:
        self.smoother.reset()
        self.history.reset()

    def reset(self) -> None:
        self.clear_buffers()
        self.frame_count = 0
        self.last_hands = []
