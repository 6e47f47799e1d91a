import time

from GestureClassifier import NO_HANDS, UNCERTAIN

# Labels that describe the tracker state rather than a recognised gesture.
NON_GESTURES = (NO_HANDS, UNCERTAIN)


def format_time(seconds) -> str:
    """Whole seconds as m:ss."""
    seconds = int(seconds)
    mins, secs = divmod(seconds, 60)
    return f"{mins}:{secs:02d}"


def confidence_label(conf: float) -> str:
    if conf >= 0.8:
        return "High"
    if conf >= 0.6:
        return "Medium"
    if conf >= 0.4:
        return "Low"
    return "Very Low"


class SessionStats:
    """
    Aggregates the emitted gesture stream for display.

    A gesture is counted when the label changes to a real gesture; repeats of
    the current label only refresh its confidence and hand data.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        self.start_time = self._clock()
        self.current_gesture = NO_HANDS
        self.current_confidence = 0.0
        self.hand_data = None
        self.history = []
        self.total_gestures = 0
        self.hands_detected = 0
        self.confidence_scores = []

    def on_gesture(self, gesture, confidence=0.0, hand_data=None) -> None:
        if gesture != self.current_gesture:
            self.current_gesture = gesture
            if gesture not in NON_GESTURES:
                self.history.append(gesture)
                self.total_gestures += 1
                self.hands_detected += 1
                self.confidence_scores.append(confidence)
        self.current_confidence = confidence
        self.hand_data = hand_data

    @property
    def average_confidence(self) -> float:
        if not self.confidence_scores:
            return 0.0
        return sum(self.confidence_scores) / len(self.confidence_scores)

    @property
    def session_time(self) -> int:
        return int(self._clock() - self.start_time)

    def to_dict(self):
        return {
            "currentGesture": self.current_gesture,
            "confidence": self.current_confidence,
            "confidenceLabel": confidence_label(self.current_confidence),
            "totalGestures": self.total_gestures,
            "sessionTime": format_time(self.session_time),
            "averageConfidence": self.average_confidence,
            "handsDetected": self.hands_detected,
            "recentGestures": self.history[-10:],
        }
