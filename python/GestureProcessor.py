from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout

from GestureClassifier import NO_HANDS, GestureClassifier
from GestureState import HISTORY_LEN, GestureSettings, GestureState
from HandData import GestureResult
from HandFeatures import HandFeatureExtractor


# ==========================================
# PROCESSING CORE
# ==========================================
class GestureProcessor:
    """
    Per-frame pipeline: detect -> smooth -> analyze -> classify -> debounce -> emit.

    `detector` is anything with estimate_hands(frame) -> list of HandData
    (see HandTracker). Frames are processed one at a time by whoever calls
    process_frame(); only the detector call runs on a worker thread so it
    can be bounded by a timeout.
    """

    def __init__(
        self,
        detector=None,
        settings: GestureSettings = None,
        detector_timeout: float = 1.0,
        history_len: int = HISTORY_LEN,
    ):
        self.detector = detector
        self.settings = settings or GestureSettings()
        self.detector_timeout = detector_timeout
        self.state = GestureState(smoothing=self.settings.smoothing, history_len=history_len)
        self.features = HandFeatureExtractor()
        self.classifier = GestureClassifier(sensitivity=self.settings.sensitivity)
        self.is_tracking = False

        self._listeners = []
        self._executor = None
        self._pending = None

    # ---------- listeners ----------
    def subscribe(self, callback) -> None:
        """callback(gesture, confidence, hand_data) is invoked once per emitted result."""
        self._listeners.append(callback)

    def _emit(self, result: GestureResult) -> None:
        for cb in self._listeners:
            cb(result.gesture, result.confidence, result.hand_data)

    # ---------- lifecycle ----------
    def start_tracking(self) -> None:
        self.state.clear_buffers()
        self.is_tracking = True

    def stop_tracking(self) -> None:
        # a frame already being processed still completes
        self.is_tracking = False

    def reset_tracking(self) -> None:
        self.stop_tracking()
        self.state.reset()

    @property
    def detector_busy(self) -> bool:
        """True while a timed-out detector call is still running on the worker."""
        return self._pending is not None and not self._pending.done()

    def close(self) -> None:
        # _pending is kept so detector_busy stays accurate after close
        self.stop_tracking()
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    # ---------- per frame ----------
    @staticmethod
    def _log_late_result(future) -> None:
        err = future.exception()
        if err is not None:
            print("[PY] Timed-out hand detection failed later:", err)
        else:
            print("[PY] Timed-out hand detection finished late, result dropped")

    def _detect(self, frame):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="detector")

        if self._pending is not None and not self._pending.done():
            # previous call still stuck in the model; don't queue behind it
            return None
        self._pending = self._executor.submit(self.detector.estimate_hands, frame)
        return self._pending.result(timeout=self.detector_timeout)

    def process_frame(self, frame):
        """
        Run the whole pipeline on one camera frame.
        Returns the emitted GestureResult, or None when the frame was skipped
        (tracking stopped, detector failed or timed out).
        """
        if not self.is_tracking:
            return None

        try:
            hands = self._detect(frame)
        except FutureTimeout:
            print(f"[PY] Hand detection timed out after {self.detector_timeout:.1f}s, skipping frame")
            self._pending.add_done_callback(self._log_late_result)
            return None
        except Exception as e:
            print("[PY] Hand detection error:", e)
            return None

        if hands is None:
            return None

        result = self.process_hands(hands)
        self._emit(result)
        return result

    def process_hands(self, hands) -> GestureResult:
        """Everything after detection. Only the first hand is classified."""
        state = self.state
        state.frame_count += 1
        state.last_hands = list(hands)

        # settings may be changed between frames; read them once here
        state.smoother.alpha = self.settings.smoothing
        self.classifier.sensitivity = self.settings.sensitivity

        if not hands:
            state.history.push(NO_HANDS)
            return GestureResult(NO_HANDS, 0.0, hands=hands)

        hand = hands[0]
        landmarks = state.smoother.smooth(hand.keypoints, slot=0)
        geometry = self.features.analyze(landmarks)
        gesture, confidence = self.classifier.classify(
            geometry.extended, landmarks, geometry.angles, hand.handedness
        )

        label = state.history.push(gesture)

        # hand data describes this frame even when the label is the window's majority
        hand_data = {
            "landmarks": landmarks,
            "angles": geometry.angles,
            "extended_fingers": geometry.extended,
            "handedness": hand.handedness,
        }
        return GestureResult(label, confidence, hand_data, hands=hands)
