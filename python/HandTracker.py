import cv2
import mediapipe as mp

from HandData import HandData, Landmark


class HandTracker:
    """
    MediaPipe Hands wrapped as a detector: estimate_hands(frame_bgr) returns
    up to max_num_hands HandData objects with keypoints in pixel coordinates.
    """

    def __init__(self, cfg=None):
        cfg = cfg or {}
        tcfg = cfg.get("tracker", {})

        self.mp_hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            model_complexity=tcfg.get("model_complexity", 1),
            min_detection_confidence=tcfg.get("min_detection_confidence", 0.5),
            min_tracking_confidence=tcfg.get("min_tracking_confidence", 0.5),
            max_num_hands=tcfg.get("max_num_hands", 2),
        )

    def estimate_hands(self, frame_bgr):
        h, w = frame_bgr.shape[:2]
        # MediaPipe expects RGB in uint8
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        result = self.mp_hands.process(frame_rgb)
        hands = []

        if not result.multi_hand_landmarks:
            return hands

        for lm, handed in zip(result.multi_hand_landmarks, result.multi_handedness):
            label = handed.classification[0]
            # MediaPipe z shares the x scale
            keypoints = [Landmark(p.x * w, p.y * h, p.z * w) for p in lm.landmark]
            hands.append(HandData(keypoints, handedness=label.label, score=label.score))

        return hands

    def close(self):
        self.mp_hands.close()
