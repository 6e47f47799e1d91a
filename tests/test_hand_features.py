"""
Tests for joint angles and the finger extension heuristic.
"""
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from Angles import FINGER_JOINTS, compute_finger_angles, finger_angles
from HandData import Landmark
from HandFeatures import HandFeatureExtractor, extended_fingers
from hand_fixtures import OPEN, make_landmarks


class TestFingerAngles(unittest.TestCase):
    """Test 2D joint angle computation."""

    def test_two_angles_per_finger(self):
        angles = compute_finger_angles(make_landmarks(**OPEN))
        self.assertEqual(len(angles), 5)
        for finger in angles:
            self.assertEqual(len(finger), 2)

    def test_straight_finger_reads_180(self):
        angles = compute_finger_angles(make_landmarks(**OPEN))
        index = angles[1]
        self.assertAlmostEqual(index[0], 180.0, places=4)
        self.assertAlmostEqual(index[1], 180.0, places=4)

    def test_right_angle(self):
        lm = [Landmark(0.0, 0.0)] * 21
        lm = list(lm)
        lm[5] = Landmark(0.0, 0.0)
        lm[6] = Landmark(10.0, 0.0)
        lm[7] = Landmark(10.0, 10.0)
        lm[8] = Landmark(20.0, 10.0)
        values = finger_angles(lm, FINGER_JOINTS[1])
        self.assertAlmostEqual(values[0], 90.0)
        self.assertAlmostEqual(values[1], 90.0)

    def test_z_is_ignored(self):
        flat = make_landmarks(**OPEN)
        deep = [Landmark(p.x, p.y, float(i * 7)) for i, p in enumerate(flat)]
        self.assertEqual(compute_finger_angles(flat), compute_finger_angles(deep))

    def test_coincident_points_do_not_raise(self):
        lm = [Landmark(5.0, 5.0)] * 21
        angles = compute_finger_angles(lm)
        self.assertEqual(angles[0], [0.0, 0.0])


class TestExtendedFingers(unittest.TestCase):
    """Test the pixel-margin extension heuristic."""

    def test_all_extended(self):
        self.assertEqual(extended_fingers(make_landmarks(**OPEN)), [True] * 5)

    def test_none_extended(self):
        self.assertEqual(extended_fingers(make_landmarks()), [False] * 5)

    def test_single_fingers(self):
        names = ("thumb", "index", "middle", "ring", "pinky")
        for i, name in enumerate(names):
            flags = extended_fingers(make_landmarks(**{name: True}))
            expected = [False] * 5
            expected[i] = True
            self.assertEqual(flags, expected, name)

    def test_margin_is_strict(self):
        # index MCP sits at y=300; tip exactly 20px above is not enough
        lm = make_landmarks(index_tip=(315.0, 280.0))
        self.assertFalse(extended_fingers(lm)[1])
        lm = make_landmarks(index_tip=(315.0, 279.0))
        self.assertTrue(extended_fingers(lm)[1])

    def test_thumb_uses_horizontal_offset(self):
        # thumb MCP x=350; tip far above but not to the right stays folded
        lm = make_landmarks(thumb_tip=(360.0, 200.0))
        self.assertFalse(extended_fingers(lm)[0])
        lm = make_landmarks(thumb_tip=(371.0, 360.0))
        self.assertTrue(extended_fingers(lm)[0])

    def test_extractor_bundles_angles_and_flags(self):
        geometry = HandFeatureExtractor().analyze(make_landmarks(index=True, middle=True))
        self.assertEqual(geometry.extended, [False, True, True, False, False])
        self.assertEqual(geometry.extended_count, 2)
        self.assertEqual(len(geometry.angles), 5)


if __name__ == "__main__":
    unittest.main()
