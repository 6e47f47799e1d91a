import json
import math
import os
import time


# ---------- 2D geometry (pixel space, z ignored) ----------
def vec_sub(a, b):
    return (a.x - b.x, a.y - b.y)


def vec_len(v):
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1]


def clamp01(v):
    return max(0.0, min(1.0, v))


def dist(a, b):
    """Euclidean distance in pixels between two landmarks."""
    return vec_len(vec_sub(a, b))


def angle(a, b, c):
    """Angle (degrees) at b for points a-b-c. 0.0 when a or c sits on b."""
    ab = vec_sub(a, b)
    cb = vec_sub(c, b)
    mag1 = vec_len(ab)
    mag2 = vec_len(cb)
    if mag1 * mag2 == 0:
        return 0.0
    v = dot(ab, cb) / (mag1 * mag2)
    v = max(min(v, 1.0), -1.0)
    return math.degrees(math.acos(v))


def clamp_step(value, low, high, step):
    """Clamp value into [low, high] and snap it to the nearest step above low."""
    value = max(low, min(high, float(value)))
    snapped = low + round((value - low) / step) * step
    return round(max(low, min(high, snapped)), 6)


# ---------- config ----------
def load_config(path="config.json"):
    if not os.path.exists(path):
        print(f"[PY] config '{path}' not found, using defaults.")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print("[PY] Failed to load config:", e)
        return {}


class ConfigWatcher:
    """
    Watches a JSON config file and reloads it when its mtime changes.
    Usage:
        watcher = ConfigWatcher("config.json")
        cfg = watcher.get_config()        # initial load
        # once per frame:
        cfg = watcher.check_reload()      # returns new cfg or same dict
    A reload that fails to parse keeps the previous config.
    """

    def __init__(self, path="config.json", min_check_interval=0.5):
        self.path = path
        self._cfg = {}
        self._mtime = 0.0
        self._last_checked = 0.0
        self._min_check_interval = min_check_interval
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self._mtime = 0.0
            return
        try:
            m = os.path.getmtime(self.path)
            with open(self.path, "r", encoding="utf-8") as f:
                cfg = json.load(f)
        except (OSError, ValueError) as e:
            print("[ConfigWatcher] failed to load config:", e)
            return
        self._cfg = cfg
        self._mtime = m

    def get_config(self):
        return self._cfg

    def check_reload(self):
        """
        Cheap to call every frame; only stats the file every
        min_check_interval seconds. Returns the current config.
        """
        now = time.monotonic()
        if now - self._last_checked < self._min_check_interval:
            return self._cfg
        self._last_checked = now

        try:
            m = os.path.getmtime(self.path)
        except OSError:
            # file missing -> keep existing config
            return self._cfg
        if m != self._mtime:
            print(f"[ConfigWatcher] Detected {os.path.basename(self.path)} change, reloading...")
            self._load()
        return self._cfg
