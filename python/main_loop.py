import threading
import time
from queue import Empty, Queue

import cv2

from GestureProcessor import GestureProcessor
from GestureServer import GestureServer, LabelPublisher
from GestureState import GestureSettings
from HandTracker import HandTracker
from SessionStats import SessionStats, confidence_label
from helpers import ConfigWatcher, load_config


# --------------------------------------------------------
# Queue for latest frame only (overwrite when full)
# --------------------------------------------------------
FRAME_QUEUE_MAX = 1


# --------------------------------------------------------
# CAPTURE THREAD
# --------------------------------------------------------
def capture_thread(frame_queue, stop_event, cfg):
    camera_cfg = cfg.get("camera", {})
    cap = cv2.VideoCapture(camera_cfg.get("index", 0))
    if not cap.isOpened():
        print("[PY] ERROR: Cannot open camera")
        stop_event.set()
        return

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, camera_cfg.get("frame_width", 640))
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, camera_cfg.get("frame_height", 480))
    flip = camera_cfg.get("flip", True)

    print("[PY] Capture thread started.")

    while not stop_event.is_set():
        ok, frame = cap.read()
        if not ok:
            time.sleep(0.01)
            continue

        # mirror view, like a front-facing webcam preview
        if flip:
            frame = cv2.flip(frame, 1)

        if frame_queue.full():
            try:
                frame_queue.get_nowait()  # drop the stale frame
            except Empty:
                pass
        frame_queue.put_nowait(frame)

    cap.release()
    print("[PY] Capture thread exiting.")


# --------------------------------------------------------
# PROCESSING THREAD
# --------------------------------------------------------
def processing_thread(frame_queue, stop_event, cfg, config_path, mode):
    cfg_watcher = ConfigWatcher(config_path)
    watched_cfg = cfg_watcher.get_config()

    gcfg = cfg.get("gesture", {})
    settings = GestureSettings()
    settings.update_config(cfg)
    stats = SessionStats()

    debug_cfg = cfg.get("debug", {})
    show_window = debug_cfg.get("show_window", True)
    log_events = debug_cfg.get("log_events", False)
    window = "Gesture Pipeline"
    last_label = None

    processor = None
    publisher = None
    try:
        processor = GestureProcessor(
            detector=HandTracker(cfg),
            settings=settings,
            detector_timeout=gcfg.get("detector_timeout", 1.0),
            history_len=gcfg.get("history_len", 5),
        )
        processor.subscribe(stats.on_gesture)

        server_cfg = cfg.get("server", {})
        if mode == "zmq":
            publisher = LabelPublisher(port=server_cfg.get("zmq_port", 5556))
        else:
            publisher = GestureServer(
                host=server_cfg.get("host", "127.0.0.1"), port=server_cfg.get("port", 5555)
            )

        processor.start_tracking()
        print("[PY] Processing thread started.")

        while not stop_event.is_set():
            try:
                frame = frame_queue.get(timeout=0.1)
            except Empty:
                continue

            # edits to the config file win over startup overrides
            new_cfg = cfg_watcher.check_reload()
            if new_cfg is not watched_cfg:
                watched_cfg = new_cfg
                settings.update_config(new_cfg)

            result = processor.process_frame(frame)
            if result is None:
                continue

            if log_events and result.gesture != last_label:
                print(f"[PY] {result.gesture} ({result.confidence:.2f})")
            last_label = result.gesture

            publisher.send_event(
                result, frame_index=processor.state.frame_count, stats=stats.to_dict()
            )

            if show_window:
                text = f"{result.gesture} {result.confidence:.0%} {confidence_label(result.confidence)}"
                cv2.putText(frame, text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 255, 0), 2)
                cv2.imshow(window, frame)
                if cv2.waitKey(1) & 0xFF == 27:
                    stop_event.set()
    except Exception as e:
        print("[PY] ERROR in processing thread:", e)
    finally:
        # whatever ended the loop, take the capture thread and main() down too
        stop_event.set()
        if processor is not None:
            busy = processor.detector_busy
            processor.close()
            if busy:
                print("[PY] Detector still busy, leaving it to exit with the process.")
            else:
                processor.detector.close()
        if publisher is not None:
            publisher.close()
        if show_window:
            cv2.destroyAllWindows()
        print(
            f"[PY] Session: {stats.total_gestures} gestures, "
            f"avg confidence {stats.average_confidence:.2f}"
        )
        print("[PY] Processing thread exiting.")


# --------------------------------------------------------
# MAIN ENTRY
# --------------------------------------------------------
def main(config_path="config.json", mode="tcp", overrides=None):
    cfg = load_config(config_path)
    if overrides:
        for section, values in overrides.items():
            cfg.setdefault(section, {}).update(values)

    frame_queue = Queue(maxsize=FRAME_QUEUE_MAX)
    stop_event = threading.Event()

    cap_thread = threading.Thread(
        target=capture_thread, args=(frame_queue, stop_event, cfg), daemon=True
    )
    proc_thread = threading.Thread(
        target=processing_thread,
        args=(frame_queue, stop_event, cfg, config_path, mode),
        daemon=True,
    )

    cap_thread.start()
    proc_thread.start()

    # Keep main thread alive
    try:
        while not stop_event.is_set():
            time.sleep(0.1)
    except KeyboardInterrupt:
        stop_event.set()

    cap_thread.join(timeout=1.0)
    proc_thread.join(timeout=2.0)

    print("[PY] Shutdown complete.")
