import json
import socket
import time


class GestureServer:
    """
    Publishes gesture events as newline-terminated JSON to one TCP client.
    Accepting is non-blocking so the pipeline never waits for a subscriber.
    """

    def __init__(self, host="127.0.0.1", port=5555):
        self.addr = (host, port)
        self.conn = None

        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock.bind(self.addr)
        self.sock.listen(1)
        self.sock.setblocking(False)
        print(f"[NET] Listening on {self.addr[0]}:{self.addr[1]} ...")

    def update(self):
        """Check for a new subscriber without blocking."""
        if self.conn is not None:
            return
        try:
            self.conn, addr = self.sock.accept()
        except BlockingIOError:
            return
        self.conn.setblocking(True)
        print("[NET] Client connected:", addr)

    def send_event(self, result, frame_index=0, stats=None):
        """
        result: GestureResult
        stats: optional SessionStats snapshot dict
        """
        self.update()
        if not self.conn:
            return False

        payload = result.to_dict()
        payload["frame"] = frame_index
        payload["timestamp"] = time.time()
        if stats is not None:
            payload["stats"] = stats
        msg = json.dumps(payload) + "\n"
        try:
            self.conn.sendall(msg.encode("utf-8"))
        except (BrokenPipeError, ConnectionResetError, OSError) as e:
            print("[NET] Client disconnected:", e)
            self.conn.close()
            self.conn = None
            return False
        return True

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
        self.sock.close()


class LabelPublisher:
    """Lightweight ZeroMQ PUB socket that only sends the gesture label."""

    def __init__(self, port=5556, host="*"):
        import zmq

        self.context = zmq.Context()
        self.socket = self.context.socket(zmq.PUB)
        if port:
            self.socket.bind(f"tcp://{host}:{port}")
            self.port = port
        else:
            # port 0: let zmq pick a free one
            self.port = self.socket.bind_to_random_port(f"tcp://{host}")
        print(f"[NET] Publishing labels on tcp://{host}:{self.port}")

    def send_event(self, result, frame_index=0, stats=None):
        self.socket.send_string(result.gesture)
        return True

    def close(self):
        self.socket.close(linger=0)
        self.context.term()
