import queue
import threading

from chatbrain.brain.codec import ChatCharacter, TimeTick, encode_input
from chatbrain.brain.config import BrainConfig
from chatbrain.brain.model import Brain
from chatbrain.debug_utils import log_debug, log_error, log_info

_STOP = object()


class BrainInterface:
    """
    Runs a Brain on its own worker thread.

    Everything that wants to talk to the brain (the GUI, the tick timer) puts
    events on a single queue. The worker takes them off one at a time, so the
    brain never sees two calls at once and events are processed in the order
    they were sent.
    """

    def __init__(self, brain=None, tick_interval=BrainConfig.TICK_INTERVAL_SECONDS, on_output=None):
        self.brain = brain if brain is not None else Brain()
        self.tick_interval = tick_interval
        self.on_output = on_output

        self.events = queue.Queue()
        self.output_lock = threading.Lock()
        self.output_text = ""
        self.processed_count = 0
        self.last_error = None
        self.status_message = "Brain initialized."

        # Events queued but not yet processed
        self.pending = 0
        self.idle = threading.Condition()

        self.worker_thread = None
        self.timer_thread = None
        self.stop_requested = threading.Event()

    @property
    def is_running(self):
        return self.worker_thread is not None and self.worker_thread.is_alive()

    def start(self):
        if self.is_running:
            return
        self.stop_requested.clear()
        self.last_error = None

        self.worker_thread = threading.Thread(target=self._worker_loop, name="brain-worker", daemon=True)
        self.worker_thread.start()

        if self.tick_interval is not None:
            self.timer_thread = threading.Thread(target=self._timer_loop, name="brain-timer", daemon=True)
            self.timer_thread.start()

        self.status_message = "Brain running."
        log_info(f"BrainInterface started (tick every {self.tick_interval}s)")

    def stop(self, timeout=5.0):
        self.stop_requested.set()
        # Only a live worker consumes the sentinel
        if self.is_running:
            self.events.put(_STOP)
        for thread in (self.timer_thread, self.worker_thread):
            if thread is not None:
                thread.join(timeout)
        self.worker_thread = None
        self.timer_thread = None
        self.status_message = "Brain stopped."
        log_info("BrainInterface stopped")

    def send_text(self, text):
        """
        Queue every character of `text` followed by a newline.
        The whole message is rejected if any character cannot be encoded.
        """
        events = [ChatCharacter(c) for c in text + "\n"]
        for event in events:
            # Raises EncodingError before anything is queued
            encode_input(event)
        for event in events:
            self._enqueue(event)
        log_debug(f"Queued {len(events)} characters")

    def send_tick(self):
        self._enqueue(TimeTick())

    def _enqueue(self, event):
        with self.idle:
            self.pending += 1
        self.events.put(event)

    def reward(self):
        self.brain.feedback(1.0)

    def punish(self):
        self.brain.feedback(-1.0)

    def get_output_text(self):
        with self.output_lock:
            return self.output_text

    def wait_idle(self, timeout=None):
        """
        Block until every queued event has been processed.
        Returns False on timeout, or straight away if the worker has died.
        """
        with self.idle:
            self.idle.wait_for(lambda: self.pending == 0 or self.last_error is not None, timeout)
            return self.pending == 0

    def _timer_loop(self):
        while not self.stop_requested.wait(self.tick_interval):
            self.send_tick()

    def _worker_loop(self):
        while True:
            event = self.events.get()
            if event is _STOP:
                return
            try:
                output = self.brain.step(event)
                self._handle_output(output)
            except Exception as e:
                self.last_error = e
                self.status_message = f"Error: {e}"
                log_error(f"Brain worker stopped on {event!r}: {type(e).__name__}: {e}")
                self.stop_requested.set()
                raise
            finally:
                with self.idle:
                    self.pending -= 1
                    self.idle.notify_all()

    def _handle_output(self, output):
        with self.output_lock:
            self.processed_count += 1
            if isinstance(output, ChatCharacter):
                self.output_text += output.char
        # Nothing is still reported; the sink decides to show nothing
        if self.on_output is not None:
            self.on_output(output)
