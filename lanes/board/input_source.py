"""
FILE: lanes/board/input_source.py
PURPOSE: Background keyboard listener feeding the board's event queue
EXPORTS:
  - KeyListener (threading.Thread)
DEPENDENCIES:
  - prompt_toolkit (create_input, Input)
  - threading, queue, time (stdlib)
  - lanes.board.keys (expand)
NOTES:
  - Puts raw terminal into raw mode for as long as it runs
  - Only enqueues abstract keys and 'tick'; never touches board state
  - If reading input fails, enqueues 'interrupt' so the board still saves
  - Lone Escape is held by the VT100 parser until flushed, so pending
    keys are flushed whenever a poll returns nothing
"""

import logging
import queue
import threading
import time
from typing import Optional

from prompt_toolkit.input import Input, create_input

from ..core.constants import KEY_INTERRUPT, KEY_TICK, TICK_RATE
from .keys import expand


logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.02


class KeyListener(threading.Thread):
    """
    Daemon thread that captures key presses and ticks.

    Args:
        events: Queue the main loop reads from
        tick_rate: Seconds between 'tick' events
        input_: prompt_toolkit Input to read from (defaults to stdin)
    """

    def __init__(
        self,
        events: "queue.Queue[str]",
        tick_rate: float = TICK_RATE,
        input_: Optional[Input] = None,
    ):
        super().__init__(name="lanes-keys", daemon=True)
        self.events = events
        self.tick_rate = tick_rate
        self._input = input_
        self._stop_event = threading.Event()

    def stop(self) -> None:
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def poll(self, inp: Input) -> int:
        """
        Read whatever keys are available and enqueue them.

        Returns:
            Number of events put on the queue
        """
        presses = inp.read_keys()
        if not presses:
            presses = inp.flush_keys()

        count = 0
        for key_press in presses:
            keys = expand(key_press)
            if not keys:
                logger.debug("Ignoring key %r", key_press.key)
            for key in keys:
                self.events.put(key)
                count += 1
        return count

    def run(self) -> None:
        try:
            self._listen()
        except Exception:
            logger.exception("Key listener failed")
        finally:
            # Main loop blocks on the queue; make it save and exit
            if not self._stop_event.is_set():
                self.events.put(KEY_INTERRUPT)
            logger.debug("Key listener stopped")

    def _listen(self) -> None:
        inp = self._input if self._input is not None else create_input()
        last_tick = time.monotonic()

        with inp.raw_mode():
            while not self._stop_event.is_set():
                self.poll(inp)

                if time.monotonic() - last_tick >= self.tick_rate:
                    self.events.put(KEY_TICK)
                    last_tick = time.monotonic()

                self._stop_event.wait(POLL_INTERVAL)
