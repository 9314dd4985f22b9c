"""
FILE: lanes/board/main.py
PURPOSE: Interactive board main loop
EXPORTS:
  - run_board(store, console, events, listener) -> None
  - process_event(controller, key) -> bool
DEPENDENCIES:
  - rich (Console, Live)
  - queue (stdlib)
  - lanes.core.store (TaskStore)
  - lanes.board.controller (BoardController)
  - lanes.board.input_source (KeyListener)
  - lanes.board.render (create_board_layout)
NOTES:
  - Single owner of state: only this loop calls the controller
  - Blocks on the event queue; one event is handled to completion at a time
  - 'tick' only refreshes the display
  - 'interrupt' (Ctrl+C in raw mode) saves and exits like quit
  - SaveError propagates so the caller can report it
"""

import logging
import queue
from typing import Optional

from rich.console import Console
from rich.live import Live

from ..core.store import TaskStore
from ..core.constants import KEY_TICK, KEY_INTERRUPT
from .controller import BoardController
from .input_source import KeyListener
from .render import create_board_layout


logger = logging.getLogger(__name__)


def process_event(controller: BoardController, key: str) -> bool:
    """
    Route one queued event to the controller.

    Returns:
        False once the board has been saved and the loop should end
    """
    if key == KEY_TICK:
        return True
    if key == KEY_INTERRUPT:
        logger.info("Interrupted, saving board")
        return controller.quit()
    return controller.handle_key(key)


def run_board(
    store: Optional[TaskStore] = None,
    console: Optional[Console] = None,
    events: Optional["queue.Queue[str]"] = None,
    listener: Optional[KeyListener] = None,
) -> None:
    """
    Run the interactive board until the user quits.

    Args:
        store: Task store to use (defaults to the board file in ~/.lanes)
        console: Rich console to draw on
        events: Event queue shared with the listener
        listener: Key listener thread (started here, stopped on exit)

    Raises:
        SaveError: If the board cannot be written on quit
    """
    if store is None:
        store = TaskStore()
    if console is None:
        console = Console()
    if events is None:
        events = queue.Queue()
    if listener is None:
        listener = KeyListener(events)

    store.load()
    controller = BoardController(store)
    logger.info("Board started")

    listener.start()
    try:
        with Live(
            create_board_layout(controller.view()),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:
            running = True
            while running:
                key = events.get()
                running = process_event(controller, key)
                live.update(create_board_layout(controller.view()), refresh=True)
    finally:
        listener.stop()
        listener.join(timeout=1.0)

    logger.info("Board closed")
