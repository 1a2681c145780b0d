"""Main editor controller for the text editor."""

import logging
import os
import sys
import select
import signal
import termios
from typing import Optional

from .terminal import TerminalInterface
from .session import EditorSession
from .keyboard import KeyboardHandler, KeyEvent
from .constants import EditorConstants
from .commands import CommandRegistry, Resize
from .settings import EditorSettings, get_settings

logger = logging.getLogger(__name__)


class Editor:
    """Main text editor application controller."""

    def __init__(self, settings: Optional[EditorSettings] = None):
        """Initialize the editor components."""
        self.settings = settings or get_settings()
        self.terminal = TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()  # Command pattern for key handling
        self.show_status_bar = self.settings.get('show_status_bar')
        self.session = self._new_session("")
        self.running = False
        self.filename = None
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _new_session(self, text: str) -> EditorSession:
        width, height = self._view_size()
        return EditorSession(
            text,
            width=width,
            height=height,
            end_marker=self.settings.get('end_of_document_marker'),
        )

    def _view_size(self) -> tuple[int, int]:
        """Viewport size for the current terminal, excluding the status bar."""
        reserved = EditorConstants.STATUS_BAR_ROWS if self.show_status_bar else 0
        return self.terminal.width, max(0, self.terminal.height - reserved)

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def load_file(self, filename: str):
        """Load a file into the editor.

        A file that doesn't exist yet opens as an empty document.

        Args:
            filename: Path to file to load
        """
        self.filename = filename
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            logger.info(f"{filename} does not exist, starting with an empty document")
            content = ""
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load {filename}: {e}")
            print(f"Error loading file: {e}")
            sys.exit(1)
        self.session = self._new_session(content)

    def status_text(self) -> Optional[str]:
        """Text for the status bar, or None when it is hidden."""
        if not self.show_status_bar:
            return None
        label = self.filename if self.filename is not None else EditorConstants.NEW_FILE_LABEL
        return f" {label}"

    def run(self):
        """Run the main editor loop."""
        self.terminal.setup()
        self.running = True

        # Set up signal handlers
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                # Disable flow control so Ctrl-Q and Ctrl-S reach us
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)  # Make it mutable
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, OSError):
                    old_settings = None

                # Anchor the viewport on the real terminal size before the first frame
                self._apply_resize()

                while self.running:
                    self._draw()

                    # Wait for input on stdin or resize pipe
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        self._apply_resize()
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        while key_event:
                            self._handle_key_event(key_event)
                            if not self.running:
                                break
                            # Keys already buffered by curtsies won't wake select
                            key_event = self.keyboard.get_key_event(timeout=0)

                if old_settings:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError) as e:
                        logger.warning(f"Could not restore terminal settings: {e}")

        except KeyboardInterrupt:
            logger.info("Interrupted, exiting")
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def _apply_resize(self):
        """Resize the viewport to the current terminal size."""
        width, height = self._view_size()
        self.session.apply(Resize(width, height))

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.terminal.draw_frame(self.session.render_frame(), self.status_text())

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        command = self.command_registry.command_for(key_event)
        if command is None:
            logger.debug(f"Ignoring unbound key {key_event.raw!r}")
            return

        self.session.apply(command)
        if self.session.exit_requested:
            self.running = False
