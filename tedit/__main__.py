"""tedit CLI entry point.

Allows running via `python -m tedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import platformdirs

from .constants import EditorConstants
from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def setup_logging(level: str) -> Path:
    """Send log records to a file, since the editor owns the terminal.

    Returns:
        Path of the log file
    """
    log_dir = Path(platformdirs.user_log_dir(EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / EditorConstants.LOG_FILENAME
    logging.basicConfig(
        filename=str(log_path),
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return log_path


def run_keyboard_test() -> None:
    """Run an interactive keyboard test using the editor's input stack.

    Prints each parsed key event and the command it is bound to.
    Quit with ESC.
    """
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyEvent, KeyType
    from .commands import CommandRegistry

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    registry = CommandRegistry()

    try:
        while True:
            ev: KeyEvent | None = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                print("Exiting keyboard test.")
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            flags = [name for name, on in (('alt', ev.is_alt), ('ctrl', ev.is_ctrl),
                                           ('shift', ev.is_shift), ('seq', ev.is_sequence)) if on]
            if flags:
                parts.append(f"flags={'+'.join(flags)}")
            parts.append(f"command={registry.command_for(ev)!r}")
            print(' '.join(parts), end='\r\n')
    finally:
        term.cleanup()


def main() -> None:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return

    from .settings import get_settings
    settings = get_settings()
    setup_logging(settings.get('log_level'))

    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor(settings)
    if args:
        editor.load_file(args[0])
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
