"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .session import EditorSession
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, session: 'EditorSession') -> bool:
        """Execute the command.

        Args:
            session: EditorSession the command acts on

        Returns:
            True if the command modified the document
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, session: 'EditorSession') -> bool:
        """Movement commands don't modify the document."""
        self._move(session)
        return False

    @abstractmethod
    def _move(self, session: 'EditorSession'):
        """Perform the movement."""
        pass


class MoveLeft(MovementCommand):
    def _move(self, session):
        session.cursor.move_left()


class MoveRight(MovementCommand):
    def _move(self, session):
        session.cursor.move_right()


class MoveUp(MovementCommand):
    def _move(self, session):
        session.cursor.move_up()


class MoveDown(MovementCommand):
    def _move(self, session):
        session.cursor.move_down()


class Home(MovementCommand):
    def _move(self, session):
        session.cursor.home()


class End(MovementCommand):
    def _move(self, session):
        session.cursor.end()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, session: 'EditorSession') -> bool:
        """Editing commands report a change when the text actually changed.

        Every edit that changes the text also moves the cursor or changes
        the line count, so comparing those is enough.
        """
        before = (session.buffer.line_count(), session.cursor.row, session.cursor.column)
        self._edit(session)
        after = (session.buffer.line_count(), session.cursor.row, session.cursor.column)
        return after != before

    @abstractmethod
    def _edit(self, session: 'EditorSession'):
        """Perform the edit."""
        pass


@dataclass
class InsertChar(EditCommand):
    ch: str

    def _edit(self, session):
        session.cursor.insert_char(self.ch)


class Backspace(EditCommand):
    def _edit(self, session):
        session.cursor.backspace()


class Enter(EditCommand):
    def _edit(self, session):
        session.cursor.enter()


@dataclass
class Resize(EditorCommand):
    width: int
    height: int

    def execute(self, session: 'EditorSession') -> bool:
        session.viewport.resize(self.width, self.height, session.cursor.row)
        return False


class Exit(EditorCommand):
    def execute(self, session: 'EditorSession') -> bool:
        session.exit_requested = True
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), MoveLeft())
        self.register((KeyType.SPECIAL, 'right'), MoveRight())
        self.register((KeyType.SPECIAL, 'up'), MoveUp())
        self.register((KeyType.SPECIAL, 'down'), MoveDown())
        self.register((KeyType.SPECIAL, 'home'), Home())
        self.register((KeyType.SPECIAL, 'end'), End())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), Backspace())
        self.register((KeyType.SPECIAL, 'enter'), Enter())

        # System commands
        self.register((KeyType.SPECIAL, 'escape'), Exit())
        self.register((KeyType.CTRL, 'q'), Exit())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def command_for(self, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Translate a key event into a command, or None if it is unbound.

        Printable regular characters become InsertChar; control
        characters (including tab) are never inserted.
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command

        if key_event.key_type == KeyType.REGULAR:
            char = key_event.value
            if len(char) == 1 and char.isprintable():
                return InsertChar(char)

        return None
