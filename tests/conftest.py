import os
import pytest
from curtsies import Input


@pytest.fixture
def pty_input():
    """curtsies Input reading from a pseudo-terminal.

    Yields (input, master_fd); bytes written to master_fd arrive as
    keyboard input.
    """
    master_fd, slave_fd = os.openpty()
    slave = os.fdopen(slave_fd, 'r')
    inp = Input(in_stream=slave, keynames='curtsies')
    inp.__enter__()
    try:
        yield inp, master_fd
    finally:
        inp.__exit__(None, None, None)
        slave.close()
        os.close(master_fd)
