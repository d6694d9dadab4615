import os

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEventLoop, QTimer
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def wait_for(qapp):
    """Run the event loop until `signal` fires or the timeout expires."""

    def _wait(signal, timeout_ms: int = 3000) -> bool:
        loop = QEventLoop()
        fired = []

        def on_fired(*args):
            fired.append(args)
            loop.quit()

        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(loop.quit)

        signal.connect(on_fired)
        timer.start(timeout_ms)
        loop.exec()
        timer.stop()
        signal.disconnect(on_fired)
        return bool(fired)

    return _wait
