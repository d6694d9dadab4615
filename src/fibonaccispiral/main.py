"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Global Data Model (SpiralState).
2. Instantiates the Main Window (View), which builds the drawing pipeline.
3. Passes the Model into the View so they can communicate.
"""
import argparse
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from fibonaccispiral.logging_config import setup_logging
from fibonaccispiral.model.state import SpiralState
from fibonaccispiral.view.main_window import MainWindow, VISIBLE_APP_NAME


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fibonaccispiral", description=VISIBLE_APP_NAME)
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    # Qt consumes its own options (-platform, -style, ...)
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args(sys.argv[1:])

    # 1. Setup Logging (Console + Optional File)
    setup_logging(debug=args.debug, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    state = SpiralState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
