"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar and the work area.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application
   (control panel on the left, drawing surface on the right).
2. Wiring: It builds the renderer and the sequencer around the shared state
   and hands them to the widgets that need them.
"""

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from fibonaccispiral.controller.renderer import SpiralRenderer
from fibonaccispiral.controller.sequencer import AnimationSequencer
from fibonaccispiral.model.state import SpiralState
from fibonaccispiral.view.tabs.tab_sequence import SequenceControlPanel
from fibonaccispiral.view.widgets.spiral_canvas import SpiralCanvas


VISIBLE_APP_NAME = "Fibonacci Spiral"


class MainWindow(QMainWindow):
    def __init__(self, state: SpiralState) -> None:
        super().__init__()
        self.state: SpiralState = state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 700)

        # --- DRAWING PIPELINE ---
        self.renderer = SpiralRenderer(parent=self)
        self.sequencer = AnimationSequencer(self.renderer, self.state.animation, parent=self)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)
        main_layout.addWidget(splitter)

        # --- LEFT SIDE: Controls + Table ---
        self.control_panel = SequenceControlPanel(self.state, self.sequencer)
        splitter.addWidget(self.control_panel)

        # --- RIGHT SIDE: Drawing Surface ---
        self.canvas = SpiralCanvas(self.renderer)
        splitter.addWidget(self.canvas)

        # Set initial proportions (1 part sidebar : 2 parts canvas)
        splitter.setSizes([380, 720])

        # --- SIGNAL CONNECTIONS ---
        self.sequencer.started.connect(self.on_animation_started)
        self.sequencer.finished.connect(self.on_animation_finished)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage("Ready")

    def _create_actions(self) -> None:
        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_animation_started(self) -> None:
        self.statusBar().showMessage(f"Drawing {len(self.state.sequence)} squares...")

    def on_animation_finished(self) -> None:
        self.statusBar().showMessage(f"Done: {len(self.state.sequence)} terms.")
