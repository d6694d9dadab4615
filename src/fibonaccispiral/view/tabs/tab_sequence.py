"""
Sequence Control Panel
"""
import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QSlider,
    QGroupBox, QFormLayout, QMessageBox, QTableWidget, QTableWidgetItem, QHeaderView,
    QAbstractItemView
)
from PySide6.QtCore import Signal, Qt
from PySide6.QtGui import QBrush, QColor

from fibonaccispiral.config import (
    DEFAULT_TERMS, DEFAULT_STEP_DELAY_MS, MIN_STEP_DELAY_MS, MAX_STEP_DELAY_MS,
    STEP_DELAY_INCREMENT_MS, MIN_TERMS, MAX_TERMS,
)
from fibonaccispiral.controller.sequencer import AnimationSequencer
from fibonaccispiral.model.sequence import TermCountError, parse_term_count, sequence_rows
from fibonaccispiral.model.state import SpiralState

logger = logging.getLogger(__name__)

EMPTY_TABLE_TEXT = 'Click "Generate" to see the sequence'


class SequenceControlPanel(QWidget):
    # Emitted after a new sequence was generated, passing its length
    sequence_generated = Signal(int)

    def __init__(self, state: SpiralState, sequencer: AnimationSequencer) -> None:
        super().__init__()
        self.state = state
        self.sequencer = sequencer

        layout = QVBoxLayout(self)

        # --- Settings Group ---
        grp = QGroupBox("Settings")
        form = QFormLayout(grp)

        # 1. Number of terms
        self.terms_input = QLineEdit(str(DEFAULT_TERMS))
        self.terms_input.setPlaceholderText(f"{MIN_TERMS}-{MAX_TERMS}")
        self.terms_input.returnPressed.connect(self.on_generate_clicked)
        form.addRow("Number of terms:", self.terms_input)

        # 2. Animation speed
        speed_row = QHBoxLayout()
        self.speed_slider = QSlider(Qt.Orientation.Horizontal)
        self.speed_slider.setRange(MIN_STEP_DELAY_MS, MAX_STEP_DELAY_MS)
        self.speed_slider.setSingleStep(STEP_DELAY_INCREMENT_MS)
        self.speed_slider.setPageStep(STEP_DELAY_INCREMENT_MS)
        self.speed_slider.setValue(DEFAULT_STEP_DELAY_MS)
        self.speed_slider.valueChanged.connect(self.on_speed_changed)
        speed_row.addWidget(self.speed_slider)

        self.speed_label = QLabel(f"{DEFAULT_STEP_DELAY_MS}ms")
        self.speed_label.setMinimumWidth(60)
        speed_row.addWidget(self.speed_label)
        form.addRow("Step delay:", speed_row)

        layout.addWidget(grp)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_generate = QPushButton("Generate")
        self.btn_generate.setMinimumHeight(40)
        self.btn_generate.clicked.connect(self.on_generate_clicked)
        buttons.addWidget(self.btn_generate)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setMinimumHeight(40)
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        buttons.addWidget(self.btn_reset)
        layout.addLayout(buttons)

        # --- Sequence Table ---
        table_grp = QGroupBox("Sequence")
        table_layout = QVBoxLayout(table_grp)
        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["#", "Value", "Binary"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setStretchLastSection(True)
        table_layout.addWidget(self.table)
        layout.addWidget(table_grp, 1)

        # --- SIGNAL CONNECTIONS ---
        self.sequencer.running_changed.connect(self.on_running_changed)

        self.update_table()

    # --- SLOTS ---

    def on_generate_clicked(self) -> None:
        if self.sequencer.is_running:
            return

        try:
            terms = parse_term_count(self.terms_input.text())
        except TermCountError as e:
            logger.warning(f"Rejected term count '{self.terms_input.text()}': {e}")
            if e.suggested is not None:
                self.terms_input.setText(str(e.suggested))
            QMessageBox.warning(self, "Invalid Input", str(e))
            return

        layout = self.state.regenerate(terms)
        self.update_table()
        self.sequence_generated.emit(len(self.state.sequence))
        self.sequencer.run(layout)

    def on_reset_clicked(self) -> None:
        if self.sequencer.is_running:
            return

        self.state.reset()
        self.terms_input.setText(str(self.state.term_count))
        self.speed_slider.setValue(self.state.animation.step_delay_ms)
        self.speed_label.setText(f"{self.state.animation.step_delay_ms}ms")
        self.sequencer.renderer.clear()
        self.update_table()

    def on_speed_changed(self, value: int) -> None:
        # snap drags to the slider increment
        snapped = round(value / STEP_DELAY_INCREMENT_MS) * STEP_DELAY_INCREMENT_MS
        if snapped != value:
            self.speed_slider.setValue(snapped)
            return

        self.state.animation.step_delay_ms = value
        self.speed_label.setText(f"{value}ms")

    def on_running_changed(self, running: bool) -> None:
        """The triggering controls stay disabled for the whole run."""
        for w in (self.btn_generate, self.btn_reset, self.terms_input):
            w.setEnabled(not running)

    # --- HELPERS ---

    def update_table(self) -> None:
        """Refill the table from the current sequence."""
        self.table.clearSpans()
        self.table.clearContents()

        if not self.state.sequence:
            self.table.setRowCount(1)
            item = QTableWidgetItem(EMPTY_TABLE_TEXT)
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            item.setForeground(QBrush(QColor("gray")))
            self.table.setItem(0, 0, item)
            self.table.setSpan(0, 0, 1, 3)
            return

        rows = sequence_rows(self.state.sequence)
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, text in enumerate(row):
                item = QTableWidgetItem(text)
                if c == 0:
                    font = item.font()
                    font.setBold(True)
                    item.setFont(font)
                self.table.setItem(r, c, item)
