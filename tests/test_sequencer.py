import pytest
from PySide6.QtGui import QImage

from fibonaccispiral.controller.renderer import SpiralRenderer
from fibonaccispiral.controller.sequencer import AnimationSequencer
from fibonaccispiral.model.layout import compute_layout
from fibonaccispiral.model.sequence import generate_fibonacci
from fibonaccispiral.model.state import AnimationState


@pytest.fixture
def sequencer(qapp):
    renderer = SpiralRenderer(QImage(120, 120, QImage.Format.Format_RGB32), margin=10)
    return AnimationSequencer(renderer, AnimationState(step_delay_ms=0))


def test_paints_every_square_in_order(sequencer, wait_for):
    painted = []
    sequencer.square_painted.connect(painted.append)

    assert sequencer.run(compute_layout(generate_fibonacci(6)))
    assert sequencer.is_running
    assert wait_for(sequencer.finished)

    assert painted == [0, 1, 2, 3, 4, 5]
    assert not sequencer.is_running
    assert not sequencer.state.is_running


def test_running_flag_transitions(sequencer, wait_for):
    transitions = []
    sequencer.running_changed.connect(transitions.append)

    sequencer.run(compute_layout([1, 1, 2]))
    assert wait_for(sequencer.finished)
    assert transitions == [True, False]


def test_second_run_while_running_is_ignored(sequencer, wait_for):
    painted = []
    started = []
    sequencer.square_painted.connect(painted.append)
    sequencer.started.connect(lambda: started.append(1))

    assert sequencer.run(compute_layout(generate_fibonacci(4)))
    assert not sequencer.run(compute_layout(generate_fibonacci(9)))
    assert wait_for(sequencer.finished)

    assert painted == [0, 1, 2, 3]
    assert started == [1]


def test_empty_layout_is_a_no_op(sequencer):
    transitions = []
    sequencer.running_changed.connect(transitions.append)

    assert not sequencer.run(compute_layout([]))
    assert not sequencer.is_running
    assert transitions == []


def test_negative_delay_rejected(sequencer):
    with pytest.raises(ValueError):
        sequencer.run(compute_layout([1]), step_delay_ms=-1)
    assert not sequencer.is_running


def test_delay_captured_at_start(sequencer, wait_for):
    sequencer.run(compute_layout(generate_fibonacci(5)))
    sequencer.state.step_delay_ms = 10_000

    assert sequencer.current_delay_ms == 0
    assert wait_for(sequencer.finished, timeout_ms=3000)


def test_explicit_delay_overrides_state(sequencer, wait_for):
    sequencer.state.step_delay_ms = 10_000
    sequencer.run(compute_layout([1, 1]), step_delay_ms=1)
    assert sequencer.current_delay_ms == 1
    assert wait_for(sequencer.finished)


def test_can_run_again_after_finishing(sequencer, wait_for):
    sequencer.run(compute_layout([1, 1]))
    assert wait_for(sequencer.finished)
    assert sequencer.run(compute_layout([1, 1, 2]))
    assert wait_for(sequencer.finished)


def test_curve_painted_once_after_last_square(sequencer, wait_for):
    calls = []
    renderer = sequencer.renderer
    original_curve = renderer.paint_curve
    original_square = renderer.paint_square
    renderer.paint_curve = lambda: (calls.append("curve"), original_curve())
    renderer.paint_square = lambda sq: (calls.append(sq.index), original_square(sq))

    sequencer.run(compute_layout([1, 1, 2]))
    assert wait_for(sequencer.finished)
    assert calls == [0, 1, 2, "curve"]


def test_failed_paint_releases_busy_flag(sequencer):
    transitions = []
    sequencer.running_changed.connect(transitions.append)

    def broken(square):
        raise RuntimeError("paint failed")

    original = sequencer.renderer.paint_square
    sequencer.renderer.paint_square = broken
    with pytest.raises(RuntimeError):
        sequencer.run(compute_layout([1, 1, 2]))

    assert not sequencer.is_running
    assert transitions == [True, False]

    sequencer.renderer.paint_square = original
    assert sequencer.run(compute_layout([1]))


def test_failed_begin_releases_busy_flag(sequencer):
    def broken(layout, sequence_length):
        raise RuntimeError("no surface")

    sequencer.renderer.begin = broken
    with pytest.raises(RuntimeError):
        sequencer.run(compute_layout([1, 1]))
    assert not sequencer.is_running


def test_failed_curve_releases_busy_flag(sequencer):
    def broken():
        raise RuntimeError("curve failed")

    sequencer.renderer.paint_curve = broken
    finished = []
    sequencer.finished.connect(lambda: finished.append(1))

    sequencer.run(compute_layout([1, 1]))
    # drive the remaining steps by hand so the error surfaces here
    sequencer._step_timer.stop()
    sequencer._advance()
    sequencer._step_timer.stop()
    with pytest.raises(RuntimeError):
        sequencer._advance()

    assert not sequencer.is_running
    assert finished == []
