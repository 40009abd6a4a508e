import threading

import pytest

from jordan_aq.errors import EngineUnavailableError
from jordan_aq.models import SelectionState
from jordan_aq.pipeline import SelectionDispatcher


class BlockingPipeline:
    """Wraps a pipeline so that chosen selections wait until released."""

    def __init__(self, pipeline, blocked):
        self.pipeline = pipeline
        self.blocked = blocked
        self.started = threading.Event()
        self.release = threading.Event()

    def on_selection_changed(self, state):
        if state in self.blocked:
            self.started.set()
            assert self.release.wait(5)
        return self.pipeline.on_selection_changed(state)

    def export(self, raster, folder=None):
        return self.pipeline.export(raster, folder=folder)


@pytest.fixture
def delivered():
    return []


def test_latest_selection_wins(pipeline, delivered):
    old = SelectionState.create("NO2", 2025, 1)
    new = SelectionState.create("CO", 2025, 1)
    blocking = BlockingPipeline(pipeline, {old})
    dispatcher = SelectionDispatcher(blocking, on_result=lambda state, raster, result: delivered.append(state))

    first = dispatcher.submit(old)
    assert blocking.started.wait(5)
    second = dispatcher.submit(new)
    raster, result = second.result(5)

    blocking.release.set()
    assert first.result(5) is None
    dispatcher.shutdown()

    assert delivered == [new]
    assert raster.band == "CO_column_number_density"
    assert dispatcher.latest is second


def test_export_not_blocked_by_recomputation(pipeline):
    state = SelectionState.create("NO2", 2025, 1)
    raster, _ = pipeline.on_selection_changed(state)
    blocking = BlockingPipeline(pipeline, {state})
    dispatcher = SelectionDispatcher(blocking)

    dispatcher.submit(state)
    assert blocking.started.wait(5)
    task_id = dispatcher.export(raster).result(5)

    blocking.release.set()
    dispatcher.shutdown()
    assert task_id == "TASK1"


def test_errors_reported_for_current_selection(pipeline, engine):
    def unavailable(*args):
        raise EngineUnavailableError("offline")

    engine.sample_means = unavailable
    errors = []
    dispatcher = SelectionDispatcher(pipeline, on_error=lambda state, error: errors.append(error))

    future = dispatcher.submit(SelectionState.create("NO2", 2025, 1))
    with pytest.raises(EngineUnavailableError):
        future.result(5)
    dispatcher.shutdown()

    assert len(errors) == 1


def test_submit_waits_for_delivery_in_progress(pipeline):
    first = SelectionState.create("NO2", 2025, 1)
    second = SelectionState.create("SO2", 2025, 1)
    in_callback = threading.Event()
    leave_callback = threading.Event()
    delivered = []

    def on_result(state, raster, result):
        delivered.append(state)
        if state == first:
            in_callback.set()
            assert leave_callback.wait(5)

    dispatcher = SelectionDispatcher(pipeline, on_result=on_result)
    future = dispatcher.submit(first)
    assert in_callback.wait(5)

    submitter = threading.Thread(target=dispatcher.submit, args=(second,))
    submitter.start()
    submitter.join(0.2)
    assert submitter.is_alive()

    leave_callback.set()
    submitter.join(5)
    assert future.result(5) is not None
    dispatcher.latest.result(5)
    dispatcher.shutdown()

    assert delivered == [first, second]


def test_failed_export_is_logged(pipeline, engine, caplog):
    def refuse(image, region, job):
        raise EngineUnavailableError("export refused")

    engine.start_export = refuse
    raster, _ = pipeline.compute("NO2", 2025, 1)
    dispatcher = SelectionDispatcher(pipeline)

    future = dispatcher.export(raster)
    with pytest.raises(EngineUnavailableError):
        future.result(5)
    dispatcher.shutdown()

    assert "export refused" in caplog.text
