import threading

import pytest

from colog.errors import SinkOpenError
from colog.severity import Severity
from colog.sinks import SinkManager


def test_open_creates_all_sinks(tmp_path):
    sinks = SinkManager()
    target = tmp_path / "a" / "b"
    sinks.open(target)
    assert sinks.recording
    assert sinks.directory == target
    assert sorted(p.name for p in target.iterdir()) == ["error.log", "info.log", "warn.log"]
    assert all(p.stat().st_size == 0 for p in target.iterdir())
    sinks.close()


def test_write_goes_to_matching_file_only(tmp_path):
    sinks = SinkManager()
    sinks.open(tmp_path)
    sinks.write(Severity.WARN, "careful")
    assert (tmp_path / "warn.log").read_text() == "careful\n"
    assert (tmp_path / "error.log").read_text() == ""
    assert (tmp_path / "info.log").read_text() == ""
    sinks.close()


def test_write_without_open_is_noop(tmp_path):
    sinks = SinkManager()
    sinks.write(Severity.ERROR, "dropped")
    assert not sinks.recording
    assert list(tmp_path.iterdir()) == []


def test_open_is_idempotent_and_appends(tmp_path):
    (tmp_path / "info.log").write_text("existing\n")
    sinks = SinkManager()
    sinks.open(tmp_path)
    first = sinks._files[Severity.INFO]
    before = (tmp_path / "info.log").stat().st_size
    sinks.open(tmp_path)
    sinks.open(tmp_path / "elsewhere")
    assert sinks._files[Severity.INFO] is first
    assert not (tmp_path / "elsewhere").exists()
    assert (tmp_path / "info.log").stat().st_size >= before
    sinks.write(Severity.INFO, "more")
    assert (tmp_path / "info.log").read_text() == "existing\nmore\n"
    sinks.close()


def test_open_fails_when_parent_is_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir")
    sinks = SinkManager()
    with pytest.raises(SinkOpenError) as exc:
        sinks.open(blocker / "logs")
    assert isinstance(exc.value.__cause__, OSError)
    assert not sinks.recording


def test_open_is_all_or_nothing(tmp_path):
    (tmp_path / "warn.log").mkdir()
    sinks = SinkManager()
    with pytest.raises(SinkOpenError) as exc:
        sinks.open(tmp_path)
    assert exc.value.path.endswith("warn.log")
    assert not sinks.recording
    assert sinks._files == {}
    sinks.write(Severity.INFO, "dropped")
    assert (tmp_path / "info.log").read_text() == ""


def test_concurrent_writes_do_not_interleave(tmp_path):
    sinks = SinkManager()
    sinks.open(tmp_path)
    threads_n, per_thread = 8, 250
    payload = "x" * 512

    def worker(n):
        for i in range(per_thread):
            sinks.write(Severity.ERROR, f"t{n} {i} {payload}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    sinks.close()
    lines = (tmp_path / "error.log").read_text().splitlines()
    assert len(lines) == threads_n * per_thread
    assert all(line.endswith(payload) and line.startswith("t") for line in lines)
    assert (tmp_path / "info.log").read_text() == ""


def test_close_stops_recording(tmp_path):
    sinks = SinkManager()
    sinks.open(tmp_path)
    sinks.close()
    assert not sinks.recording
    sinks.write(Severity.INFO, "after close")
    assert (tmp_path / "info.log").read_text() == ""


def test_path_for(tmp_path):
    sinks = SinkManager()
    with pytest.raises(ValueError):
        sinks.path_for(Severity.INFO)
    assert sinks.path_for(Severity.WARN, tmp_path) == tmp_path / "warn.log"


def test_close_releases_handles_before_late_writers(tmp_path):
    sinks = SinkManager()
    sinks.open(tmp_path)
    handles = list(sinks._files.values())
    sinks.close()
    assert sinks._files == {}
    assert all(fh.closed for fh in handles)
    # a writer that saw recording=True just before close finds no handle
    sinks._recording = True
    sinks.write(Severity.INFO, "late")
    assert (tmp_path / "info.log").read_text() == ""
