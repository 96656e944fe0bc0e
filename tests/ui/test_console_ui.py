"""Tests for the rich activity log"""
import io
from pathlib import Path

import pytest
from rich.console import Console

from cryptify.codec.byte_shift import Mode
from cryptify.files.processor import ProcessResult
from cryptify.ui.console_ui import ConsoleUI, THEME


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def ui(console_output):
    console = Console(file=console_output, force_terminal=False, width=100)
    return ConsoleUI(config={}, console=console)


@pytest.mark.unit
def test_console_ui_initial_state(ui):
    assert ui.status == 'idle'
    assert len(ui.entries) == 0


@pytest.mark.unit
def test_entries_are_newest_first(ui):
    ui.add_log("first")
    ui.add_log("second")

    lines = [line for line, _ in ui.entries]
    assert lines[0].endswith("second")
    assert lines[1].endswith("first")
    assert lines[0].startswith("[")


@pytest.mark.unit
def test_entry_styles(ui):
    ui.error("No key entered.")
    ui.operation_succeeded(
        ProcessResult(Path("a"), Path("a.enc"), Mode.ENCRYPT, 1)
    )
    ui.add_log("plain")

    styles = [style for _, style in ui.entries]
    assert styles == ["", THEME['success'], THEME['error']]


@pytest.mark.unit
def test_entries_are_bounded(console_output):
    ui = ConsoleUI(config={}, console=Console(file=console_output), max_entries=3)
    for i in range(5):
        ui.add_log(f"line {i}")

    assert len(ui.entries) == 3
    assert ui.entries[0][0].endswith("line 4")


@pytest.mark.unit
def test_lines_are_printed_as_they_happen(ui, console_output):
    ui.start()
    ui.file_loaded(Path("photo.png"), 512)
    ui.key_derived(6)
    ui.operation_started(Mode.ENCRYPT, Path("photo.png"))

    out = console_output.getvalue()
    assert "Cryptify" in out
    assert "File loaded: photo.png (512 B)" in out
    assert "Key derivation: shift 6" in out
    assert "Starting encryption of photo.png..." in out
    assert ui.status == 'processing'


@pytest.mark.unit
def test_status_tracks_failures(ui):
    ui.operation_started(Mode.DECRYPT, Path("x.enc"))
    ui.operation_failed(Path("x.enc"), "Output already exists")
    ui.operation_started(Mode.DECRYPT, Path("y.enc"))
    ui.operation_succeeded(ProcessResult(Path("y.enc"), Path("y"), Mode.DECRYPT, 1))

    assert ui.status == 'error'
    assert ui.stats == {'successful': 1, 'failed': 1, 'skipped': 0}


@pytest.mark.unit
def test_summary_panel(ui, console_output):
    ui.operation_started(Mode.ENCRYPT, Path("a.txt"))
    ui.operation_succeeded(
        ProcessResult(Path("a.txt"), Path("a.txt.enc"), Mode.ENCRYPT, 3, dry_run=True)
    )
    ui.print_summary()

    out = console_output.getvalue()
    assert "Activity Log" in out
    assert "STATUS: SUCCESS" in out
    assert "0 succeeded  0 failed  1 dry-run" in out


@pytest.mark.unit
def test_summary_panel_when_empty(ui, console_output):
    ui.print_summary()

    out = console_output.getvalue()
    assert "Waiting for input..." in out
    assert "STATUS: IDLE" in out


@pytest.mark.unit
def test_stop_draws_nothing(ui, console_output):
    ui.stop()
    assert console_output.getvalue() == ""
