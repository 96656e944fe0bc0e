from pathlib import Path

import pytest

from cryptify.codec.byte_shift import Mode
from cryptify.files.naming import output_name, output_path_for


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, mode, expected",
    [
        ("report.pdf", Mode.ENCRYPT, "report.pdf.enc"),
        ("archive.enc", Mode.ENCRYPT, "archive.enc.enc"),
        ("report.pdf.enc", Mode.DECRYPT, "report.pdf"),
        ("report.pdf", Mode.DECRYPT, "decrypted_report.pdf"),
        ("report.ENC", Mode.DECRYPT, "decrypted_report.ENC"),
        ("report.encrypted", Mode.DECRYPT, "decrypted_report.encrypted"),
        (".enc", Mode.DECRYPT, "decrypted_.enc"),
        ("notes", "encrypt", "notes.enc"),
    ],
)
def test_output_name_default_convention(name, mode, expected):
    assert output_name(name, mode) == expected


@pytest.mark.unit
def test_output_name_custom_suffix_and_prefix():
    assert output_name("a.txt", Mode.ENCRYPT, suffix=".obf") == "a.txt.obf"
    assert output_name("a.txt.obf", Mode.DECRYPT, suffix=".obf") == "a.txt"
    assert output_name("a.txt.enc", Mode.DECRYPT, suffix=".obf", prefix="plain-") == "plain-a.txt.enc"


@pytest.mark.unit
def test_output_path_defaults_to_source_directory(tmp_path):
    source = tmp_path / "docs" / "cv.odt"
    assert output_path_for(source, Mode.ENCRYPT) == tmp_path / "docs" / "cv.odt.enc"


@pytest.mark.unit
def test_output_path_uses_output_dir(tmp_path):
    source = Path("/somewhere/else/cv.odt.enc")
    out_dir = tmp_path / "out"
    assert output_path_for(source, Mode.DECRYPT, output_dir=out_dir) == out_dir / "cv.odt"
