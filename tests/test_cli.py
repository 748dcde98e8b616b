import re

from aesblocks.blocks import Blocks
from aesblocks.cli import main


def _run(tmp_path, capsysbinary, content):
    path = tmp_path / "message.txt"
    path.write_bytes(content)
    code = main([str(path)])
    return code, capsysbinary.readouterr().out


def test_output_starts_with_key_expansion_timing(tmp_path, capsysbinary):
    code, out = _run(tmp_path, capsysbinary, b"hello world\n")
    assert code == 0
    assert re.match(rb"\*\*\*Time to Key Expand: \d+ us\n", out)


def test_plain_text_shown_before_and_after(tmp_path, capsysbinary):
    code, out = _run(tmp_path, capsysbinary, b"hello world\n")
    assert code == 0
    section = b"====    Plain Text     ====\nhello world\n==== End of Plain Text ====\n"
    assert out.count(section) == 2
    assert out.endswith(section)


def test_cipher_text_uses_key_of_bytes_zero_to_thirty_one(tmp_path, capsysbinary):
    code, out = _run(tmp_path, capsysbinary, b"hello world\n")
    assert code == 0
    header = b"===    Cipher Text     ===\n"
    footer = b"\n=== End of Cipher Text ===\n"
    start = out.index(header) + len(header)
    end = out.index(footer, start)
    expected = Blocks(b"hello world", bytes(range(32)))
    expected.encrypt()
    capsysbinary.readouterr()
    assert out[start:end] == expected.visible()


def test_timing_lines_are_reported(tmp_path, capsysbinary):
    code, out = _run(tmp_path, capsysbinary, b"abc")
    assert code == 0
    assert re.search(rb"\*\*\*Time to Encrypt: \d+ us\n", out)
    assert re.search(rb"\*\*\*Time to Decrypt: \d+ us\n", out)


def test_missing_file_reports_error(tmp_path, capsys):
    code = main([str(tmp_path / "absent.txt")])
    assert code == 1
    assert "File not Open." in capsys.readouterr().err