import io
import os
from contextlib import redirect_stdout

from phonecode import run_encoder

SAMPLES = os.path.join(os.path.dirname(__file__), 'samples')


def read_lines(name):
    with open(os.path.join(SAMPLES, name), 'r', encoding='utf-8') as f:
        return [line.rstrip('\n') for line in f if line.strip()]


def test_sample_output_matches(
    dictionary=os.path.join(SAMPLES, 'dictionary.txt'),
    numbers=os.path.join(SAMPLES, 'input.txt'),
):
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = run_encoder(['--dictionary', dictionary, '--numbers', numbers])
    assert code == 0
    expected = read_lines('output.txt')
    actual = buf.getvalue().splitlines()
    assert sorted(actual) == sorted(expected), f"Encodings differ:\n{buf.getvalue()}"
    # numbers come out in input order
    assert [line.split(':')[0] for line in actual] == [line.split(':')[0] for line in expected]
