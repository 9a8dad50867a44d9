import re

import pytest

from densematrix.bench import main, timed_sum
from densematrix.matrix import IncorrectMatrixError


def test_timed_sum_is_non_negative():
    assert timed_sum(5) >= 0.0


def test_timed_sum_rejects_non_positive_size():
    with pytest.raises(IncorrectMatrixError):
        timed_sum(0)


def test_main_prints_elapsed_time(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"Elapsed time: \d+\.\d{6}\n", out)


def test_main_rejects_bad_size_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["many"])
    assert excinfo.value.code == 2


def test_main_rejects_negative_size():
    with pytest.raises(IncorrectMatrixError):
        main(["-1"])