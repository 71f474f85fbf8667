import cv2
import numpy as np
import pytest

from ssimulacra.cli import main


@pytest.fixture
def pair(tmp_path, textured):
    original = str(tmp_path / 'original.png')
    distorted = str(tmp_path / 'distorted.png')
    striped = textured.copy()
    striped[::8, :] = 255
    cv2.imwrite(original, textured)
    cv2.imwrite(distorted, striped)
    return original, distorted


def test_prints_score(pair, capsys):
    assert main(list(pair)) == 0
    out = capsys.readouterr().out.strip()
    assert len(out.split('.')[1]) == 8
    assert 0.0 < float(out) <= 1.0


def test_identical_files_print_zero(pair, capsys):
    assert main([pair[0], pair[0]]) == 0
    assert capsys.readouterr().out.strip() == '0.00000000'


def test_writes_difference_images(pair, tmp_path):
    prefix = str(tmp_path / 'out')
    assert main(list(pair) + [prefix]) == 0
    assert (tmp_path / 'out.edgediff.png').is_file()
    assert (tmp_path / 'out.ssim.png').is_file()


def test_dimension_mismatch_fails(tmp_path, pair, capsys, caplog):
    small = str(tmp_path / 'small.png')
    cv2.imwrite(small, np.zeros((32, 32, 3), np.uint8))
    assert main([pair[0], small]) == 1
    assert capsys.readouterr().out == ''
    assert 'dimensions have to be identical' in caplog.text


def test_missing_input(tmp_path, pair, caplog):
    assert main([pair[0], str(tmp_path / 'nope.png')]) == 1
    assert 'Input file not found' in caplog.text
