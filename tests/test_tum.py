import pytest

from vslamcore.tum import load_tum_mono, load_tum_rgbd

HEADER = "# color images\n# file: 'rgbd_dataset.bag'\n# timestamp filename\n"


def test_mono_skips_header(tmp_path):
    (tmp_path / "rgb.txt").write_text(
        HEADER + "1305031102.175304 rgb/1305031102.175304.png\n"
        "1305031102.211214 rgb/1305031102.211214.png\n\n",
        encoding="utf-8",
    )
    names, stamps = load_tum_mono(tmp_path)
    assert names == ["rgb/1305031102.175304.png", "rgb/1305031102.211214.png"]
    assert stamps == [1305031102.175304, 1305031102.211214]


def test_mono_header_only(tmp_path):
    (tmp_path / "rgb.txt").write_text(HEADER, encoding="utf-8")
    assert load_tum_mono(tmp_path) == ([], [])


def test_mono_malformed_line(tmp_path):
    (tmp_path / "rgb.txt").write_text(HEADER + "1305031102.175304\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_tum_mono(tmp_path)


def test_mono_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tum_mono(tmp_path)


def test_rgbd_association(tmp_path):
    path = tmp_path / "assoc.txt"
    path.write_text(
        "1305031102.175304 rgb/a.png 1305031102.160407 depth/a.png\n"
        "1305031102.211214 rgb/b.png 1305031102.226738 depth/b.png\n",
        encoding="utf-8",
    )
    rgb, depth, stamps = load_tum_rgbd(path)
    assert rgb == ["rgb/a.png", "rgb/b.png"]
    assert depth == ["depth/a.png", "depth/b.png"]
    assert stamps == [1305031102.175304, 1305031102.211214]
    assert len(rgb) == len(depth) == len(stamps)


def test_rgbd_bad_timestamp(tmp_path):
    path = tmp_path / "assoc.txt"
    path.write_text("abc rgb/a.png 1.0 depth/a.png\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_tum_rgbd(path)


def test_rgbd_missing_depth(tmp_path):
    path = tmp_path / "assoc.txt"
    path.write_text("1.0 rgb/a.png\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_tum_rgbd(path)