from PIL import Image

from wgwf.api import chunk_name
from wgwf.cli.render_lattice import main as render_main


def test_png_into_directory_and_ascii(tmp_path, capsys):
    out_dir = tmp_path / "maps"
    rc = render_main(["--seed", "7", "--width", "12", "--height", "6",
                      "--chunk", "1", "-2", "--png", str(out_dir), "--scale", "3", "--ascii"])
    assert rc == 0
    png = out_dir / chunk_name(7, 1, -2, 12, 6)
    assert png.exists()
    with Image.open(png) as img:
        assert img.size == (36, 18)
    lines = [l for l in capsys.readouterr().out.splitlines() if l and set(l) <= set("~,^n")]
    assert len(lines) == 6 and all(len(l) == 12 for l in lines)


def test_png_explicit_file(tmp_path):
    out = tmp_path / "a" / "chunk.png"
    rc = render_main(["--width", "4", "--height", "4", "--png", str(out), "--scale", "1"])
    assert rc == 0
    assert out.exists()
    assert not out.with_suffix(".png.tmp").exists()


def test_ascii_is_default(capsys):
    rc = render_main(["--width", "9", "--height", "2"])
    assert rc == 0
    lines = [l for l in capsys.readouterr().out.splitlines() if l and set(l) <= set("~,^n")]
    assert len(lines) == 2


def test_invalid_size_returns_2():
    assert render_main(["--width", "0"]) == 2
    assert render_main(["--scale", "0"]) == 2


def test_huge_seed_is_accepted(tmp_path):
    rc = render_main(["--seed", str(2**64), "--width", "3", "--height", "3",
                      "--png", str(tmp_path), "--scale", "1"])
    assert rc == 0
    assert (tmp_path / chunk_name(2**64, 0, 0, 3, 3)).exists()


def test_unwritable_png_returns_1(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    rc = render_main(["--width", "3", "--height", "3", "--png", str(blocker / "out.png")])
    assert rc == 1
    assert not (blocker / "out.png").exists()
