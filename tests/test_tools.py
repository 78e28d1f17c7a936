"""Preview window, run loop, command line, config and demo recording.

pygame runs against the dummy SDL driver selected in conftest.py.
"""

import importlib

import pytest
from PIL import Image

from rasterbmp import Bitmap, config
from rasterbmp.__main__ import main


# ---------------------------------------------------------------------------
# Preview + run loop
# ---------------------------------------------------------------------------

def test_simulator_update_and_close():
    from rasterbmp.simulator import Simulator

    with Bitmap(8, 6) as bmp:
        bmp.rect(0, 8, 0, 1, (255, 0, 0))
        sim = Simulator(bmp, scale=2, title="test")
        try:
            assert (sim.width, sim.height) == (16, 12)
            assert sim.update() is True
            # row 0 is the bottom of the picture, so it lands at the bottom of the window
            assert tuple(sim.screen.get_at((0, 11)))[:3] == (255, 0, 0)
            assert tuple(sim.screen.get_at((0, 0)))[:3] == (0, 0, 0)
        finally:
            sim.close()


def test_run_stops_on_keyboard_interrupt():
    from rasterbmp.run import run

    seen = []

    def render(bitmap, t, frame):
        seen.append((bitmap, frame))
        bitmap.set(frame, 0, (255, 255, 255))
        if frame == 2:
            raise KeyboardInterrupt

    run(render, fps=200, scale=1, width=4, height=4)
    assert [f for _, f in seen] == [0, 1, 2]
    # the run loop owns its bitmap and releases it on exit
    assert seen[0][0].closed


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def test_cli_new_and_info(tmp_path, capsys):
    path = tmp_path / "teal.bmp"
    main(["new", "4", "3", str(path), "008080"])
    with Bitmap.load(path) as bmp:
        assert (bmp.width, bmp.height) == (4, 3)
        assert bmp.get(3, 2) == (0, 128, 128)

    main(["info", str(path)])
    out = capsys.readouterr().out
    assert "4x3" in out
    assert "bits_per_pixel" in out


def test_cli_convert_round_trip(tmp_path):
    src = tmp_path / "src.bmp"
    png = tmp_path / "mid.png"
    dst = tmp_path / "dst.bmp"
    with Bitmap(5, 4) as bmp:
        bmp.circle(2, 2, 2, (200, 100, 50))
        bmp.line(0, 0, 4, 3, (1, 2, 3))
        bmp.save(src)
        main(["convert", str(src), str(png)])
        main(["convert", str(png), str(dst)])
        with Bitmap.load(dst) as back:
            assert back.buffer == bmp.buffer
    assert Image.open(png).size == (5, 4)


def test_cli_reports_errors(tmp_path, capsys):
    bogus = tmp_path / "bogus.bmp"
    bogus.write_bytes(b"hello world")
    with pytest.raises(SystemExit) as exc:
        main(["info", str(bogus)])
    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        main(["info", str(tmp_path / "missing.bmp")])
    assert "ERROR" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["frobnicate"], ["info"], ["new", "1"]])
def test_cli_usage(argv, capsys):
    with pytest.raises(SystemExit):
        main(argv)
    assert "Usage" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RASTERBMP_PREVIEW_SCALE", "3")
    monkeypatch.setenv("RASTERBMP_WIDTH", "32")
    monkeypatch.setenv("RASTERBMP_MEDIA_DIR", str(tmp_path))
    try:
        importlib.reload(config)
        assert config.PREVIEW_SCALE == 3
        assert config.WIDTH == 32
        assert config.MEDIA_DIR == tmp_path
    finally:
        monkeypatch.undo()
        importlib.reload(config)


# ---------------------------------------------------------------------------
# Demo apps
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", ["circle", "plasma", "rainbow", "starburst"])
def test_demo_apps_render(name):
    module = importlib.import_module(f"apps.{name}")
    with Bitmap(32, 24) as bmp:
        for frame in range(3):
            module.render(bmp, frame * 0.1, frame)
        assert (bmp.pixels[..., 3] == 255).all()
        assert bmp.pixels[..., :3].any()


def test_record_gif_writes_gif_and_bmp(tmp_path):
    import record_gifs
    from apps.circle import render

    gif = record_gifs.render_gif("circle", render, fps=5, duration=0.6,
                                 media_dir=tmp_path, width=16, height=16)
    assert gif.exists()
    with Image.open(gif) as img:
        assert img.size == (16 * record_gifs.SCALE, 16 * record_gifs.SCALE)
    with Bitmap.load(tmp_path / "demo-circle.bmp") as bmp:
        assert (bmp.width, bmp.height) == (16, 16)
