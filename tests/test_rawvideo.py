import io

import numpy as np

from clock_face import WIDTH, HEIGHT, new_field, compose_frame
from rawvideo import RawVideoWriter


def test_blank_frame_is_white():
    out = io.BytesIO()
    writer = RawVideoWriter(out, cell_width=4, cell_height=8)
    writer.clear_screen()
    writer.write_frame(new_field())
    data = out.getvalue()
    assert len(data) == WIDTH * 4 * HEIGHT * 8 * 3
    assert set(data) == {255}


def test_glyphs_are_drawn_in_their_cell():
    writer = RawVideoWriter(io.BytesIO())
    field = new_field()
    field[2][3] = '#'
    arr = np.array(writer.render(field))
    w, h = writer.video_size
    assert arr.shape == (h, w, 3)
    cell = arr[2 * 16:3 * 16, 3 * 8:4 * 8]
    assert cell.min() < 255
    assert arr[:2 * 16].min() == 255


def test_frames_are_appended():
    out = io.BytesIO()
    writer = RawVideoWriter(out)
    writer.write_frame(compose_frame(0.0, 0.0))
    writer.write_frame(new_field())
    w, h = writer.video_size
    assert len(out.getvalue()) == 2 * w * h * 3


def test_raw_video_entry_point(monkeypatch, capsys):
    import rawvideo

    played = []
    monkeypatch.setattr(rawvideo, "play", lambda writer: played.append(writer) or 0)
    assert rawvideo.main(["--cell-width", "4", "--cell-height", "8"]) == 0
    (writer,) = played
    assert isinstance(writer, RawVideoWriter)
    assert writer.video_size == (WIDTH * 4, HEIGHT * 8)
    assert "320x192 rgb24" in capsys.readouterr().err
