from molegame.app.audio import load_music, load_sound
from molegame.core import AudioSink


def test_no_path_gives_silent_sink():
    sink = load_sound(None)
    assert type(sink) is AudioSink
    sink.play()
    sink.pause()
    sink.rewind()


def test_missing_file_gives_silent_sink(tmp_path, caplog):
    assert type(load_music("nope.ogg", tmp_path)) is AudioSink
    assert "Sound file not found" in caplog.text
