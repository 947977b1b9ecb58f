"""Unit tests for frame sinks and the text frame format."""

import io

import pytest

from orbitsim.core import FrameSinkError, run_simulation
from orbitsim.core.frame import Frame
from orbitsim.core.vector import Vector2D
from orbitsim.sinks import END_OF_BLOCK, FrameRecorder, TextFrameSink, format_frame


@pytest.fixture
def two_body_frame():
    return Frame(
        index=1,
        attractor=Vector2D(0.0, 0.0),
        positions=(Vector2D(1.5, -2.0), Vector2D(3.0, 4.0)),
        trails=(
            (Vector2D(1.0, -1.0), Vector2D(1.25, -1.5)),
            (Vector2D(2.0, 2.0), Vector2D(2.5, 3.0)),
        ),
    )


class TestFormatFrame:

    def test_block_layout(self, two_body_frame):
        text = format_frame(two_body_frame, header=None)
        assert text == (
            "0.000000 0.000000\n"
            "e\n"
            "1.500000 -2.000000\n"
            "3.000000 4.000000\n"
            "e\n"
            "1.000000 -1.000000\n"
            "1.250000 -1.500000\n"
            "\n"
            "2.000000 2.000000\n"
            "2.500000 3.000000\n"
            "\n"
            "e\n"
        )

    def test_header_first(self, two_body_frame):
        text = format_frame(two_body_frame)
        assert text.startswith("plot '-'")
        assert text.count(f"\n{END_OF_BLOCK}\n") == 3

    def test_empty_system(self):
        frame = Frame(index=0, attractor=Vector2D(0.0, 0.0), positions=(), trails=())
        assert format_frame(frame, header=None) == "0.000000 0.000000\ne\ne\ne\n"


class TestTextFrameSink:

    def test_writes_one_block_per_frame(self, single_planet_config):
        stream = io.StringIO()
        result = run_simulation(single_planet_config, TextFrameSink(stream))
        assert result.frames_dropped == 0
        assert stream.getvalue().count("plot '-'") == single_planet_config.frame_count

    def test_closed_stream_raises_sink_error(self, two_body_frame):
        stream = io.StringIO()
        stream.close()
        sink = TextFrameSink(stream)
        with pytest.raises(FrameSinkError):
            sink.emit(two_body_frame)
        with pytest.raises(FrameSinkError):
            sink.close()

    def test_closed_stream_drops_frames_but_completes(self, single_planet_config):
        stream = io.StringIO()
        stream.close()
        result = run_simulation(single_planet_config, TextFrameSink(stream))
        assert result.frames_run == single_planet_config.frame_count
        assert result.frames_dropped == single_planet_config.frame_count

    def test_does_not_close_stream(self, two_body_frame):
        stream = io.StringIO()
        sink = TextFrameSink(stream)
        sink.emit(two_body_frame)
        sink.close()
        assert not stream.closed


class TestFrameRecorder:

    def test_records_in_order(self, two_body_frame):
        recorder = FrameRecorder()
        recorder.emit(two_body_frame)
        recorder.emit(two_body_frame)
        recorder.close()
        assert len(recorder) == 2
        assert recorder.closed


class TestFrameArrays:

    def test_position_array(self, two_body_frame):
        arr = two_body_frame.position_array()
        assert arr.shape == (2, 2)
        assert arr[1].tolist() == [3.0, 4.0]

    def test_trail_arrays(self, two_body_frame):
        trails = two_body_frame.trail_arrays()
        assert [t.shape for t in trails] == [(2, 2), (2, 2)]
        assert trails[0][-1].tolist() == [1.25, -1.5]

    def test_empty_arrays_keep_two_columns(self):
        frame = Frame(index=0, attractor=Vector2D(), positions=(), trails=((),))
        assert frame.position_array().shape == (0, 2)
        assert frame.trail_arrays()[0].shape == (0, 2)
