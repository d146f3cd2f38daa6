import xml.etree.ElementTree as ET

import pytest

from canadianexperience.anim_channel import AnimChannelAngle, AnimChannelPoint, Point
from canadianexperience.timeline import Timeline


def test_num_frames():
    timeline = Timeline()
    assert timeline.num_frames == 300
    timeline.num_frames = 123
    assert timeline.num_frames == 123


def test_frame_rate():
    timeline = Timeline()
    assert timeline.frame_rate == 30
    timeline.frame_rate = 22
    assert timeline.frame_rate == 22


def test_current_time():
    timeline = Timeline()
    assert timeline.current_time == pytest.approx(0.0, abs=0.00001)
    timeline.current_time = 1.23
    assert timeline.current_time == pytest.approx(1.23, abs=0.00001)


def test_duration():
    timeline = Timeline()
    assert timeline.duration == pytest.approx(10, abs=0.0001)
    timeline.frame_rate = 375
    assert timeline.duration == pytest.approx(300.0 / 375.0, abs=0.0001)
    timeline.num_frames = 789
    assert timeline.duration == pytest.approx(789.0 / 375.0, abs=0.0001)


def test_current_frame():
    timeline = Timeline()
    assert timeline.current_frame == 0
    timeline.current_time = 9.27
    assert timeline.current_frame == 278


def test_add():
    timeline = Timeline()
    channel = AnimChannelAngle()
    timeline.add_channel(channel)
    assert channel.timeline is timeline
    assert timeline.channels == (channel,)


def test_clear_resets_defaults_and_keyframes():
    timeline = Timeline()
    channel = AnimChannelAngle()
    timeline.add_channel(channel)
    timeline.current_time = 1.0
    channel.set_keyframe(0.5)
    timeline.num_frames = 50
    timeline.frame_rate = 10
    timeline.clear()
    assert (timeline.num_frames, timeline.frame_rate, timeline.current_time) == (300, 30, 0.0)
    assert channel.keyframes == ()


def test_clear_keyframe_on_all_channels():
    timeline = Timeline()
    angle = AnimChannelAngle("a")
    point = AnimChannelPoint("p")
    timeline.add_channel(angle)
    timeline.add_channel(point)
    timeline.current_time = 1.0
    angle.set_keyframe(1.0)
    point.set_keyframe(Point(1, 1))
    timeline.clear_keyframe()
    assert angle.keyframes == ()
    assert point.keyframes == ()


def test_save_attributes_and_channels():
    timeline = Timeline()
    timeline.num_frames = 120
    timeline.frame_rate = 24
    timeline.add_channel(AnimChannelAngle("a"))
    timeline.add_channel(AnimChannelPoint("p"))
    root = ET.Element("anim")
    timeline.save(root)
    assert root.get("numframes") == "120"
    assert root.get("framerate") == "24"
    assert [c.get("name") for c in root.findall("channel")] == ["a", "p"]


def test_save_load_round_trip():
    source = Timeline()
    source.num_frames = 200
    angle = AnimChannelAngle("arm")
    point = AnimChannelPoint("pos")
    source.add_channel(angle)
    source.add_channel(point)
    source.current_time = 1.5
    angle.set_keyframe(2.7)
    point.set_keyframe(Point(101, 655))
    source.current_time = 3.0
    angle.set_keyframe(-1.8)
    point.set_keyframe(Point(202, 1000))
    root = ET.Element("anim")
    source.save(root)

    target = Timeline()
    angle2 = AnimChannelAngle("arm")
    point2 = AnimChannelPoint("pos")
    target.add_channel(angle2)
    target.add_channel(point2)
    target.load(root)

    assert target.num_frames == 200
    assert target.frame_rate == 30
    target.current_time = 2.25
    assert angle2.angle == pytest.approx(0.45)
    assert point2.point == Point(151, 827)


def test_load_defaults_and_unknown_channel():
    timeline = Timeline()
    channel = AnimChannelAngle("known")
    timeline.add_channel(channel)
    root = ET.Element("anim")
    other = ET.SubElement(root, "channel", name="unknown")
    ET.SubElement(other, "keyframe", frame="10", angle="1.0")
    timeline.load(root)
    assert (timeline.num_frames, timeline.frame_rate) == (300, 30)
    assert channel.keyframes == ()