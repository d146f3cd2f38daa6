import pytest
from PIL import Image

from canadianexperience.anim_channel import Point
from canadianexperience.drawable import Graphics
from canadianexperience.head_top import HeadTop
from canadianexperience.timeline import Timeline

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
GREEN = (0, 255, 0, 255)
RED = (255, 0, 0, 255)


class _Stage:
    name = "Harold"


@pytest.fixture
def head_file(tmp_path):
    path = tmp_path / "head.png"
    Image.new("RGBA", (120, 120), WHITE).save(path)
    return path


@pytest.fixture
def eye_file(tmp_path):
    path = tmp_path / "eye.png"
    Image.new("RGBA", (6, 6), RED).save(path)
    return path


def test_defaults(head_file):
    head = HeadTop("Head Top", head_file)
    assert head.eyes_center == Point(55, 79)
    assert head.interocular_distance == 27
    assert head.movable is True
    assert not head.left_eye.loaded and not head.right_eye.loaded


def test_transform_point_maps_center_to_placement(head_file):
    head = HeadTop("Head Top", head_file)
    head.center = Point(55, 109)
    head.place(Point(100, 100), 0.8)
    assert head.transform_point(Point(55, 109)) == Point(100, 100)


def test_transform_point_without_rotation_is_offset(head_file):
    head = HeadTop("Head Top", head_file)
    head.center = Point(10, 20)
    head.place(Point(100, 100), 0)
    assert head.transform_point(Point(15, 23)) == Point(105, 103)


def test_set_actor_names_channels(head_file):
    head = HeadTop("Head Top", head_file)
    head.set_actor(_Stage())
    assert head.angle_channel.name == "Harold:Head Top"
    assert head.position_channel.name == "Harold:Head Top:position"


def test_set_timeline_adds_both_channels(head_file):
    timeline = Timeline()
    head = HeadTop("Head Top", head_file)
    head.set_timeline(timeline)
    assert timeline.channels == (head.angle_channel, head.position_channel)
    assert head.position_channel.timeline is timeline


def test_keyframes_drive_position(head_file):
    timeline = Timeline()
    head = HeadTop("Head Top", head_file)
    head.set_timeline(timeline)

    timeline.current_time = 1.0
    head.position = Point(10, 20)
    head.set_keyframe()
    head.position = Point(1234, 9833)

    timeline.current_time = 0
    head.get_keyframe()
    assert head.position == Point(10, 20)


def test_get_keyframe_without_keyframes_keeps_position(head_file):
    timeline = Timeline()
    head = HeadTop("Head Top", head_file)
    head.set_timeline(timeline)
    head.position = Point(7, 8)
    head.get_keyframe()
    assert head.position == Point(7, 8)


def test_draw_uses_drawn_eyes_without_bitmaps(head_file):
    head = HeadTop("Head Top", head_file)
    head.eyes_center = Point(60, 60)
    head.interocular_distance = 0
    head.place(Point(0, 0), 0)
    graphics = Graphics(200, 200, background=GREEN)
    head.draw(graphics)
    assert graphics.image.getpixel((60, 60)) == BLACK
    assert graphics.image.getpixel((110, 110)) == WHITE
    assert graphics.image.getpixel((150, 150)) == GREEN


def test_draw_uses_eye_bitmaps_when_loaded(head_file, eye_file):
    head = HeadTop("Head Top", head_file)
    head.eyes_center = Point(60, 60)
    head.interocular_distance = 0
    head.left_eye.load_image(eye_file)
    head.left_eye.center = Point(3, 3)
    head.right_eye.load_image(eye_file)
    head.right_eye.center = Point(3, 3)
    head.place(Point(0, 0), 0)
    graphics = Graphics(200, 200, background=GREEN)
    head.draw(graphics)
    assert graphics.image.getpixel((60, 60)) == RED


def test_draw_eye_marks_transformed_point(head_file):
    head = HeadTop("Head Top", head_file)
    head.center = Point(5, 5)
    head.place(Point(50, 50), 0.4)
    graphics = Graphics(100, 100, background=GREEN)
    head.draw_eye(graphics, Point(5, 5))
    assert graphics.image.getpixel((50, 50)) == BLACK
    assert graphics.transform_point(0, 0) == pytest.approx((0, 0))


def test_draw_eyebrow_strokes_between_points(head_file):
    head = HeadTop("Head Top", head_file)
    head.place(Point(0, 0), 0)
    graphics = Graphics(100, 100, background=GREEN)
    head.draw_eyebrow(graphics, Point(10, 50), Point(40, 50))
    column = [graphics.image.getpixel((25, y)) for y in range(48, 53)]
    assert BLACK in column
    assert graphics.image.getpixel((70, 50)) == GREEN