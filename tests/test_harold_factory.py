from canadianexperience.anim_channel import Point
from canadianexperience.harold_factory import HaroldFactory
from canadianexperience.head_top import HeadTop
from canadianexperience.picture import Picture
from canadianexperience.poly_drawable import Colour, PolyDrawable


def _by_name(actor):
    return {d.name: d for d in actor.drawables}


def test_actor_name_and_root(tmp_path):
    actor = HaroldFactory().create(tmp_path)
    assert actor.name == "Harold"
    assert actor.root.name == "Shirt"
    assert actor.root.position == Point(0, -114)
    assert actor.root.center == Point(44, 138)


def test_drawing_order():
    actor = HaroldFactory().create("missing-images")
    assert [d.name for d in actor.drawables] == [
        "Left Arm", "Right Arm", "Right Hand", "Left Hand", "Right Leg",
        "Left Leg", "Shirt", "Vest", "Head Bottom", "Head Top",
    ]


def test_hierarchy(tmp_path):
    parts = _by_name(HaroldFactory().create(tmp_path))
    assert parts["Head Top"].parent is parts["Head Bottom"]
    assert parts["Head Bottom"].parent is parts["Shirt"]
    assert parts["Left Hand"].parent is parts["Left Arm"]
    assert parts["Right Hand"].parent is parts["Right Arm"]
    assert parts["Shirt"].parent is None
    assert isinstance(parts["Head Top"], HeadTop)


def test_arms_are_coloured_polygons(tmp_path):
    parts = _by_name(HaroldFactory().create(tmp_path))
    larm = parts["Left Arm"]
    assert isinstance(larm, PolyDrawable)
    assert larm.color == Colour(60, 174, 184)
    assert larm.points == (Point(-7, -7), Point(-7, 96), Point(8, 96), Point(8, -7))
    assert parts["Right Hand"].color == Colour(253, 218, 180)


def test_channels_named_after_actor(tmp_path):
    actor = HaroldFactory().create(tmp_path)
    parts = _by_name(actor)
    assert parts["Vest"].angle_channel.name == "Harold:Vest"
    assert parts["Head Top"].position_channel.name == "Harold:Head Top:position"


def test_hit_test_finds_arm(tmp_path):
    actor = HaroldFactory().create(tmp_path)
    actor.position = Point(150, 600)
    picture = Picture()
    picture.add_actor(actor)
    from canadianexperience.drawable import Graphics

    actor.draw(Graphics(400, 800))
    larm = _by_name(actor)["Left Arm"]
    assert actor.hit_test(larm.placed_position) is larm