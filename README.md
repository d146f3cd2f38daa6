# canadianexperience

A small keyframe animation library. A `Picture` holds `Actor` objects. Each actor is
built from a tree of drawables: `PolyDrawable`, `ImageDrawable` and `HeadTop`. Actor
positions, drawable rotations and head positions are recorded as keyframes on a
`Timeline`. When the animation time falls between two keyframes, the values in
between are tweened linearly. Pictures are rendered with Pillow.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `canadianexperience.anim_channel`: `Point`, an immutable integer point that supports
  `+`, `-` and negation. It also holds the channel classes. `AnimChannelAngle` has
  `set_keyframe(angle)` and an `angle` property. `AnimChannelPoint` has
  `set_keyframe(point)` and a `point` property. Every channel has `set_frame`,
  `is_valid`, `clear_keyframe`, `clear`, `xml_save` and `xml_load`. Before the first
  keyframe and after the last one, a channel holds that keyframe's value.
- `canadianexperience.timeline`: `Timeline`. It holds `num_frames` (300 by default)
  and `frame_rate` (30 by default), plus the `current_time`, `current_frame` and
  `duration` properties. Setting `current_time` updates every channel. It also has
  `add_channel`, `clear`, `clear_keyframe`, `save` and `load`, which work on
  `xml.etree.ElementTree` elements.
- `canadianexperience.drawable`:
  - `Graphics`, an RGBA Pillow surface (`graphics.image`) with a stack of
    transformations: `push_state`, `pop_state`, the `saved_state()` context manager,
    `translate`, `rotate` and `scale`.
  - `rotate_point`.
  - The abstract base `Drawable`, with `position`, `rotation`, `parent`, `children`,
    `add_child`, `place`, `move`, `set_keyframe` and `get_keyframe`.
- `canadianexperience.poly_drawable`: `Colour` (RGBA) and `PolyDrawable`, a filled
  polygon built with `add_point`. It is black by default. Its `hit_test` uses the
  outline from the last `draw`.
- `canadianexperience.image_drawable`: `ImageDrawable`, an image drawn rotated about
  its `center`. An image file that cannot be loaded is logged as a warning. The
  drawable then draws nothing and is never hit. `hit_test` is true on pixels whose
  alpha is 128 or more.
- `canadianexperience.rotated_bitmap`: `RotatedBitmap`, with `load_image`,
  `draw_image`, `center` and `loaded`.
- `canadianexperience.head_top`: `HeadTop`, an `ImageDrawable` that can be moved
  (`movable` is true) and has a position channel of its own. If both `left_eye` and
  `right_eye` bitmaps are loaded, it draws them. Otherwise it draws eyebrows and
  ellipse eyes, placed by `eyes_center` and `interocular_distance`.
- `canadianexperience.actor`: `Actor`. It holds drawables in drawing order and has
  these members:
  - `set_root`, `add_drawable`, `enabled`, `clickable` and `position`.
  - `hit_test`, which returns the topmost drawable hit.
  - `set_keyframe` and `get_keyframe`.
- `canadianexperience.picture`: `Picture`. It holds actors (iterate over it, or use
  `len`), a `timeline`, a `size` (1500 by 800 by default) and observers. Setting
  `animation_time` moves the timeline, notifies the observers and applies the
  keyframes to every actor. `save(filename)` and `load(filename)` write and read the
  animation as an XML file.
- `canadianexperience.picture_observer`: `PictureObserver`. Subclasses implement
  `update_observer()`. `set_picture` starts observing a picture. `detach`, or leaving a
  `with` block, stops observing it.
- `canadianexperience.harold_factory`, `sarah_factory` and `sparty_factory` have
  `HaroldFactory`, `SarahFactory` and `SpartyFactory`. Their `create(images_dir)`
  builds the character from PNG files in that directory.
- `canadianexperience.picture_factory`: `PictureFactory().create(resources_dir)`
  builds a picture from `resources_dir/images`. It holds a background, Harold, Sparty
  and Sarah.

## Example

```python
from canadianexperience.actor import Actor
from canadianexperience.anim_channel import Point
from canadianexperience.drawable import Graphics
from canadianexperience.picture import Picture
from canadianexperience.poly_drawable import PolyDrawable

picture = Picture()
actor = Actor("Actor")
arm = PolyDrawable("Arm")
for corner in (Point(0, 0), Point(10, 0), Point(10, 40), Point(0, 40)):
    arm.add_point(corner)
actor.set_root(arm)
actor.add_drawable(arm)
picture.add_actor(actor)

picture.animation_time = 1.5
arm.rotation = 2.7
actor.set_keyframe()

picture.animation_time = 3.0
arm.rotation = -1.8
actor.set_keyframe()

picture.animation_time = 2.25
print(arm.rotation)  # about 0.45, halfway between the two keyframes

graphics = Graphics(*picture.size)
picture.draw(graphics)
graphics.image.save("frame.png")

picture.save("animation.anim")
picture.load("animation.anim")
```

## What it does not do

This is a library only. It has no command, no editing window and no playback timer.
You drive the animation by setting `Picture.animation_time` and rendering each frame
with `Picture.draw`. Pictures hold only actors. `Picture.save` writes an empty
`machines` element, and `Picture.load` ignores it.