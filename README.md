# dragonforge

The core of a small 3D engine: math types, a transform hierarchy, cameras,
asset base classes and a few support utilities. It has no window and no
graphics backend attached.

## Contents

- `dragonforge.vector`: `Vector`, a mutable vector of 2 to 4 components. It
  supports element-wise `+ - * /` with vectors or scalars, `x`/`y`/`z`/`w`
  properties, `resized()`, `normalize()` and `normalized()`. The module also
  provides `radians()`.
- `dragonforge.matrix`: `Matrix`, a column-major matrix of 2 to 4 columns and
  rows (4x4 identity by default). It offers `from_columns()`, matrix product
  with `*`, `translate`/`translated`, `rotate`/`rotated`,
  `inverse`/`inversed`, `data()` (a column-major flat list), and the
  class methods `perspective()` and `ortho()`. Indexing a matrix returns a
  `ColumnProxy`, a live view of one column with `assign()` and
  `to_vector()`. Square 3x3 and 4x4 matrices also expose the properties
  `right`, `up` and `backward`; 4x4 matrices also expose `position`.
- `dragonforge.quaternion`: `Quaternion` with the Hamilton product,
  `from_angle_axis()` and `to_matrix()`.
- `dragonforge.transform`: `Transform`, a parent/child node with `local` and
  `world` matrices. Invalid changes to the hierarchy raise `TransformError`.
- `dragonforge.camera`: `Camera` (see `CameraType`) and `FreeFlightCamera`,
  which is steered with `look()`, `scroll()` and `move()`. `ClearBuffer`
  holds the clear-buffer flags.
- `dragonforge.assets`: the base classes `Asset`, `RenderAsset`, `Quad`
  (with `QuadVertex`), `Texture`, `Shader` and `Framebuffer`.
- `dragonforge.color`: `Color` and named constants such as `RED` and `WHITE`.
- `dragonforge.timer`: `Timer` for frame deltas and total lifetime.
- `dragonforge.filesystem`: `FileSystem`, which looks up files relative to a
  game directory and a list of search folders.
- `dragonforge.log`: `Log` and `LogType`, which write log entries to a file
  and optionally to a coloured console.
- `dragonforge.singleton`: `Singleton`, a base class with explicit
  `initialize()`/`deinitialize()`, and `SingletonError`.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from dragonforge.vector import Vector, radians
from dragonforge.matrix import Matrix
from dragonforge.transform import Transform

parent = Transform()
child = Transform()
parent.add_child(child)

parent.local = Matrix().translated(Vector(1.0, 2.0, 3.0))
child.local = Matrix().rotated(radians(90.0), Vector(0.0, 1.0, 0.0))
parent.update()

print(child.world.position.to_vector())
```

### Cameras

```python
from dragonforge.camera import FreeFlightCamera

camera = FreeFlightCamera("freeflight", speed=1.0, sensitivity=0.1)
camera.on_window_resize(1280, 720)
camera.move(0.0, -1.0)   # forward
camera.look(5, 0)
camera.update(1 / 60)
print(camera.view_projection.data())
```

By default cameras apply the y-flip correction for clip spaces whose y axis
points down. Pass `flip_y=False` to turn it off.

### Logging

`Log` appends entries of the form `[MESSAGE];;function;;line;;text` to
`binaries/log.csv`, relative to the game directory of its `FileSystem`. That
directory must already exist; if the file cannot be opened, the entry is
dropped. If you pass a console stream, each entry is also written there in
colour.

```python
import sys

from dragonforge.filesystem import FileSystem
from dragonforge.log import Log

fs = FileSystem()
fs.set_game_directory("/path/to/game/")
log = Log(fs, console=sys.stdout)
log.message("engine started")
```

## What it does not do

The package has no window, renderer, shader compiler, texture or model
loader, and no input handling. `Quad.load_texture`, `Texture.load`,
`Texture.bind` and `Texture.unbind`, and `RenderAsset.render` are abstract:
a graphics backend must supply them. `Framebuffer.bind`/`unbind` and
`Asset.update`/`render` do nothing in the base classes. There is no command
to run.