# minirt

minirt reads `.rt` scene files for a small ray tracer. It checks each scene and prints a summary of it.
The package also has an XPM image reader and the X11 colour-name table.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minirt scene.rt
```

The command takes exactly one argument, and that argument must end in `.rt`.
If the argument is wrong, a usage message goes to standard error and the exit status is 1.

When the file parses and forms a valid scene, a summary of the scene goes to standard output and the exit status is 0.
The summary lists the camera, the ambient light, the light, the object counts and each object.
If the file cannot be opened or holds an error, the command prints a line that begins with `Error:`, naming the line that failed, and exits with status 1.

After it prints the summary, the command builds one primary ray for each pixel of an 800×600 frame, starting from the camera position.

## What it does not do

The package does not render. It tests no rays against objects, shades nothing, writes no image file and opens no window.
The primary rays it builds are not used for anything further.

## Scene format

Each line holds one element, and its tokens are separated by spaces.
A line that is empty, or that starts with `#`, is skipped.

```
A  0.2               255,255,255
C  -50,0,20          0,0,1        70
L  -40,0,30          0.7          255,255,255
sp 0,0,20.6          12.6         10,0,255
pl 0,0,-10           0,1,0        0,0,225
cy 50.0,0.0,20.6     0,0,1.0      14.2  21.42  10,0,255
```

| Element | Parameters |
|---|---|
| `A` | ratio in [0, 1]; colour |
| `C` | position; orientation (normalised); field of view in [0, 180] |
| `L` | position; brightness in [0, 1]; colour |
| `sp` | centre; radius > 0; colour |
| `pl` | point; normal (normalised); colour |
| `cy` | centre; axis (normalised); radius > 0; height > 0; colour |

- **Numbers** have an optional sign, then digits with at most one `.`. Exponents are not accepted.
- **Vectors** are written `x,y,z`.
- **Colours** are written `r,g,b`. Each component must be in [0, 255], and is stored scaled to [0, 1].
- **Normalised** means that the squared length lies between 0.99 and 1.01.

A valid scene has exactly one `A`, exactly one `C` and at least one `L`.

## Library use

```python
from minirt.parser import parse_scene
from minirt.scene import SceneError

try:
    scene = parse_scene("scene.rt")
    scene.validate()
except SceneError as err:
    print(err)
else:
    print(scene.summary())
```

`minirt.parser.parse_lines(lines)` builds a `Scene` from any iterable of lines.
`parse_line(line, scene)` adds a single element to an existing scene.

The other modules:

- `minirt.numbers` parses the fields of a scene line. `parse_double`, `parse_vector` and `parse_color` raise `ValueError` on bad input.
- `minirt.geometry` holds the basic types and helpers:
  - `Vector`, with `dot`, `is_normalized` and `is_perpendicular`
  - `Color`, `Ray` and `Viewport`
  - `viewport_size(fov, distance, width, height)`
  - `radian_to_degree` and `degree_to_radian`, which truncate to whole numbers
- `minirt.scene` holds `Scene` and the element classes `Camera`, `Ambient`, `Light`, `Sphere`, `Plane` and `Cylinder`, along with `SceneError`.
- `minirt.cli` holds `check_args(argv)`, `primary_rays(camera, width, height)` and `main(argv=None)`.
- `minirt.colornames` looks up X11 colour names:
  - `lookup_color(name)` ignores case and returns `0xRRGGBB`.
  - The name `none` gives -1.
  - An unknown name raises `KeyError`.
  - `COLOR_NAMES` is the full read-only mapping.
- `minirt.xpm` reads XPM images:
  - `xpm_file_to_image(path)` reads a file. It removes C comments and takes the quoted strings.
  - `xpm_to_image(lines)` and `parse_xpm(lines)` decode a table of strings.
  - Each returns an `XpmImage` whose pixels are `0xAARRGGBB` values. `XpmImage.pixel(x, y)` reads one of them.
  - The colour `None` becomes `0xFF000000`.
  - Malformed data raises `XpmError`.