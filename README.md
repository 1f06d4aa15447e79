# sdfmaker

Turn grayscale images into 2D signed distance fields (SDFs) that game
engines can use for crisp text, icons and shape effects.

Each pixel of the result holds the distance to the nearest shape edge.
Distances are capped at a maximum distance, and the field is saved as an
8-bit grayscale image, with the range −max…+max mapped onto 0…255.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Process a single image:

```
sdfmaker process shape.png -o shape.sdf.png
```

If you leave out `-o/--output`, the result is written next to the input as
`<name>.sdf.png`.

Options of `process`:

- `-m/--method`: the algorithm to use. `jfa` is the default; it also accepts
  `jump-flooding`, `brute`, `brute-force`, `feature-aware` and
  `feature-aware-jfa` (case is ignored).
- `-t/--threshold`: pixels brighter than this value (0–255, default 128)
  count as inside the shape.
- `--max-distance`: the largest distance computed, in pixels (default 32).
- `--alpha`, `--normal`, `--ao`, `--curvature`: extra input channels. All
  channels must have the same dimensions. If `--alpha` is given, that image
  defines the shape in place of the main input.

On failure the command prints the error, and a suggestion where one is
known, to standard error and exits with status 1. Run without a command it
prints its help and exits with status 1.

## Library use

```python
from sdfmaker.channels import MultiChannelInput
from sdfmaker.algorithms import BruteForce, create_algorithm
from sdfmaker.shapes import circle_image

channels = MultiChannelInput.from_alpha(circle_image(64, 64, 16))

field = BruteForce(max_distance=32.0).process(channels)
print(field.get(32, 32))      # negative: inside the circle
print(field.get(0, 0))        # positive: outside the circle
field.save_as_image("circle_sdf.png")

jfa = create_algorithm("jfa", threshold=128, max_distance=16.0)
unsigned = jfa.process(channels)
```

`sdfmaker.cli.process_single(...)` does the same work as the `process`
command from Python: it loads the channels, generates the field, saves it and
returns an `SDF` holding the data and its metadata (algorithm name,
threshold, source file and processing time in seconds).

### Algorithms (`sdfmaker.algorithms`)

- `BruteForce` searches every pixel within the maximum distance for the
  nearest pixel on the other side of the threshold. The sign is negative
  inside the shape and positive outside.
- `JumpFloodingAlgorithm` spreads the nearest edge pixel across the image
  with jump flooding. It gives unsigned distances to the nearest edge pixel;
  pixels no edge reaches get the maximum distance.
- `FeatureAwareJFA` keeps `normal_influence` and `curvature_influence`
  settings, but at present produces the same result as jump flooding.

All three take `threshold` (0–255, default 128) and `max_distance`
(default 32.0). `create_algorithm(name, threshold, max_distance)` builds one
by name and raises `ProcessingFailedError` for an unknown name.

### Channels (`sdfmaker.channels`)

`MultiChannelInput` holds optional `alpha`, `normal`, `ao`, `curvature` and
`height` images plus named `custom_channels`. The first present channel in
that order is the primary channel the algorithms read. `validate()` checks
that at least one channel exists and that all have the same size.

`MultiChannelInput.auto_detect_channels(directory, basename)` loads channel
images named `<basename>_<suffix>.<ext>`, with extensions `png`, `jpg`,
`jpeg`, `tga` and `bmp`:

- alpha: `diffuse`, `alpha`, `mask`
- normal: `normal`, `norm`, `n`
- ao: `ao`, `ambient`, `occlusion`
- curvature: `curvature`, `curve`, `c`

`ChannelWeights` and `BlendMode` are stored with the input but are not yet
used by any algorithm.

### Fields (`sdfmaker.field`)

`SDFData` is a row-major grid with `get`, `set`, `get_normalized`,
`to_grayscale_image` and `save_as_image`. `analyze_regions()` finds the
8-connected regions of negative distance larger than ten pixels, with each
region's centre, pixel count and bounding box.

### Test shapes (`sdfmaker.shapes`)

`circle_image`, `square_image`, `ring_image` and `circle_and_corners_image`
build white-on-black test images; `write_test_images(directory)` writes a
256×256 circle and square as PNG files.

### Errors (`sdfmaker.errors`)

Failures raise subclasses of `SDFError`, such as `ValidationError`,
`DimensionMismatchError`, `ProcessingFailedError` and `ImageLoadError`
(an image could not be read or written). Where a fix is known,
`recovery_suggestion()` describes it.

## What it does not do

- There is no batch mode: each run of the command processes one image set.
- There is no graphical interface.
- Normal, AO and curvature channels are loaded and checked for size, but
  they do not yet change the distances produced.