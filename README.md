# scopview

A small viewer for 3D models stored as Wavefront OBJ files. The model is
centred, placed in front of the camera, turned slowly around its vertical
axis and drawn with a PPM texture that can be faded in and out.

## Installing

    pip install .

This pulls in `pyglet`, which provides the window and the OpenGL 4.0
context.

## Running

    scopview path/to/model.obj

The command takes exactly one argument; anything else prints a usage
message. The viewer reads its shaders and texture from paths relative to
the working directory:

- `ressources/shaders/vertex_ultimate.glsl`
- `ressources/shaders/fragment_ultimate.glsl`
- `ressources/textures/cat.ppm` (ASCII `P3` format only)

If the model, the shaders or the texture cannot be loaded, or the window
cannot be created, the error is printed to standard error and the command
exits with a non-zero status.

### What the shaders receive

- vertex attribute at location 0: the position (three floats);
- vertex attribute at location 1: the texture coordinates (two floats);
- uniforms `model`, `view` and `projection` (4×4 matrices) and `alpha`
  (a float between 0 and 1 driven by the `T` key).

Uniforms or attributes a shader does not declare are simply not set.

## Controls

| Key             | Action                                      |
|-----------------|---------------------------------------------|
| Escape          | close the window                            |
| `,`             | toggle wireframe / filled polygons          |
| `T`             | fade `alpha` towards 1, or back towards 0   |
| Left / Right    | move the camera along X                     |
| Up / Down       | move the camera along Y                     |
| Right Shift     | move the camera along +Z                    |
| Right Control   | move the camera along −Z                    |

Camera motion is scaled by the time elapsed between frames. Holding a
toggle key toggles only once.

## Supported OBJ content

Only `v x y z` vertex lines and `f a b c` or `f a b c d` face lines are
read; quads are split into two triangles, placed after all triangles.
Every other line (`vt`, `vn`, `o`, comments, …) is ignored. In a face
reference such as `7/2/3` only the leading vertex index is used. A
malformed vertex or face line, or a model with no vertices or no faces,
stops loading with an `ObjParseError`.

Texture coordinates in the file are not used: they are derived from each
vertex's position within the model's bounding box (Z and Y), and the
camera is placed at 1.5 times the model's largest extent.

## Using it as a library

The pieces work without a window:

- `scopview.objloader.load_obj(path)` returns `MeshBuffers` (a flat vertex
  list of five floats per vertex, 0-based triangle indices and a camera
  distance). `parse_obj`, `build_buffers` and `recenter` expose the
  individual steps.
- `scopview.texture.load_ppm(path)` and `parse_ppm(text)` return a
  `PpmImage` with samples scaled to 0–255 and rows stored bottom first;
  errors raise `TextureError`.
- `scopview.textfile` has `read_file`, `next_line` and `iter_words`, which
  skips `#` comments.
- `scopview.linalg` has the 4×4 matrix helpers on flat 16-element lists:
  `identity`, `mat4_mult`, `translate`, `rotate`, `scale`, `perspective`,
  plus `normalize` and `apply_mat4`.
- `scopview.controls.process_input(pressed, camera_pos, config,
  delta_time)` applies a set of pressed `Key`s to a camera position and a
  `RenderConfig`, returning the new position and whether to close.
- `scopview.viewer.model_view_projection` computes the three matrices for
  a frame; `Viewer(mesh, image)` opens the window and `Viewer.run()` runs
  it.

## What it does not do

The package ships no shaders and no texture; the files listed under
*Running* must be provided. Binary (`P6`) PPM images are rejected, and
OBJ materials, normals and file-supplied texture coordinates are not read.