"""Window, shaders and render loop of the model viewer."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from .controls import Key, RenderConfig, process_input
from .linalg import Mat4, identity, perspective, rotate, translate
from .objloader import VERTEX_STRIDE, MeshBuffers, ObjParseError, load_obj
from .textfile import FileReadError, read_file
from .texture import PpmImage, TextureError, load_ppm

TEXTURE_PATH = "ressources/textures/cat.ppm"
VERTEX_SHADER_PATH = "ressources/shaders/vertex_ultimate.glsl"
FRAGMENT_SHADER_PATH = "ressources/shaders/fragment_ultimate.glsl"

ROTATION_AXIS = (0.0, 1.0, 0.0)
ROTATION_SPEED = 0.5
Z_NEAR = 0.1
Z_FAR = 10000.0
CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)
WINDOW_TITLE = "SCOP"

USAGE = (
    "usage: scopview obj_filename\n"
    "\tobj_filename: file name of the 3d model to show."
)


class ShaderError(Exception):
    """Raised when a shader cannot be read, compiled or linked."""


class UsageError(Exception):
    """Raised when the command line is malformed."""


def model_view_projection(
    elapsed: float, camera_pos: Sequence[float], config: RenderConfig
) -> tuple[Mat4, Mat4, Mat4]:
    """Return the model, view and projection matrices for one frame.

    The model turns around the y axis with time; the aspect ratio is the
    integer quotient of the configured width and height.
    """
    model = rotate(identity(1.0), elapsed * ROTATION_SPEED, ROTATION_AXIS)
    view = translate(identity(1.0), camera_pos)
    ratio = config.width // config.height
    proj = perspective(config.fov, ratio, Z_NEAR, Z_FAR)
    return model, view, proj


def parse_args(argv: Sequence[str]) -> str:
    """Return the model path from the command line arguments."""
    if len(argv) != 1:
        raise UsageError(USAGE)
    return argv[0]


def _read_shader(path: str, kind: str) -> str:
    try:
        return read_file(path)
    except FileReadError as exc:
        raise ShaderError(f"cannot read {kind} shader {path}") from exc


class Viewer:
    """An OpenGL window showing one textured, turning model."""

    def __init__(
        self,
        mesh: MeshBuffers,
        image: PpmImage,
        config: RenderConfig | None = None,
        vertex_path: str = VERTEX_SHADER_PATH,
        fragment_path: str = FRAGMENT_SHADER_PATH,
    ) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram
        from pyglet.window import key

        self._pyglet = pyglet
        self._gl = gl
        self.config = config if config is not None else RenderConfig()
        self.camera_pos: tuple[float, float, float] = (0.0, 0.0, float(mesh.camera_z))
        self._program = None
        self._texture = None
        self._vertex_list = None
        self._closed = False

        vertex_src = _read_shader(vertex_path, "vertex")
        fragment_src = _read_shader(fragment_path, "fragment")

        gl_config = gl.Config(
            major_version=4,
            minor_version=0,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        try:
            self.window = pyglet.window.Window(
                self.config.width,
                self.config.height,
                WINDOW_TITLE,
                config=gl_config,
                resizable=True,
            )
        except (pyglet.window.NoSuchConfigException, gl.ContextException) as exc:
            raise RuntimeError(f"failed to create window: {exc}") from exc

        try:
            try:
                vertex = Shader(vertex_src, "vertex")
            except ShaderException as exc:
                raise ShaderError(f"vertex shader compilation failed:\n{exc}") from exc
            try:
                fragment = Shader(fragment_src, "fragment")
            except ShaderException as exc:
                vertex.delete()
                raise ShaderError(f"fragment shader compilation failed:\n{exc}") from exc
            try:
                self._program = ShaderProgram(vertex, fragment)
            except ShaderException as exc:
                raise ShaderError(f"shader program linking failed:\n{exc}") from exc
            finally:
                vertex.delete()
                fragment.delete()

            self._upload_mesh(mesh)
            self._upload_texture(image)
        except Exception:
            self.close()
            raise

        self._keys = key.KeyStateHandler()
        self._key_codes = {
            Key.ESCAPE: key.ESCAPE,
            Key.COMMA: key.COMMA,
            Key.T: key.T,
            Key.LEFT: key.LEFT,
            Key.RIGHT: key.RIGHT,
            Key.UP: key.UP,
            Key.DOWN: key.DOWN,
            Key.RIGHT_SHIFT: key.RSHIFT,
            Key.RIGHT_CONTROL: key.RCTRL,
        }
        self.window.push_handlers(self._keys)
        self.window.push_handlers(on_resize=self._on_resize)
        gl.glEnable(gl.GL_DEPTH_TEST)

    def _upload_mesh(self, mesh: MeshBuffers) -> None:
        gl = self._gl
        vertices = mesh.vertices
        starts = range(0, len(vertices), VERTEX_STRIDE)
        positions = [value for start in starts for value in vertices[start:start + 3]]
        tex_coords = [
            value for start in starts for value in vertices[start + 3:start + VERTEX_STRIDE]
        ]
        by_location = {
            info["location"]: name for name, info in self._program.attributes.items()
        }
        data = {}
        if 0 in by_location:
            data[by_location[0]] = ("f", positions)
        if 1 in by_location:
            data[by_location[1]] = ("f", tex_coords)
        self._vertex_list = self._program.vertex_list_indexed(
            mesh.vertex_count, gl.GL_TRIANGLES, list(mesh.indices), **data
        )

    def _upload_texture(self, image: PpmImage) -> None:
        gl = self._gl
        data = self._pyglet.image.ImageData(
            image.width, image.height, "RGB", image.data, pitch=image.width * 3
        )
        self._texture = data.get_texture()
        target = self._texture.target
        gl.glBindTexture(target, self._texture.id)
        for param, value in (
            (gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT),
            (gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT),
            (gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR),
            (gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR),
        ):
            gl.glTexParameteri(target, param, value)
        gl.glGenerateMipmap(target)

    def _on_resize(self, width: int, height: int):
        fb_width, fb_height = self.window.get_framebuffer_size()
        self._gl.glViewport(0, 0, fb_width, fb_height)
        return self._pyglet.event.EVENT_HANDLED

    def _pressed(self) -> set[Key]:
        return {name for name, code in self._key_codes.items() if self._keys[code]}

    def _set_uniform(self, name: str, value) -> None:
        if name in self._program.uniforms:
            self._program[name] = value

    def _render(self, elapsed: float) -> None:
        gl = self._gl
        model, view, proj = model_view_projection(elapsed, self.camera_pos, self.config)
        self.window.switch_to()
        gl.glPolygonMode(
            gl.GL_FRONT_AND_BACK, gl.GL_LINE if self.config.wireframe else gl.GL_FILL
        )
        gl.glClearColor(*CLEAR_COLOR)
        self.window.clear()
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(self._texture.target, self._texture.id)
        self._program.use()
        self._set_uniform("model", model)
        self._set_uniform("view", view)
        self._set_uniform("projection", proj)
        self._set_uniform("alpha", self.config.current_alpha)
        self._vertex_list.draw(gl.GL_TRIANGLES)

    def run(self) -> None:
        """Process input and draw frames until the window is closed."""
        start = time.monotonic()
        last = 0.0
        try:
            while not self.window.has_exit:
                self._pyglet.clock.tick()
                self.window.dispatch_events()
                if self.window.has_exit:
                    break
                now = time.monotonic() - start
                self.camera_pos, should_close = process_input(
                    self._pressed(), self.camera_pos, self.config, now - last
                )
                last = now
                self._render(now)
                self.window.flip()
                if should_close:
                    break
        finally:
            self.close()

    def close(self) -> None:
        """Release the GL objects and close the window."""
        if self._closed:
            return
        self._closed = True
        if self._vertex_list is not None:
            self._vertex_list.delete()
        if self._program is not None:
            self._program.delete()
        if self._texture is not None:
            self._texture.delete()
        self.window.close()

    def __enter__(self) -> Viewer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Show the model named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = parse_args(args)
        mesh = load_obj(path)
        image = load_ppm(TEXTURE_PATH)
        viewer = Viewer(mesh, image)
    except (
        UsageError,
        FileReadError,
        ObjParseError,
        TextureError,
        ShaderError,
        RuntimeError,
    ) as exc:
        print(exc, file=sys.stderr)
        return -1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())