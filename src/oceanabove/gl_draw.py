from __future__ import annotations

import ctypes
import logging

import numpy as np
from OpenGL.GL.shaders import compileProgram, compileShader
from OpenGL.GL import (
    GL_ARRAY_BUFFER,
    GL_BACK,
    GL_CCW,
    GL_COLOR_BUFFER_BIT,
    GL_CULL_FACE,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_FLOAT,
    GL_FRAGMENT_SHADER,
    GL_LESS,
    GL_RENDERER,
    GL_STATIC_DRAW,
    GL_TRIANGLES,
    GL_VERSION,
    GL_VERTEX_SHADER,
    glBindBuffer,
    glBufferData,
    glClear,
    glClearColor,
    glCullFace,
    glDeleteBuffers,
    glDepthFunc,
    glDisableVertexAttribArray,
    glDrawArrays,
    glEnable,
    glEnableVertexAttribArray,
    glFrontFace,
    glGenBuffers,
    glGetAttribLocation,
    glGetString,
    glGetUniformLocation,
    glUniformMatrix4fv,
    glUseProgram,
    glVertexAttribPointer,
    glViewport,
)

from . import config
from .backend import Slot

logger = logging.getLogger(__name__)

_VERT_SRC = """
#version 120
attribute vec3 vertex_position;
uniform mat4 model;
uniform mat4 view;
uniform mat4 proj;
varying vec3 vShade;
void main() {
    vShade = vertex_position;
    gl_Position = proj * view * model * vec4(vertex_position, 1.0);
}
"""

_FRAG_SRC = """
#version 120
varying vec3 vShade;
void main() {
    // Corner-based tint so neighbouring faces read differently.
    gl_FragColor = vec4(0.35 + 0.5 * (vShade + 0.5), 1.0);
}
"""


def _gl_str(name: int) -> str:
    raw = glGetString(name)
    return raw.decode(errors="replace") if raw else "?"


class GLBackend:
    """Upload sink and draw submission on the current OpenGL context.

    Needs a live context (pygame.display.set_mode with OPENGL) before
    construction. Shader compile or link failures raise from PyOpenGL.
    """

    def __init__(self, width: int = config.WIDTH, height: int = config.HEIGHT) -> None:
        logger.info("OpenGL %s", _gl_str(GL_VERSION))
        logger.info("Renderer %s", _gl_str(GL_RENDERER))

        glViewport(0, 0, width, height)
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LESS)
        glEnable(GL_CULL_FACE)
        glCullFace(GL_BACK)
        glFrontFace(GL_CCW)
        r, g, b = config.CLEAR_COLOR
        glClearColor(r, g, b, 1.0)

        self._prog = compileProgram(
            compileShader(_VERT_SRC, GL_VERTEX_SHADER),
            compileShader(_FRAG_SRC, GL_FRAGMENT_SHADER),
        )
        glUseProgram(self._prog)
        self._uniforms = {slot: glGetUniformLocation(self._prog, slot.value) for slot in Slot}
        self._loc_pos = glGetAttribLocation(self._prog, "vertex_position")
        self._buffers: dict[int, int] = {}

    def clear(self) -> None:
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def upload(self, slot: Slot, matrix: np.ndarray) -> None:
        loc = self._uniforms[slot]
        if loc < 0:
            # Optimised out of the program; nothing to set.
            return
        glUniformMatrix4fv(loc, 1, False, np.asarray(matrix, dtype=np.float32))

    def _ensure_buffer(self, mesh) -> int:
        vbo = self._buffers.get(id(mesh))
        if vbo is not None:
            return vbo
        data = np.ascontiguousarray(mesh.vertices, dtype=np.float32)
        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, data.nbytes, data, GL_STATIC_DRAW)
        glBindBuffer(GL_ARRAY_BUFFER, 0)
        self._buffers[id(mesh)] = vbo
        logger.debug("Uploaded %r as buffer %d", mesh, vbo)
        return vbo

    def draw(self, mesh) -> None:
        vbo = self._ensure_buffer(mesh)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        if self._loc_pos >= 0:
            glEnableVertexAttribArray(self._loc_pos)
            glVertexAttribPointer(self._loc_pos, 3, GL_FLOAT, False, 3 * 4, ctypes.c_void_p(0))
        glDrawArrays(GL_TRIANGLES, 0, mesh.vertex_count)
        if self._loc_pos >= 0:
            glDisableVertexAttribArray(self._loc_pos)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

    def release(self) -> None:
        if self._buffers:
            glDeleteBuffers(len(self._buffers), list(self._buffers.values()))
            self._buffers.clear()
        glUseProgram(0)
