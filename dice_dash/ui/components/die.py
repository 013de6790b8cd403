"""Die component — a CSS 3D cube turned to show the rolled face."""

from __future__ import annotations

import random

import streamlit as st

# Rotation that brings each face to the front of the cube.
FACE_ROTATIONS: dict[int, str] = {
    1: "rotateX(0deg) rotateY(0deg)",
    2: "rotateX(0deg) rotateY(-90deg)",
    3: "rotateX(0deg) rotateY(180deg)",
    4: "rotateX(0deg) rotateY(90deg)",
    5: "rotateX(-90deg) rotateY(0deg)",
    6: "rotateX(90deg) rotateY(0deg)",
}

# Pip positions on a 3x3 grid, numbered 1-9 left to right, top to bottom.
_PIPS: dict[int, tuple[int, ...]] = {
    1: (5,),
    2: (1, 9),
    3: (1, 5, 9),
    4: (1, 3, 7, 9),
    5: (1, 3, 5, 7, 9),
    6: (1, 3, 4, 6, 7, 9),
}


def spin_transform(value: int, rng: random.Random | None = None) -> str:
    """CSS transform landing on ``value`` after one or two extra turns per axis."""
    rng = rng or random.Random()
    extra_x = 360 * rng.randint(1, 2)
    extra_y = 360 * rng.randint(1, 2)
    return (
        f"translateZ(-1px) {FACE_ROTATIONS[value]} "
        f"rotateX({extra_x}deg) rotateY({extra_y}deg)"
    )


def rest_transform(value: int) -> str:
    return f"translateZ(-1px) {FACE_ROTATIONS[value]}"


def _face_html(value: int) -> str:
    pips = "".join(
        f'<span class="pip{" on" if cell in _PIPS[value] else ""}"></span>'
        for cell in range(1, 10)
    )
    return f'<div class="face face-{value}">{pips}</div>'


def build_die_html(value: int, rolling: bool, rng: random.Random | None = None) -> str:
    """Build the cube markup for a die showing ``value``.

    Args:
        value: Face to land on (1-6).
        rolling: Whether the die is mid-roll (adds the tumble animation).
        rng: Random source for the extra spin turns.
    """
    transform = spin_transform(value, rng) if rolling else rest_transform(value)
    classes = "cube rolling" if rolling else "cube"
    faces = "".join(_face_html(face) for face in range(1, 7))
    return (
        '<div class="die-stage" aria-label="Die showing '
        f'{value}">'
        f'<div class="{classes}" style="transform: {transform}">{faces}</div>'
        "</div>"
    )


def render_die(value: int, rolling: bool = False) -> None:
    """Render the die."""
    st.markdown(build_die_html(value, rolling), unsafe_allow_html=True)
