"""Keyboard shortcuts: Space rolls, H holds, N starts a new game.

Streamlit has no key bindings, so a tiny script is injected with
``components.html``. It installs one ``keydown`` listener on the parent
document (guarded so reruns do not stack listeners) that clicks the button
with the matching label.
"""

from __future__ import annotations

import json

import streamlit.components.v1 as components

from dice_dash.ui.components.config_panel import NEW_GAME_LABEL
from dice_dash.ui.components.turn_controls import HOLD_LABEL, ROLL_LABEL

SHORTCUTS: dict[str, str] = {
    " ": ROLL_LABEL,
    "h": HOLD_LABEL,
    "n": NEW_GAME_LABEL,
}


def build_shortcuts_script(shortcuts: dict[str, str] | None = None) -> str:
    """Build the ``<script>`` that wires keys to button labels."""
    mapping = json.dumps(shortcuts or SHORTCUTS)
    return (
        "<script>\n"
        "(function() {\n"
        "  try {\n"
        "    var p = window.parent;\n"
        f"    p._dice_dash_keys = {mapping};\n"
        "    if (p._dice_dash_listening) return;\n"
        "    p._dice_dash_listening = true;\n"
        "    p.document.addEventListener('keydown', function(e) {\n"
        "      var tag = (e.target && e.target.tagName) || '';\n"
        "      if (['INPUT', 'SELECT', 'TEXTAREA'].indexOf(tag) >= 0) return;\n"
        "      var label = p._dice_dash_keys[e.key.toLowerCase()];\n"
        "      if (!label) return;\n"
        "      var buttons = p.document.querySelectorAll('button');\n"
        "      for (var i = 0; i < buttons.length; i++) {\n"
        "        var b = buttons[i];\n"
        "        if (!b.disabled && b.innerText.trim().indexOf(label) === 0) {\n"
        "          e.preventDefault();\n"
        "          b.click();\n"
        "          return;\n"
        "        }\n"
        "      }\n"
        "    });\n"
        "  } catch(err) { console.warn('Dice Dash shortcuts:', err); }\n"
        "})();\n"
        "</script>"
    )


def render_keyboard_shortcuts() -> None:
    """Inject the shortcut listener into the page."""
    components.html(build_shortcuts_script(), height=0)
