"""Streamlit host for grid_sokoban.

Run with ``streamlit run app.py``. Typed keys (WASD) and the arrow buttons
are appended to the state's input queue; every rerun ticks once per queued
key and redraws the board.
"""

from collections import Counter
from typing import List

import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from grid_sokoban.actions import Action
from grid_sokoban.config import (
    EngineConfig,
    configure_logging,
    make_renderer,
    make_state,
)
from grid_sokoban.errors import LevelLoadError
from grid_sokoban.renderer.texture import TextureRenderer
from grid_sokoban.state import State
from grid_sokoban.step import run
from grid_sokoban.systems.input import enqueue_key, enqueue_keys


def reset_game(config: EngineConfig) -> None:
    try:
        st.session_state["state"] = make_state(config)
    except LevelLoadError as e:
        st.error(f"Could not load level: {e}")
        st.stop()
    st.session_state["key_input_prev"] = ""


def get_typed_keys() -> List[str]:
    """Characters typed into the key box since the previous rerun."""
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="key_input",
            placeholder="Type: WASD to move",
        )
        or ""
    )
    prev_value: str = st.session_state.get("key_input_prev", "")
    st.session_state["key_input_prev"] = value
    if value == prev_value:
        return []
    return list((Counter(value) - Counter(prev_value)).elements())


def queue_key(key: str) -> None:
    st.session_state["state"] = enqueue_key(st.session_state["state"], key)


st.set_page_config(page_title="Sokoban")

if "config" not in st.session_state:
    st.session_state["config"] = EngineConfig.from_env()
    configure_logging(st.session_state["config"])
config: EngineConfig = st.session_state["config"]

if "state" not in st.session_state:
    reset_game(config)
if "renderer" not in st.session_state:
    st.session_state["renderer"] = make_renderer(config)

board_col, control_col = st.columns([0.7, 0.3])

with control_col:
    if st.button("Reset", key="reset_btn", use_container_width=True):
        reset_game(config)

    _, up_col, _ = st.columns([1, 1, 1])
    with up_col:
        st.button("⬆️", key="up_btn", on_click=queue_key, args=(Action.UP.value,))
    left_col, down_col, right_col = st.columns([1, 1, 1])
    with left_col:
        st.button("⬅️", key="left_btn", on_click=queue_key, args=(Action.LEFT.value,))
    with down_col:
        st.button("⬇️", key="down_btn", on_click=queue_key, args=(Action.DOWN.value,))
    with right_col:
        st.button("➡️", key="right_btn", on_click=queue_key, args=(Action.RIGHT.value,))

    typed = get_typed_keys()
    if typed:
        st.session_state["state"] = enqueue_keys(st.session_state["state"], typed)

st.session_state["state"] = run(st.session_state["state"])
state: State = st.session_state["state"]
renderer: TextureRenderer = st.session_state["renderer"]

with board_col:
    st.image(renderer.render(state), use_container_width=True)

with control_col:
    st.metric("Moves", state.moves_count)
    if state.won:
        st.success(state.message or "Solved", icon="🏆")
    else:
        st.info("Playing", icon="📦")

with st.expander("State", expanded=False):
    st.json(thaw(state.description), expanded=False)
