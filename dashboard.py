# dashboard.py
# streamlit run dashboard.py
import time

import matplotlib.pyplot as plt
import streamlit as st

import pong_engine as engine
from frames import render_rgb
from pong_engine import Config
from session import Session


st.set_page_config(layout="wide", page_title="Pong — Live View")
st.title("Pong — Live Simulation")

# Sidebar controls
st.sidebar.header("Session")
seed = st.sidebar.number_input("Seed", min_value=0, value=0, step=1)
reset_col, serve_col = st.sidebar.columns(2)
reset = reset_col.button("⟲ Reset")
serve = serve_col.button("● Serve")

st.sidebar.header("Playback")
steps = st.sidebar.slider("Ticks per refresh", 1, 30, 5, 1)
fps = st.sidebar.slider("Refreshes per second", 1, 30, 10, 1)
running = st.sidebar.toggle("Run", value=False)

cfg = Config(seed=int(seed))
if "session" not in st.session_state or reset or st.session_state.session.cfg != cfg:
    st.session_state.session = Session(cfg)
session = st.session_state.session

if serve:
    session.serve()

left, right = st.columns([3, 2])

with left:
    st.subheader("Game View")
    mode = st.radio("Left paddle", ["Autoplay", "Slider"], horizontal=True)
    target = None
    if mode == "Slider":
        target = st.slider("Paddle center", 0.0, float(cfg.height), float(cfg.height) / 2, 1.0)
    session.step(steps, target)
    snap = engine.snapshot(session.state)
    st.image(render_rgb(snap), channels="RGB", caption=f"tick {session.state.ticks}")

with right:
    st.subheader("Score")
    m1, m2, m3 = st.columns(3)
    m1.metric("Player", f"{snap.player_score}")
    m2.metric("Opponent", f"{snap.opponent_score}")
    m3.metric("Ticks", f"{session.state.ticks}")

    if len(session.ticks) > 1:
        fig, ax = plt.subplots()
        ax.step(session.ticks + [session.state.ticks], session.player + [session.player[-1]], where="post", label="player")
        ax.step(session.ticks + [session.state.ticks], session.opponent + [session.opponent[-1]], where="post", label="opponent")
        ax.set_xlabel("Tick"); ax.set_ylabel("Score")
        ax.legend()
        st.pyplot(fig, clear_figure=True)
    else:
        st.info("The chart appears after the first point is scored.")

st.caption("Toggle Run to animate. Every rerun of the page advances the game by the chosen number of ticks.")

if running:
    time.sleep(1.0 / fps)
    st.rerun()
