from __future__ import annotations

import json

import streamlit as st

from rc5lab.config import load_settings
from rc5lab.cipher.block import Direction
from rc5lab.cipher.builder import build_cipher
from rc5lab.cipher.exceptions import RC5Error
from rc5lab.cipher.registry import ConfigRegistry
from rc5lab.cipher.spec import RC5Spec
from rc5lab.evaluation.evaluate import evaluate_full
from rc5lab.utils.repro import make_run_dir, write_json


st.set_page_config(page_title="RC5 Lab", layout="wide")

settings = load_settings()
registry = ConfigRegistry()

st.title("RC5 Lab - parameterized RC5-w/r/b block cipher")
st.caption("Research-only lab: key expansion, single-block encrypt/decrypt and local diffusion metrics.")

# ---------- Sidebar: configuration ----------
st.sidebar.header("Configuration")
preset_names = registry.names()
default_idx = preset_names.index(settings.default_config) if settings.default_config in preset_names else 0
preset = st.sidebar.selectbox("Preset", preset_names + ["Custom"], index=default_idx)

if preset == "Custom":
    word_bits = st.sidebar.selectbox("Word size w (bits)", [16, 32, 64], index=1)
    rounds = st.sidebar.slider("Rounds r", min_value=0, max_value=255, value=12, step=1)
    key_bytes = st.sidebar.slider("Key length b (bytes)", min_value=0, max_value=255, value=16, step=1)
    spec = RC5Spec(word_bits=int(word_bits), rounds=int(rounds), key_bytes=int(key_bytes))
else:
    spec = registry.get(preset)

st.sidebar.write(
    f"**{spec.name}**: block {spec.block_bytes} bytes, "
    f"table t={spec.table_size} words, key words c={spec.key_words}"
)

# ---------- Main: single-block transform ----------
st.subheader("1) Encrypt / decrypt one block")

col_a, col_b = st.columns(2)
with col_a:
    key_hex = st.text_input(f"Key ({spec.key_bytes} bytes, hex)", value="00" * spec.key_bytes)
    block_hex = st.text_input(f"Block ({spec.block_bytes} bytes, hex)", value="00" * spec.block_bytes)
    direction = st.radio("Direction", [d.value for d in Direction], horizontal=True)

with col_b:
    if st.button("Run transform"):
        try:
            with build_cipher(spec, bytes.fromhex(key_hex)) as cipher:
                out = cipher.transform_block(bytes.fromhex(block_hex), Direction(direction))
            st.code(out.hex(), language="text")
        except RC5Error as exc:
            st.error(str(exc))
        except ValueError as exc:
            st.error(f"Invalid hex input: {exc}")

# ---------- Evaluation ----------
st.subheader("2) Evaluate locally")

ev_col1, ev_col2, ev_col3 = st.columns(3)
with ev_col1:
    num_vectors = st.number_input("Roundtrip vectors", min_value=10, max_value=20000,
                                  value=int(settings.roundtrip_vectors), step=10)
with ev_col2:
    sac_trials = st.number_input("Avalanche / SAC trials (0 = skip)", min_value=0, max_value=2000,
                                 value=int(settings.sac_trials), step=10)
with ev_col3:
    sweep_keys = st.checkbox("Sweep key lengths 0..255", value=False)

if st.button("Run evaluation", key="btn_eval"):
    progress = st.progress(0.0)

    def _on_progress(stage: str, current: int, total: int) -> None:
        progress.progress(current / total, text=stage)

    with st.spinner("Running known answers, roundtrips and diffusion analysis…"):
        report = evaluate_full(
            spec,
            num_vectors=int(num_vectors),
            sac_trials=int(sac_trials),
            seed=int(settings.global_seed),
            sweep_keys=sweep_keys,
            progress_callback=_on_progress,
        )
    progress.progress(1.0, text="done")
    st.session_state["report"] = report.to_dict()
    st.session_state["report_summary"] = report.to_summary()

if st.session_state.get("report"):
    st.text(st.session_state["report_summary"])
    with st.expander("Raw report JSON", expanded=False):
        st.json(st.session_state["report"])

    if st.button("Save report to runs/"):
        run_dir = make_run_dir(settings.runs_dir, spec.name)
        write_json(run_dir / "report.json", st.session_state["report"])
        st.success(f"Saved to {run_dir / 'report.json'}")

    st.download_button(
        "Download report.json",
        data=json.dumps(st.session_state["report"], indent=2),
        file_name="report.json",
        mime="application/json",
    )
