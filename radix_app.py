import os
import sys

import numpy as np
import pandas as pd
import streamlit as st

# Ensure project root is on sys.path (helps Streamlit find radix_core/radix_signals)
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from radix_core.radix_backend import TransformBackend
from radix_core.radix_errors import NotAPowerOfTwo, TransformError
from radix_core.radix_utils import format_complex, is_power_of_two
from radix_signals import (
    BACKEND_NAMES,
    SIGNAL_KINDS,
    generate_signal,
    spectrum_table,
    compare_backends,
)


# -----------------------------------------------------------------------------
# Streamlit page config
# -----------------------------------------------------------------------------
st.set_page_config(
    page_title="Radix Fourier Transform Demo",
    layout="wide",
)

st.title("Radix DFT / FFT Demo")

st.markdown(
    """
This app runs a sampled signal through the **Radix Core** transform engine.

- The **DFT** backend builds the full n×n transform matrix (O(n²), any length).
- The **FFT** backend splits even/odd samples recursively (O(n log n), power-of-two lengths only).
- The **numpy** backend is a reference using the same sign convention.
"""
)

# -----------------------------------------------------------------------------
# Sidebar controls
# -----------------------------------------------------------------------------
signal_kind = st.sidebar.selectbox("Signal", SIGNAL_KINDS, index=1)
n = st.sidebar.number_input("Length n", min_value=1, max_value=4096, value=256, step=1)
seed = st.sidebar.number_input("Seed (RANDOM only)", min_value=0, value=42, step=1)
backend_name = st.sidebar.selectbox("Backend", BACKEND_NAMES, index=0)

st.sidebar.caption(
    """
**fft** rejects lengths that are not a power of two.  
**dft** is slow above a few thousand samples.
"""
)

run_compare_btn = st.sidebar.button("Compare all backends")

x = generate_signal(signal_kind, int(n), seed=int(seed))

# -----------------------------------------------------------------------------
# Time domain
# -----------------------------------------------------------------------------
st.subheader("Time Domain")

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Samples", f"{len(x):,}")
with col2:
    st.metric("Mean", f"{x.mean():.4f}")
with col3:
    st.metric("Power of two", "yes" if is_power_of_two(len(x)) else "no")

st.line_chart(pd.DataFrame({"sample": x}), height=200)

# -----------------------------------------------------------------------------
# Frequency domain
# -----------------------------------------------------------------------------
st.subheader(f"Spectrum ({backend_name})")

backend = TransformBackend(backend_name)
try:
    table = spectrum_table(x, backend)
except NotAPowerOfTwo as exc:
    st.warning(f"{exc} Choose the dft or numpy backend, or a length of 2**k.")
    table = None

if table is not None:
    st.bar_chart(table.set_index("bin")[["magnitude"]], height=250)

    top_k = 1
    if len(table) > 1:
        top_k = st.slider("Show first K bins", 1, len(table), min(16, len(table)))
    shown = table.head(top_k).copy()
    S = shown["real"].to_numpy() + 1j * shown["imag"].to_numpy()
    shown["coefficient"] = [format_complex(z, 2) for z in S]
    st.dataframe(shown)

    # Round trip back to the time domain
    reconstructed = backend.inverse(table["real"].to_numpy() + 1j * table["imag"].to_numpy())
    err = float(np.max(np.abs(x - reconstructed)))
    st.write(f"Max round-trip error after inverse transform: **{err:.3e}**")

# -----------------------------------------------------------------------------
# Backend comparison
# -----------------------------------------------------------------------------
if run_compare_btn:
    st.subheader("Backend Comparison")
    st.caption(
        "max_abs_diff is measured against the numpy reference. "
        "A backend that cannot handle this length reports its error instead."
    )
    with st.spinner("Running all backends..."):
        try:
            cmp_df = compare_backends(x)
        except TransformError as exc:
            st.error(str(exc))
            cmp_df = None
    if cmp_df is not None:
        st.dataframe(cmp_df)
