"""
Shipping Cost Calculator Dashboard
==================================

Streamlit page comparing carrier costs for one shipment of pairs.

Run with:
    streamlit run quotes/dashboard/Calculator.py
"""

import streamlit as st

from carriers import ALL
from shared.cartons import MODE_CUSTOM, MODE_PRESET, carton_volume_cm3, resolve_carton
from shared.carriers import KIND_DIM, KIND_FORMULA
from quotes.config import (
    DEFAULT_CUSTOM_DIMS_CM,
    DEFAULT_FX_RATE,
    DEFAULT_PAIR_COUNT,
    DEFAULT_TOTAL_WEIGHT_KG,
    MAX_PAIRS,
    MIN_PAIRS,
    MISSING,
)
from quotes.formatting import money, quote_table, usd
from quotes.quote import quote
from quotes.version import VERSION

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="Shipping Cost Calculator",
    page_icon="📦",
    layout="wide",
)

st.title("Shipping Cost Calculator")
st.markdown(
    "Enter the **number of pairs** and the **total actual weight (kg)**. "
    "Choose a preset carton by pair count or switch to **Custom** to override "
    "**L×W×H**. DIM rules: "
    + ", ".join(f"**{c.name} /{c.dim_factor:g}**" for c in ALL if c.kind == KIND_DIM)
    + ". Billed weight rounds up to the next 0.5 kg."
)

# =============================================================================
# INPUTS
# =============================================================================

col1, col2, col3, col4 = st.columns(4)

with col1:
    pairs = st.number_input(
        f"Pairs ({MIN_PAIRS}–{MAX_PAIRS})",
        min_value=MIN_PAIRS,
        max_value=MAX_PAIRS,
        value=DEFAULT_PAIR_COUNT,
        step=1,
    )

with col2:
    total_weight = st.number_input(
        "Total actual weight (kg)",
        min_value=0.0,
        value=DEFAULT_TOTAL_WEIGHT_KG,
        step=0.01,
        format="%.2f",
    )

with col3:
    mode = st.selectbox("Carton mode", [MODE_PRESET, MODE_CUSTOM])

with col4:
    fx_rate = st.number_input(
        "FX (RMB per USD) — optional",
        min_value=0.0,
        value=DEFAULT_FX_RATE,
        step=0.0001,
        format="%.4f",
    )

custom_dims = None
if mode == MODE_CUSTOM:
    c1, c2, c3 = st.columns(3)
    length = c1.number_input("Length L (cm)", min_value=0.0, value=DEFAULT_CUSTOM_DIMS_CM[0], step=0.1)
    width = c2.number_input("Width W (cm)", min_value=0.0, value=DEFAULT_CUSTOM_DIMS_CM[1], step=0.1)
    height = c3.number_input("Height H (cm)", min_value=0.0, value=DEFAULT_CUSTOM_DIMS_CM[2], step=0.1)
    custom_dims = (length, width, height)

carton = resolve_carton(mode, int(pairs), custom_dims)
result = quote(float(total_weight), int(pairs), carton)

label = f"Carton for {int(pairs)} pair(s)" if mode == MODE_PRESET else "Current carton"
st.info(
    f"{label}: **{carton.length_cm:g} × {carton.width_cm:g} × {carton.height_cm:g} cm** "
    f"— Volume: **{carton_volume_cm3(carton):,.2f}** cm³"
)

# =============================================================================
# WEIGHTS
# =============================================================================

dim_rows = [r for r in result.rows if r.dim_weight_kg is not None]
for col, row in zip(st.columns(max(len(dim_rows), 1)), dim_rows):
    with col:
        st.markdown(
            f"DIM ({row.carrier}): **{row.dim_weight_kg:.2f} kg**  \n"
            f"Billed weight: **{row.billable_weight_kg:.1f} kg**"
        )

# =============================================================================
# RESULTS
# =============================================================================

st.markdown("---")
st.dataframe(quote_table(result, fx_rate), hide_index=True, use_container_width=True)

best = result.best
m1, m2, m3 = st.columns(3)
m1.metric("Best price", money(best.cost_rmb) if best else MISSING)
m2.metric("Carrier", best.carrier if best else MISSING)
if fx_rate > 0:
    m3.metric("Best price (USD)", usd(best.cost_rmb, fx_rate) if best else MISSING)

for c in ALL:
    if c.kind == KIND_FORMULA:
        st.caption(
            f"{c.name} uses average kg per pair: "
            f"total = pairs × ({c.rate_per_kg:g}×avg + {c.base_per_pair:g})."
        )
    elif c.max_billable_weight_kg is not None:
        st.caption(f"{c.name} caps at billed {c.max_billable_weight_kg:g} kg; beyond cap shows “{MISSING}”.")

st.caption(f"Calculator version {VERSION}")
