import streamlit as st
import pandas as pd

from wine_dashboard.api_client import check_health, resolve_prediction_url
from wine_dashboard.controller import PredictionController
from wine_dashboard.features import (
    CONTINUOUS_FEATURES,
    FEATURE_RANGES,
    RED,
    WHITE,
    format_value,
)
from wine_dashboard.outcome import Failed, Succeeded
from wine_dashboard.settings import configure_logging, settings

configure_logging()

st.set_page_config(page_title="Wine Quality Predictor", layout="centered")
st.title("Wine Quality Predictor")

# One controller per browser session
if "controller" not in st.session_state:
    st.session_state.controller = PredictionController()
controller: PredictionController = st.session_state.controller


@st.cache_data(ttl=30)
def cached_health():
    return check_health()


with st.sidebar:
    st.header("Prediction Endpoint")
    st.code(resolve_prediction_url(), language=None)
    if settings.prediction_url.startswith(("http://", "https://")):
        st.caption("Calling the prediction service directly.")
    else:
        try:
            health = cached_health()
            st.success(f"Gateway is up (upstream: {health.get('upstream_url', '?')})")
        except Exception as e:
            st.warning("Gateway is not reachable yet. Is the API container running?")
            st.caption(str(e))

left, right = st.columns(2, gap="large")
for i, name in enumerate(CONTINUOUS_FEATURES):
    rng = FEATURE_RANGES[name]
    current = controller.get_feature(name)
    with left if i % 2 == 0 else right:
        value = st.slider(
            rng.label,
            min_value=float(rng.min),
            max_value=float(rng.max),
            value=float(current),
            step=float(rng.step),
            format=f"%.{rng.decimals}f",
            key=f"slider_{name}",
        )
    controller.set_feature(name, value)

with left if len(CONTINUOUS_FEATURES) % 2 == 0 else right:
    wine_type = st.radio(
        FEATURE_RANGES["type_white"].label,
        options=[RED, WHITE],
        index=int(controller.get_feature("type_white")),
        format_func=lambda v: format_value("type_white", v),
        horizontal=True,
        key="type_white",
    )
controller.set_type(wine_type)

st.button(
    "Predicting..." if controller.is_pending else "Predict Quality",
    disabled=controller.is_pending,
    type="primary",
    on_click=controller.begin,
)

# The click callback only moves to Pending; the request goes out after the
# disabled button has been drawn.
if controller.is_pending:
    with st.spinner("Predicting..."):
        controller.resolve()
    if not controller.is_pending:
        st.rerun()

outcome = controller.outcome
if isinstance(outcome, Failed):
    st.error(f"Error: {outcome.message}")
elif isinstance(outcome, Succeeded):
    st.subheader("Predicted Quality")
    st.metric("Predicted Quality", f"{outcome.value:.1f}", label_visibility="collapsed")
    st.caption("(Model Prediction)")
else:
    st.info("Adjust the sliders and press **Predict Quality**.")

with st.expander("Current inputs"):
    df = pd.DataFrame([controller.payload()])
    st.dataframe(df, hide_index=True, use_container_width=True)
