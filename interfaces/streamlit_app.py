"""
Streamlit web interface for the option calculator.

Interactive page with tabs for:
- Call and put prices with Greeks
- Call and put curves against strike
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from optcalc.core.greeks import calculate_greeks
from optcalc.core.pricer import price, price_sweep, strike_range
from optcalc.market.provider import YahooMarketDataProvider, apply_quote
from optcalc.utils import constants
from optcalc.utils.errors import PricingError
from optcalc.utils.types import OptionParameters

st.set_page_config(page_title="Option Calculator", layout="wide")

st.title("Option Calculator")
st.markdown("Black-Scholes-Merton call and put prices with continuous dividend yield")

# Sidebar parameters
st.sidebar.header("Option Parameters")
S = st.sidebar.number_input("Spot Price (S)", value=constants.DEFAULT_SPOT)
K = st.sidebar.number_input("Strike Price (K)", value=constants.DEFAULT_STRIKE)
T = st.sidebar.slider("Time to Maturity (years)", 0.01, 5.0, constants.DEFAULT_MATURITY)
v = st.sidebar.slider("Volatility (%)", 1.0, 200.0, constants.DEFAULT_VOLATILITY * 100) / 100
r = st.sidebar.slider("Risk-Free Rate (%)", -5.0, 20.0, constants.DEFAULT_RATE * 100) / 100
q = st.sidebar.slider("Dividend Yield (%)", 0.0, 10.0, constants.DEFAULT_DIVIDEND_YIELD * 100) / 100
ticker = st.sidebar.text_input("Live spot from ticker (optional)", value="")

try:
    params = OptionParameters(S=S, K=K, T=T, v=v, r=r, q=q)
    if ticker:
        quote = YahooMarketDataProvider().fetch(ticker)
        params = apply_quote(params, quote)
        st.sidebar.info(f"{quote.ticker}: spot {quote.price:.2f}, dividend yield {params.q:.2%}")
    result = price(params)
    sweep = price_sweep(params, strike_range(params.K))
    curve = sweep.to_frame()
except PricingError as e:
    st.error(f"Cannot price these inputs: {e}")
    st.stop()

tab1, tab2 = st.tabs(["Prices & Greeks", "Price vs Strike"])

with tab1:
    st.header("Option Valuation")

    col1, col2 = st.columns(2)
    col1.metric(label="Call Price", value=f"${result.call:.4f}")
    col2.metric(label="Put Price", value=f"${result.put:.4f}")

    st.subheader("Greeks")
    call_greeks = calculate_greeks(params, "call")
    put_greeks = calculate_greeks(params, "put")
    greek_names = ["delta", "gamma", "vega", "theta", "rho", "strike_delta"]
    greeks_df = pd.DataFrame({
        "Greek": ["Delta", "Gamma", "Vega", "Theta", "Rho", "dV/dK"],
        "Call": [f"{getattr(call_greeks, name):.6f}" for name in greek_names],
        "Put": [f"{getattr(put_greeks, name):.6f}" for name in greek_names],
        "Description": [
            "Price change per $1 spot move",
            "Delta change per $1 spot move",
            "Price change per unit vol move",
            "Price change per day",
            "Price change per unit rate move",
            "Price change per $1 strike move",
        ],
    })
    st.table(greeks_df)

with tab2:
    st.header("Call and Put Prices vs Strike")

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=curve["strike"], y=curve["call"], name="Call"))
    fig.add_trace(go.Scatter(x=curve["strike"], y=curve["put"], name="Put", line=dict(color="orange")))
    fig.add_vline(x=params.K, line_dash="dot")
    fig.update_layout(title="Option Price vs Strike", xaxis_title="Strike", yaxis_title="Price")
    st.plotly_chart(fig, use_container_width=True)
