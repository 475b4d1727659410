"""Country Pulse Dashboard."""

import sys
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import httpx  # noqa: E402
import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from pulse_client.weather import weather_emoji  # noqa: E402
from settings import API_TIMEOUT, PULSE_API_URL  # noqa: E402

st.set_page_config(page_title="Country Pulse", page_icon="🌍", layout="wide")

MAX_COLOR = "#F97316"
MIN_COLOR = "#3B82F6"


class PulseApiError(Exception):
    """API returned an error body."""


def _get(path: str):
    resp = httpx.get(f"{PULSE_API_URL}{path}", timeout=API_TIMEOUT * 3)
    if resp.status_code != 200:
        try:
            message = resp.json().get("error", resp.text)
        except ValueError:
            message = resp.text
        raise PulseApiError(message)
    return resp.json()


@st.cache_data(ttl=3600, show_spinner=False)
def get_countries() -> list[dict]:
    """Country list for the selector."""
    try:
        return _get("/countries")
    except (httpx.HTTPError, PulseApiError) as e:
        logger.warning("Country list unavailable: {}", e)
        return []


@st.cache_data(ttl=900, show_spinner=False)
def get_pulse(name: str) -> dict:
    """Country snapshot from the API."""
    logger.info("Loading pulse for {}", name)
    return _get(f"/country/{quote(name, safe='')}")


def format_day(date: str) -> str:
    try:
        return datetime.strptime(date, "%Y-%m-%d").strftime("%a, %b %d")
    except ValueError:
        return date


def forecast_chart(forecast: list[dict]) -> go.Figure:
    days = [format_day(d["date"]) for d in forecast]
    return go.Figure(
        [
            go.Scatter(
                x=days,
                y=[d["tempMax"] for d in forecast],
                name="Max",
                mode="lines+markers",
                line=dict(color=MAX_COLOR),
            ),
            go.Scatter(
                x=days,
                y=[d["tempMin"] for d in forecast],
                name="Min",
                mode="lines+markers",
                line=dict(color=MIN_COLOR),
            ),
        ]
    ).update_layout(yaxis_title="°C", margin=dict(t=20, b=40, l=40, r=20), height=300)


def country_card(country: dict):
    col1, col2 = st.columns([1, 5])
    with col1:
        if country["flag"]:
            st.image(country["flag"], width=96)
    with col2:
        st.subheader(country["name"])
        st.caption(f"{country['region']} • {country['capital']}")

    cols = st.columns(3)
    cols[0].metric("Capital", country["capital"])
    cols[1].metric("Region", country["region"])
    cols[2].metric("Population", f"{country['population']:,}")


def weather_card(data: dict):
    weather = data["weather"]
    col1, col2 = st.columns(2)

    with col1:
        st.subheader(f"Weather in {data['country']['capital']}")
        st.metric("Current conditions", f"{weather['temperature']:.1f}°C")
        st.write(f"{weather_emoji(weather['conditions'])} {weather['conditions']}")

    with col2:
        st.subheader("3-Day Forecast")
        if weather["forecast"]:
            st.plotly_chart(forecast_chart(weather["forecast"]), width="stretch")
        else:
            st.info("No forecast available.")


def news_list(data: dict):
    st.subheader("📰 Latest News")
    news = data["news"]
    if not news:
        st.info("No recent headlines available.")
        return

    for item in news:
        meta = " • ".join(p for p in (item["source"], item["publishedAt"]) if p)
        st.markdown(f"**[{item['title']}]({item['url']})**  \n{meta}")


def main():
    st.title("🌍 Country Pulse")
    st.markdown("*Explore countries with real-time weather and news*")

    countries = get_countries()
    names = [c["name"] for c in countries]

    if names:
        selected = st.sidebar.selectbox("Country", names, index=None, placeholder="Select a country...")
    else:
        selected = st.sidebar.text_input("Country", placeholder="Type a country name and press Enter...")

    if not selected:
        st.markdown("### 🌍")
        st.write("Select a country to view its information")
        return

    with st.spinner("Loading country data..."):
        try:
            data = get_pulse(selected.strip())
        except (httpx.HTTPError, PulseApiError) as e:
            st.error(f"Failed to load country data: {e}")
            return

    country_card(data["country"])
    st.divider()
    weather_card(data)
    st.divider()
    news_list(data)

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        "**Data Sources:** [REST Countries](https://restcountries.com) · "
        "[Open-Meteo](https://open-meteo.com) · [NewsData.io](https://newsdata.io)"
    )


if __name__ == "__main__":
    main()
