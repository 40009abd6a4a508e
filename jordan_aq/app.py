import streamlit as st

from jordan_aq.constants import Chart_Color, Default_Month, Default_Pollutant, Default_Year, Year_Range
from jordan_aq.create_map import chart_title, create_pollution_map, insight_text
from jordan_aq.errors import AirQualityError
from jordan_aq.models import POLLUTANT_CONFIGS, Pollutant, SelectionState
from jordan_aq.pipeline import SelectionDispatcher, create_pipeline


@st.cache_resource
def get_pipeline():
    return create_pipeline()


@st.cache_resource
def get_dispatcher():
    return SelectionDispatcher(get_pipeline())


def create_air_quality_dashboard():
    st.set_page_config(layout="wide")
    st.title("🌫️ Jordan Air Quality Tracker")
    st.markdown("Sentinel-5P Satellite Analysis")

    st.sidebar.title("Options")
    pollutant = st.sidebar.selectbox(
        "Select Air Pollutant:",
        options=list(Pollutant),
        index=list(Pollutant).index(Pollutant(Default_Pollutant)),
        format_func=lambda p: POLLUTANT_CONFIGS[p].label,
    )
    year = st.sidebar.slider("Select Year:", min_value=Year_Range[0], max_value=Year_Range[1], value=Default_Year)
    month = st.sidebar.slider("Select Month:", min_value=1, max_value=12, value=Default_Month)
    state = SelectionState.create(pollutant, year, month)

    try:
        pipeline = get_pipeline()
        raster, result = pipeline.on_selection_changed(state)
        Map = create_pollution_map(raster, pipeline.region)
    except AirQualityError as e:
        st.error(str(e))
        return

    Map.to_streamlit()

    st.sidebar.subheader("📊 Statistical Report")
    st.sidebar.caption(chart_title(state.pollutant))
    if result.has_data:
        st.sidebar.bar_chart(result.to_frame(), x="City", y="Pollution", color=Chart_Color)
    else:
        st.sidebar.info("No observations for the selected month.")
    st.sidebar.caption(f"_{insight_text(state.pollutant)}_")

    if st.sidebar.button("💾 Export Map (GeoTIFF) to Drive", use_container_width=True):
        get_dispatcher().export(raster)
        st.sidebar.success("🚀 Export queued: check the Tasks tab in the Earth Engine console.")


if __name__ == "__main__":
    create_air_quality_dashboard()
