"""
Huvudapplikation för Streamlit ruttplanerare
"""

import logging
import streamlit as st
from streamlit_folium import st_folium
from datetime import datetime

# Importera moduler
from config import LOG_LEVEL
from session import build_planner
from utils import create_gpx, format_cost_km, format_location, format_waypoints

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

def init_session_state():
    """Initiera session state"""
    if "planner" not in st.session_state:
        st.session_state.planner = build_planner()

def main():
    """Huvudfunktion för Streamlit-appen"""
    st.set_page_config(
        page_title="Ruttplanerare",
        page_icon="🗺️",
        layout="wide"
    )

    init_session_state()
    planner = st.session_state.planner

    st.title("Dynamisk A*-vägsökning")
    st.markdown("Hitta den effektivaste vägen mellan dina destinationer med A*-sökning")

    # Sidebar med vägpunkter och knappar
    with st.sidebar:
        st.header("Vägpunkter")
        st.markdown(format_waypoints(planner.waypoints.list()))

        st.divider()

        col_find, col_reset = st.columns(2)
        with col_find:
            find_button = st.button(
                "Hitta väg",
                type="primary",
                use_container_width=True,
                disabled=len(planner.waypoints) < 2
            )
        with col_reset:
            reset_button = st.button("Återställ", type="secondary", use_container_width=True)

        if find_button:
            with st.spinner("Söker väg..."):
                planner.find_path()

        if reset_button:
            planner.reset()

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Karta")

        map_state = st_folium(
            planner.viewport.render(),
            key="map",
            width=None,
            height=500,
            returned_objects=["last_clicked"]
        )

        # Nytt klick: lägg till vägpunkt och rita om kartan med markören
        clicked = (map_state or {}).get("last_clicked")
        if clicked and planner.handle_click(clicked["lat"], clicked["lng"]):
            st.rerun()

    with col2:
        st.subheader("Vägdetaljer")

        route = planner.result
        if route and route.path:
            st.metric("Stationer", f"{len(route.path)} stopp")
            st.metric("Total kostnad", format_cost_km(route.total_cost))

            for index, location in enumerate(route.path, 1):
                st.markdown(f"**{index}. {location.name}**  \n📍 {format_location(location)}")

            st.caption("Optimerad med A* och geografisk avståndsheuristik")

            st.divider()

            # GPX-export
            gpx_name = f"Rutt {datetime.now().strftime('%Y-%m-%d')}"
            st.download_button(
                label="Ladda ner GPX",
                data=create_gpx(route, gpx_name),
                file_name=f"{gpx_name.replace(' ', '_')}.gpx",
                mime="application/gpx+xml",
                use_container_width=True
            )
        else:
            st.info('Välj punkter på kartan och klicka på "Hitta väg" för att se vägdetaljer')

    planner.notifier.flush()

if __name__ == "__main__":
    main()
