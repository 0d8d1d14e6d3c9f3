"""
Map Visualization Module for DisasterWatch

Renders report markers on an interactive Leaflet map using Folium, with the
selected basemap, a popup per report, a title box and a legend.
"""

import html
import logging
from typing import Optional, Dict, List, Tuple, Sequence

import folium

from disasterwatch.core.constants import DISASTER_STYLES, LEGEND_LABELS
from disasterwatch.core.config import settings
from disasterwatch.visualization.coordinates import format_coordinates
from disasterwatch.visualization.map_view import Basemap, DEFAULT_BASEMAP

logger = logging.getLogger(__name__)

MARKER_FILL_OPACITY = 0.5
MARKER_WEIGHT = 2


def legend_entries() -> List[Tuple[str, str]]:
    """Legend as (color, label) pairs."""
    return [(DISASTER_STYLES[stem]["color"], label) for stem, label in LEGEND_LABELS]


def build_popup_html(report, center: Optional[Tuple[float, float]] = None) -> str:
    """Popup body: image (or placeholder), category, note, location and coordinates."""
    coordinates = ""
    if center is not None:
        coordinates = f'<p style="margin: 2px 0 0 0; font-size: 10px; color: #9ca3af;">{format_coordinates(*center)}</p>'

    return f"""
    <div style="font-family: Arial; text-align: center; min-width: 180px;">
        <img src="{html.escape(report.image_or_placeholder, quote=True)}" alt="report"
             style="width: 160px; height: 96px; object-fit: cover; border-radius: 6px;">
        <p style="margin: 6px 0 2px 0; font-weight: bold; color: #b91c1c;">
            {html.escape(report.category)}
        </p>
        <p style="margin: 2px 0; font-size: 12px; color: #374151;">{html.escape(report.note)}</p>
        <p style="margin: 4px 0 0 0; font-size: 11px; color: #6b7280; font-style: italic;">
            {html.escape(report.location)}
        </p>
        {coordinates}
    </div>
    """


def create_report_map(
    markers: Sequence,
    reports: Optional[Dict[str, object]] = None,
    basemap: Basemap = DEFAULT_BASEMAP,
    center: Optional[Tuple[float, float]] = None,
    zoom: Optional[int] = None,
    title: str = "DisasterWatch - Live Reports",
    show_legend: bool = True,
) -> folium.Map:
    """
    Create an interactive map with report markers.

    Args:
        markers: MarkerDescriptor objects
        reports: Reports by id, used for popups
        basemap: Background tiles
        center: Map center (lat, lon)
        zoom: Initial zoom level (1-18)
        title: Map title
        show_legend: Include the disaster type legend

    Returns:
        Folium Map object
    """
    reports = reports or {}
    center = center or settings.map_center
    zoom = zoom or settings.map_default_zoom

    report_map = folium.Map(
        location=list(center),
        zoom_start=zoom,
        tiles=None,
    )

    folium.TileLayer(
        tiles=basemap.url,
        name=basemap.tiles["name"],
        attr=basemap.attribution,
    ).add_to(report_map)

    marker_group = folium.FeatureGroup(name="Reports")

    for marker in markers:
        report = reports.get(marker.id)
        popup = None
        if report is not None:
            popup = folium.Popup(build_popup_html(report, marker.center), max_width=300)

        # folium.Circle radius is in meters, matching the style table
        folium.Circle(
            location=list(marker.center),
            radius=marker.radius,
            popup=popup,
            color=marker.color,
            fill=True,
            fill_color=marker.fill,
            fill_opacity=MARKER_FILL_OPACITY,
            weight=MARKER_WEIGHT,
        ).add_to(marker_group)

    marker_group.add_to(report_map)

    title_html = f'''
    <div style="position: fixed;
                top: 10px; left: 50px;
                background-color: rgba(31,41,55,0.9);
                padding: 10px 20px;
                border-radius: 5px;
                z-index: 9999;
                font-family: Arial;">
        <h3 style="margin: 0; color: white;">{html.escape(title)}</h3>
        <p style="margin: 5px 0 0 0; color: #ccc; font-size: 12px;">
            {len(markers)} reports on map
        </p>
    </div>
    '''
    report_map.get_root().html.add_child(folium.Element(title_html))

    if show_legend:
        rows = "".join(
            f'<span style="color: {color};">●</span> {label}<br>'
            for color, label in legend_entries()
        )
        legend_html = f'''
        <div style="position: fixed;
                    bottom: 30px; left: 30px;
                    background-color: rgba(31,41,55,0.9);
                    padding: 10px;
                    border-radius: 5px;
                    z-index: 9999;
                    font-family: Arial;
                    font-size: 12px;
                    color: white;">
            <b>Legend</b><br>
            {rows}
        </div>
        '''
        report_map.get_root().html.add_child(folium.Element(legend_html))

    logger.info(f"Created map with {len(markers)} markers on {basemap.value} basemap")
    return report_map


def save_report_map(report_map: folium.Map, output_path: str = "disaster_reports.html") -> str:
    """
    Save a rendered map as a standalone HTML file.

    Args:
        report_map: Map from create_report_map
        output_path: Path to save HTML file

    Returns:
        Path to saved file
    """
    report_map.save(output_path)
    logger.info(f"Map saved to {output_path}")
    return output_path
