"""
Readers for the two UNLP dashboard pages (tower and field).

Row/column positions below follow the current page layout.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from bs4 import BeautifulSoup

from app.schemas.clima import (
    ClimaReport,
    DewPointOut,
    PressureOut,
    RainOut,
    TemperatureOut,
    WindChillOut,
    WindTextOut,
)
from app.services.html_extraction import (
    cell_text,
    find_section_table,
    parse_leading_number,
    select_text,
    text_or_none,
)
from app.services.normalizers import WindReading

logger = logging.getLogger(__name__)

# Labels as rendered in the `.nombre` element of each block
WIND_LABEL = "Viento"
TEMPERATURE_LABEL = "Temperatura"
HUMIDITY_LABEL = "Humedad"
DEW_POINT_LABEL = "Punto de rocío"
WIND_CHILL_LABEL = "Sensación térmica"
PRESSURE_LABEL = "Presión barométrica"
RAIN_LABEL = "Lluvia"

WIND_TABLE = "table.valores"
FIELD_TABLE = ".tabla"

# (row, col) inside the wind table
WIND_SPEED_CELL = (0, 1)
WIND_DIRECTION_CELL = (1, 1)
WIND_GUST_CELL = (3, 1)


def _wind_texts(torre: BeautifulSoup) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    table = find_section_table(torre, WIND_LABEL, WIND_TABLE)
    if table is None:
        return None, None, None
    return (
        cell_text(table, *WIND_SPEED_CELL),
        cell_text(table, *WIND_DIRECTION_CELL),
        cell_text(table, *WIND_GUST_CELL),
    )


def extract_wind(torre: BeautifulSoup) -> WindReading:
    """
    Read current speed, direction and max gust from the tower page.

    A missing wind section yields an empty reading rather than an error.
    """
    speed_text, direction_text, gust_text = _wind_texts(torre)

    reading = WindReading(
        speed=parse_leading_number(speed_text),
        gust=parse_leading_number(gust_text),
        direction=text_or_none(direction_text),
    )
    logger.info(
        "UNLP wind: speed=%s gust=%s direction=%s",
        reading.speed, reading.gust, reading.direction,
    )
    return reading


def extract_date_time(campo: BeautifulSoup) -> Tuple[Optional[str], Optional[str]]:
    """Date and time printed in the `FECHA:` / `HORA:` cells."""
    fecha = None
    hora = None
    for td in campo.select("div.variable table tr td"):
        text = td.get_text().strip()
        if text.startswith("FECHA:"):
            fecha = text_or_none(text[len("FECHA:"):])
        if text.startswith("HORA:"):
            hora = text_or_none(text[len("HORA:"):])
    return fecha, hora


def _daily_extremes(campo: BeautifulSoup, label: str) -> TemperatureOut:
    table = find_section_table(campo, label, FIELD_TABLE)
    return TemperatureOut(
        actual=text_or_none(select_text(table, ".actual")),
        minima_diaria=text_or_none(cell_text(table, 3, 1)),
        maxima_diaria=text_or_none(cell_text(table, 3, 2)),
        hora_minima=text_or_none(cell_text(table, 4, 1)),
        hora_maxima=text_or_none(cell_text(table, 4, 2)),
    )


def extract_clima_report(campo: BeautifulSoup, torre: BeautifulSoup) -> ClimaReport:
    """
    Build the full weather report: everything but wind comes from the field
    page, wind from the tower page.
    """
    fecha, hora = extract_date_time(campo)

    dew_point = find_section_table(campo, DEW_POINT_LABEL, FIELD_TABLE)
    wind_chill = find_section_table(campo, WIND_CHILL_LABEL, FIELD_TABLE)
    pressure = find_section_table(campo, PRESSURE_LABEL, FIELD_TABLE)
    rain = find_section_table(campo, RAIN_LABEL, FIELD_TABLE)

    speed_text, direction_text, gust_text = _wind_texts(torre)

    return ClimaReport(
        fecha=fecha,
        hora=hora,
        temperatura=_daily_extremes(campo, TEMPERATURE_LABEL),
        humedad=_daily_extremes(campo, HUMIDITY_LABEL),
        punto_rocio=DewPointOut(actual=text_or_none(select_text(dew_point, ".actual"))),
        sensacion_termica=WindChillOut(
            temperatura_y_viento=text_or_none(cell_text(wind_chill, 0, 2)),
            temperatura_y_humedad=text_or_none(cell_text(wind_chill, 2, 2)),
        ),
        presion=PressureOut(actual=text_or_none(select_text(pressure, ".actual"))),
        lluvia=RainOut(
            diaria=text_or_none(cell_text(rain, 0, 1)),
            intensidad=text_or_none(cell_text(rain, 1, 1)),
        ),
        viento=WindTextOut(
            velocidad_actual=text_or_none(speed_text),
            racha_maxima=text_or_none(gust_text),
            direccion=text_or_none(direction_text),
        ),
    )
