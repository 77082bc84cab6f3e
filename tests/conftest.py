from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.core.config import settings
from app.core.dependencies import get_aggregation_service, get_unlp_client
from app.main import app
from app.services.aggregation_service import AggregationService
from app.services.html_extraction import parse_html

TORRE_HTML = """
<html><body>
<div class="variable">
  <div class="nombre">Temperatura</div>
  <table class="valores"><tr><td>Actual</td><td>18,2 &deg;C</td></tr></table>
</div>
<div class="variable">
  <div class="nombre">Viento</div>
  <table class="valores">
    <tr><td>Actual</td><td>23,4 km/h</td></tr>
    <tr><td>Direcci&oacute;n</td><td> NNE </td></tr>
    <tr><td>Promedio</td><td>15 km/h</td></tr>
    <tr><td>R&aacute;faga m&aacute;xima</td><td>41 km/h</td></tr>
  </table>
</div>
</body></html>
"""

CAMPO_HTML = """
<html><body>
<div class="variable">
  <table><tr><td>FECHA: 19/10/2026</td><td>HORA: 14:05</td></tr></table>
</div>
<div class="variable">
  <div class="nombre">Temperatura</div>
  <table class="tabla">
    <tr><td>Actual</td><td class="actual">18,2 &deg;C</td></tr>
    <tr><td>Tendencia</td><td>&uarr;</td></tr>
    <tr><td></td><td>M&iacute;nima</td><td>M&aacute;xima</td></tr>
    <tr><td>Valor</td><td>9,1 &deg;C</td><td>19,5 &deg;C</td></tr>
    <tr><td>Hora</td><td>06:40</td><td>13:55</td></tr>
  </table>
</div>
<div class="variable">
  <div class="nombre">Humedad</div>
  <table class="tabla">
    <tr><td>Actual</td><td class="actual">62 %</td></tr>
    <tr><td>Tendencia</td><td>&darr;</td></tr>
    <tr><td></td><td>M&iacute;nima</td><td>M&aacute;xima</td></tr>
    <tr><td>Valor</td><td>48 %</td><td>91 %</td></tr>
    <tr><td>Hora</td><td>13:50</td><td>05:10</td></tr>
  </table>
</div>
<div class="variable">
  <div class="nombre">Punto de roc&iacute;o</div>
  <table class="tabla"><tr><td>Actual</td><td class="actual">10,8 &deg;C</td></tr></table>
</div>
<div class="variable">
  <div class="nombre">Sensaci&oacute;n t&eacute;rmica</div>
  <table class="tabla">
    <tr><td>Temperatura y viento</td><td></td><td>17,1 &deg;C</td></tr>
    <tr><td></td><td></td><td></td></tr>
    <tr><td>Temperatura y humedad</td><td></td><td>18,0 &deg;C</td></tr>
  </table>
</div>
<div class="variable">
  <div class="nombre">Presi&oacute;n barom&eacute;trica</div>
  <table class="tabla"><tr><td>Actual</td><td class="actual">1013,2 hPa</td></tr></table>
</div>
<div class="variable">
  <div class="nombre">Lluvia</div>
  <table class="tabla">
    <tr><td>Diaria</td><td>2,4 mm</td></tr>
    <tr><td>Intensidad</td><td>0,0 mm/h</td></tr>
  </table>
</div>
</body></html>
"""


def telemetry_payload(estacion="X1", speed=(5, 8), gust=(12,), direction=("NE",)):
    return {
        "estacion": estacion,
        "fechaMedicion": "2024-01-01T00:00:00Z",
        "variables": {
            "VelocidadViento": list(speed),
            "RafagaViento": list(gust),
            "DireccionViento": list(direction),
        },
    }


def http_status_error(status_code: int, url: str = "https://upstream.test/x") -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"Server error '{status_code}'", request=request, response=response)


@pytest.fixture
def aysa_payloads():
    """
    Upstream AySA responses keyed by station id. A value that is an
    exception is raised instead of returned.
    """
    return {
        settings.aysa_bernal_id: telemetry_payload(estacion=settings.aysa_bernal_id),
        settings.aysa_berazategui_id: telemetry_payload(
            estacion=settings.aysa_berazategui_id, speed=(3, 4.5), gust=(9.2,), direction=(270,)
        ),
    }


@pytest.fixture
def aysa_client(aysa_payloads):
    async def fake_fetch(station_id):
        value = aysa_payloads[station_id]
        if isinstance(value, Exception):
            raise value
        return value

    client = MagicMock()
    client.base_url = "https://aysa.test/api"
    client.fetch_station = AsyncMock(side_effect=fake_fetch)
    return client


@pytest.fixture
def unlp_client():
    client = MagicMock()
    client.torre_url = "https://meteo.test/davis/torre/torre.htm"
    client.campo_url = "https://meteo.test/davis/campo/campo.htm"
    client.fetch_torre = AsyncMock(side_effect=lambda: parse_html(TORRE_HTML))
    client.fetch_campo = AsyncMock(side_effect=lambda: parse_html(CAMPO_HTML))
    return client


@pytest.fixture
def service(aysa_client, unlp_client):
    return AggregationService(aysa=aysa_client, unlp=unlp_client)


@pytest.fixture
def test_app(service, unlp_client):
    """
    Return the FastAPI app with upstream clients replaced by fakes.
    """
    app.dependency_overrides[get_aggregation_service] = lambda: service
    app.dependency_overrides[get_unlp_client] = lambda: unlp_client
    yield app
    app.dependency_overrides.clear()
