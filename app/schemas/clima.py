from typing import Optional

from pydantic import BaseModel, Field


class TemperatureOut(BaseModel):
    """
    Current value and daily extremes of a variable, as rendered by the page.
    Used for both temperature and humidity.
    """

    actual: Optional[str] = None
    minima_diaria: Optional[str] = None
    maxima_diaria: Optional[str] = None
    hora_minima: Optional[str] = None
    hora_maxima: Optional[str] = None


class DewPointOut(BaseModel):
    actual: Optional[str] = None


class WindChillOut(BaseModel):
    temperatura_y_viento: Optional[str] = None
    temperatura_y_humedad: Optional[str] = None


class PressureOut(BaseModel):
    actual: Optional[str] = None


class RainOut(BaseModel):
    diaria: Optional[str] = None
    intensidad: Optional[str] = None


class WindTextOut(BaseModel):
    velocidad_actual: Optional[str] = None
    racha_maxima: Optional[str] = None
    direccion: Optional[str] = None


class ClimaReport(BaseModel):
    """
    Full weather report scraped from the UNLP dashboard pages.

    Values are returned as the page renders them (units included), since the
    page mixes numeric and textual fields.
    """

    fecha: Optional[str] = Field(default=None, description="Date printed on the field page")
    hora: Optional[str] = Field(default=None, description="Time printed on the field page")
    temperatura: TemperatureOut = Field(default_factory=TemperatureOut)
    humedad: TemperatureOut = Field(default_factory=TemperatureOut)
    punto_rocio: DewPointOut = Field(default_factory=DewPointOut)
    sensacion_termica: WindChillOut = Field(default_factory=WindChillOut)
    presion: PressureOut = Field(default_factory=PressureOut)
    lluvia: RainOut = Field(default_factory=RainOut)
    viento: WindTextOut = Field(default_factory=WindTextOut)
