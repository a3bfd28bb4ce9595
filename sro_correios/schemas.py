"""Pydantic schemas for the carrier's raw JSON responses.

The carrier publishes no formal contract, so nearly every field is
optional and presence is checked explicitly by the normalizer. Unknown
fields are ignored. A body that does not validate is treated as a parse
failure by the fetcher.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CorreiosAddress(BaseModel):
    """Facility address. Only city and state are used."""

    model_config = ConfigDict(extra="ignore")

    cidade: str | None = None
    uf: str | None = None


class CorreiosUnit(BaseModel):
    """Carrier facility (post office, distribution center or country)."""

    model_config = ConfigDict(extra="ignore")

    endereco: CorreiosAddress | None = None
    nome: str | None = None
    tipo: str | None = None


class CorreiosEvent(BaseModel):
    """One raw tracking event."""

    model_config = ConfigDict(extra="ignore")

    codigo: str | None = None
    descricao: str
    dtHrCriado: datetime
    unidade: CorreiosUnit
    unidadeDestino: CorreiosUnit | None = None


class PostalType(BaseModel):
    """Carrier postal-service classification."""

    model_config = ConfigDict(extra="ignore")

    categoria: str | None = None
    descricao: str | None = None


class CorreiosObject(BaseModel):
    """Tracking data for one shipment code."""

    model_config = ConfigDict(extra="ignore")

    codObjeto: str | None = None
    tipoPostal: PostalType | None = None
    mensagem: str | None = None
    eventos: list[CorreiosEvent] | None = None


class CorreiosResponse(BaseModel):
    """Top-level tracking response. Always one object per request."""

    model_config = ConfigDict(extra="ignore")

    objetos: list[CorreiosObject] = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Handshake response carrying the one-shot access token."""

    model_config = ConfigDict(extra="ignore")

    token: str = Field(..., min_length=1)
