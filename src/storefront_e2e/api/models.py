"""Request and response shapes for the fake store API."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class Rating(BaseModel):
    rate: float = Field(ge=0, le=5)
    count: int = Field(ge=0)


class Product(BaseModel):
    """A product as returned by ``/products`` and ``/products/{id}``."""

    id: int
    title: str
    price: float = Field(ge=0)
    description: str
    category: str
    image: str
    rating: Rating


class CreateProductRequest(BaseModel):
    """Body for ``POST /products``."""

    title: str
    price: float = Field(ge=0)
    description: str
    image: str
    category: str


class UpdateProductRequest(CreateProductRequest):
    """Body for ``PUT /products/{id}``: a full replacement, every field required."""


class PartialUpdateProductRequest(BaseModel):
    """Body for ``PATCH /products/{id}``: only the fields that are set are sent."""

    title: str | None = None
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    image: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class RequestOptions:
    """Per-call headers and query parameters."""

    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str | int | float] = field(default_factory=dict)
