"""Category registry models.

Categories are supplied by configuration as an ordered list. The order
matters: hash-derived categories index into it, and the seed generator
assigns categories round-robin. The rest of the application (layer colors,
UI filter toggles) derives from this list.
"""

from __future__ import annotations

from typing import Annotated

import pydantic

Channel = Annotated[int, pydantic.Field(ge=0, le=255)]
RGB = tuple[Channel, Channel, Channel]


class Category(pydantic.BaseModel):
    """A point category.

    Attributes:
        id: Stable identifier stored on every point.
        label: Human-readable name for UI panels.
        color: Fill color as an ``(r, g, b)`` triple.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    id: str = pydantic.Field(min_length=1)
    label: str
    color: RGB


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="alpha", label="Alpha", color=(255, 99, 132)),
    Category(id="beta", label="Beta", color=(54, 162, 235)),
    Category(id="gamma", label="Gamma", color=(255, 206, 86)),
    Category(id="delta", label="Delta", color=(75, 192, 192)),
    Category(id="epsilon", label="Epsilon", color=(153, 102, 255)),
)
