from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductFeature(BaseModel):
    """A feature tile linking to a canned search."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    img_src: str = Field(alias="imgSrc")
    heading: str
    subheading: str
    path: str


class ExpertProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    profession: str
    name: str
    img_src: str = Field(alias="imgSrc")
    product_link: str = Field(alias="productLink")
    price: str
    features: List[str]
