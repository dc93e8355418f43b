from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    url: Optional[str] = None
    image: Optional[str] = None
    same_as: List[str] = Field(default_factory=list, alias="sameAs")


class Article(BaseModel):
    """One blog article as authored in ``blog-articles.json``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug: str
    page_title: str = Field(alias="pageTitle")
    description: str = ""
    meta_description: str = Field(default="", alias="metaDescription")
    featured_image_url: str = Field(default="", alias="featuredImageUrl")
    featured_image_alt: str = Field(default="", alias="featuredImageAlt")
    main_category_slug: str = Field(alias="mainCategorySlug")
    main_category_name: str = Field(default="", alias="mainCategoryName")
    sub_category_slug: str = Field(alias="subCategorySlug")
    sub_category_name: str = Field(default="", alias="subCategoryName")
    html_body: str = Field(default="", alias="htmlBody")
    is_preformatted: bool = Field(default=False, alias="isPreformatted")
    amazon_link: Optional[str] = None  # affiliate link, key is snake_case in the dataset
    date_published: str = Field(alias="datePublished")
    date_modified: str = Field(default="", alias="dateModified")
    featured_image_hint: Optional[str] = Field(default=None, alias="featuredImageHint")
    title_tag: Optional[str] = Field(default=None, alias="titleTag")
    author: Optional[Author] = None


class InternalLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    text: str


class MainCategory(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug: str
    name: str
    title_tag: str = Field(default="", alias="titleTag")
    meta_description: str = Field(default="", alias="metaDescription")
    description: str = ""


class SubCategory(MainCategory):
    main_category_slug: str = Field(alias="mainCategorySlug")


class BlogDataset(BaseModel):
    """Top-level shape of the static blog dataset."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    main_categories: List[MainCategory] = Field(default_factory=list, alias="mainCategories")
    sub_categories: List[SubCategory] = Field(default_factory=list, alias="subCategories")
    articles: List[Article] = Field(default_factory=list)
    internal_links: List[InternalLink] = Field(default_factory=list, alias="internalLinks")
