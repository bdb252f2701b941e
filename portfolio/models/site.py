from typing import List, Optional

from pydantic import BaseModel, Field


class SocialMedia(BaseModel):
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    github: Optional[str] = None
    email: Optional[str] = None


class SiteMetadata(BaseModel):
    """Site-wide metadata and the static copy shown on the home page."""

    title: str = "Portfolio"
    author: str = ""
    description: str = ""
    image: str = "/website-cover.png"
    site_url: str = "http://localhost:8000/"
    language: str = "en-US"
    locale: str = "en_us"
    twitter_username: str = ""
    menus: List[str] = Field(default_factory=lambda: ["Home", "About", "Blog", "Contact"])
    social_media: SocialMedia = Field(default_factory=SocialMedia)

    hero_heading: List[str] = Field(default_factory=lambda: ["Hi,"])
    roles: str = ""
    about: List[str] = Field(default_factory=list)
    contact: List[str] = Field(default_factory=list)
    contact_notice: str = "Coming soon."
    asset_url: str = "/plato.glb"
