# portfolio/schemas.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .assets import AssetProcessingOptions


class RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class RenderRequest(RequestBody):
    portfolio_id: str = Field(..., alias='portfolioId', min_length=1)
    template_id: Optional[str] = Field(None, alias='templateId')
    options: Dict[str, Any] = Field(default_factory=dict)


class ExportRequest(RequestBody):
    portfolio_id: str = Field(..., alias='portfolioId', min_length=1)
    format: str = 'html'
    options: Dict[str, Any] = Field(default_factory=dict)


class AssetOptions(RequestBody):
    optimize_images: bool = Field(False, alias='optimizeImages')
    max_image_width: Optional[int] = Field(None, alias='maxImageWidth', gt=0)
    max_image_height: Optional[int] = Field(None, alias='maxImageHeight', gt=0)
    image_quality: Optional[int] = Field(None, alias='imageQuality', ge=1, le=100)
    convert_to_webp: bool = Field(False, alias='convertToWebP')
    generate_thumbnails: bool = Field(False, alias='generateThumbnails')

    def to_processing_options(self) -> AssetProcessingOptions:
        return AssetProcessingOptions(**self.model_dump())


class AssetRequest(RequestBody):
    portfolio_id: str = Field(..., alias='portfolioId', min_length=1)
    options: AssetOptions = Field(default_factory=AssetOptions)


class ThemeSelectionRequest(RequestBody):
    template_id: str = Field(..., alias='templateId', min_length=1)
    color_scheme_id: Optional[str] = Field(None, alias='colorSchemeId')


class PreferencesUpdate(RequestBody):
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    theme: Optional[str] = None
    language: Optional[str] = None
    auto_save: Optional[bool] = Field(None, alias='autoSave')
    notifications: Optional[bool] = None

    @field_validator('theme')
    @classmethod
    def known_theme(cls, v):
        if v is not None and v not in ('light', 'dark', 'system'):
            raise ValueError("theme must be one of light, dark, system")
        return v

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
