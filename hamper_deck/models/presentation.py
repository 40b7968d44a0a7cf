import uuid
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


class DeckModel(BaseModel):
    """Base for every deck record; accepts camelCase keys from the editor UI."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class PriceDisplayMode(str, Enum):
    SHOW = "show"
    UPON_REQUEST = "upon_request"
    HIDE = "hide"


class Item(DeckModel):
    id: str
    name: str
    mrp: float = 0.0
    hw_cost: float = Field(default=0.0, alias="hwCost")
    hw_with_gst: float = Field(default=0.0, alias="hwWithGST")
    client_price: float = 0.0
    client_price_with_gst: float = Field(default=0.0, alias="clientPriceWithGST")
    price_tag: str = ""
    image_url: str = ""
    category: Optional[str] = None
    sub_category: Optional[str] = None
    brand: Optional[str] = None

    @property
    def price(self) -> float:
        """Client-facing price used on slides and in hamper totals."""
        return self.client_price


class Hamper(DeckModel):
    # unknown keys are rejected so item-shaped content cannot pass as a hamper
    model_config = ConfigDict(extra="forbid")

    id: str
    items: List[Item] = Field(default_factory=list)


class TemplateSlide(DeckModel):
    model_config = ConfigDict(extra="forbid")

    image_url: str
    is_requirements_slide: bool = False


def _new_slide_id() -> str:
    return str(uuid.uuid4())


class BaseSlide(DeckModel):
    id: str = Field(default_factory=_new_slide_id)
    created_at: datetime = Field(default_factory=datetime.now)
    price_display_mode: PriceDisplayMode = PriceDisplayMode.SHOW
    custom_price_text: Optional[str] = None

    @field_validator("price_display_mode", mode="before")
    @classmethod
    def default_price_display_mode(cls, value: Any) -> Any:
        # A missing or null mode from the UI means "show"
        return PriceDisplayMode.SHOW if value is None else value


class ItemSlide(BaseSlide):
    type: Literal["item"] = "item"
    content: Item


class HamperSlide(BaseSlide):
    type: Literal["hamper"] = "hamper"
    content: Hamper


class TemplateSlideRecord(BaseSlide):
    type: Literal["template"] = "template"
    content: TemplateSlide


SlideModel = Annotated[
    Union[ItemSlide, HamperSlide, TemplateSlideRecord],
    Field(discriminator="type"),
]

SLIDE_ADAPTER: TypeAdapter = TypeAdapter(SlideModel)


class PresentationDetails(DeckModel):
    client_name: str = ""
    purpose: Optional[str] = ""
    quantity: int = 0
    budget_excl_gst: float = Field(default=0, alias="budgetExclGst")
    budget_incl_gst: float = Field(default=0, alias="budgetInclGst")
    deadline: Optional[date] = Field(default_factory=date.today)
    branding_required: bool = False
    custom_packaging: bool = False
    delivery_location: Optional[str] = ""
    remarks: Optional[str] = ""

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, value: Any) -> Any:
        """Accept JS ISO timestamps ("2025-01-05T00:00:00.000Z") as dates."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value


class Presentation(DeckModel):
    """
    The user-editable deck: details, ordered user slides and the active
    slide pointer. Template slides are not part of it; the exporter adds them.
    """

    details: PresentationDetails = Field(default_factory=PresentationDetails)
    slides: List[SlideModel] = Field(default_factory=list)
    active_slide_id: Optional[str] = None

    def get_slide(self, slide_id: str) -> Optional[BaseSlide]:
        for slide in self.slides:
            if slide.id == slide_id:
                return slide
        return None

    def add_slide(self, default_item: Item) -> ItemSlide:
        slide = ItemSlide(content=default_item, price_display_mode=PriceDisplayMode.SHOW)
        self.slides.append(slide)
        self.active_slide_id = slide.id
        return slide

    def select_slide(self, slide_id: str) -> None:
        self.active_slide_id = slide_id

    def update_slide(self, slide_id: str, **updates: Any) -> Optional[BaseSlide]:
        """
        Merge updates into a slide and re-validate it, so a type change must
        come with a matching content payload. Unknown ids are ignored.
        """
        for index, slide in enumerate(self.slides):
            if slide.id != slide_id:
                continue
            data = dict(slide)
            data.update(updates)
            updated = SLIDE_ADAPTER.validate_python(data)
            self.slides[index] = updated
            return updated
        return None

    def delete_slide(self, slide_id: str) -> None:
        self.slides = [slide for slide in self.slides if slide.id != slide_id]
        if self.active_slide_id == slide_id:
            self.active_slide_id = self.slides[0].id if self.slides else None

    def update_details(self, **updates: Any) -> PresentationDetails:
        data = dict(self.details)
        data.update(updates)
        self.details = PresentationDetails.model_validate(data)
        return self.details

    def snapshot(self) -> "Presentation":
        """Deep copy taken at export start so later edits cannot tear the export."""
        return self.model_copy(deep=True)
