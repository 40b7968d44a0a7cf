from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from hamper_deck.constants import page as P
from hamper_deck.constants.templates import LOGO_URL, OPTION_BACKGROUND_URL
from hamper_deck.models.errors import ImageLoadFailure, SlideTypeMismatchError
from hamper_deck.models.presentation import (
    BaseSlide,
    HamperSlide,
    Item,
    ItemSlide,
    PresentationDetails,
    TemplateSlide,
    TemplateSlideRecord,
)
from hamper_deck.services.image_loader import ImageLoaderService
from hamper_deck.utils.fonts import BOLD, LIGHT, REGULAR, get_font
from hamper_deck.utils.get_env import get_brand_footer_env, get_hamper_name_summary_env
from hamper_deck.utils.image_utils import (
    contain_box,
    draw_placeholder_tile,
    fit_image,
    paste_image,
)
from hamper_deck.utils.layout_utils import (
    build_separated_fragments,
    compute_row_origins,
    layout_centered_segments,
)
from hamper_deck.utils.price_utils import format_currency, format_price, hamper_total

Color = Tuple[int, int, int]

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_deadline(details: PresentationDetails) -> str:
    if not details.deadline:
        return P.NOT_AVAILABLE
    deadline = details.deadline
    return f"{deadline.day:02d} {_MONTHS[deadline.month - 1]} {deadline.year}"


def requirement_lines(details: PresentationDetails) -> List[str]:
    """Overlay lines for the requirements slide, between the client name and the remarks."""
    na = P.NOT_AVAILABLE
    return [
        f"Purpose : {details.purpose or na}",
        f"Expected Quantity : {details.quantity or na}",
        f"Budget (Excl. GST) : {format_currency(details.budget_excl_gst)}",
        f"Budget (Incl. GST) : {format_currency(details.budget_incl_gst)}",
        f"Deadline : {format_deadline(details)}",
        f"Branding Required : {'Yes' if details.branding_required else 'No'}",
        f"Custom Packaging : {'Yes' if details.custom_packaging else 'No'}",
        f"Delivery Location : {details.delivery_location or na}",
    ]


class SlideRenderer:
    """
    Paints one slide onto a fresh page bitmap.

    Image failures never escape: backgrounds fall back to a notice, item
    images to placeholder text, hamper images to an initial tile, and the
    logo is simply skipped. Only a slide of an unknown type raises.
    """

    def __init__(
        self,
        image_loader: ImageLoaderService,
        footer_text: Optional[str] = None,
        show_hamper_name_summary: Optional[bool] = None,
    ):
        self._image_loader = image_loader
        self._footer_text = get_brand_footer_env() if footer_text is None else footer_text
        self._show_hamper_name_summary = (
            get_hamper_name_summary_env()
            if show_hamper_name_summary is None
            else show_hamper_name_summary
        )

    async def render_slide(
        self,
        slide: BaseSlide,
        page_width: int = P.PAGE_WIDTH,
        page_height: int = P.PAGE_HEIGHT,
        details: Optional[PresentationDetails] = None,
        option_number: Optional[int] = None,
    ) -> Image.Image:
        page = Image.new("RGB", (page_width, page_height), P.WHITE)
        draw = ImageDraw.Draw(page)

        if isinstance(slide, TemplateSlideRecord):
            await self._render_template(page, draw, slide.content, details)
        elif isinstance(slide, ItemSlide):
            await self._render_item(page, draw, slide, option_number)
        elif isinstance(slide, HamperSlide):
            await self._render_hamper(page, draw, slide, option_number)
        else:
            raise SlideTypeMismatchError(
                f"Cannot render slide {getattr(slide, 'id', '?')} of type {type(slide).__name__}"
            )

        return page

    # ------------------------------------------------------------
    # Text
    # ------------------------------------------------------------
    def draw_text(
        self,
        draw: ImageDraw.ImageDraw,
        xy: Tuple[float, float],
        text: str,
        font: ImageFont.FreeTypeFont,
        fill: Color,
        anchor: str = "la",
    ) -> None:
        draw.text(xy, text, font=font, fill=fill, anchor=anchor)

    def draw_centered_text(
        self,
        draw: ImageDraw.ImageDraw,
        center_x: float,
        y: float,
        text: str,
        font: ImageFont.FreeTypeFont,
        fill: Color,
    ) -> None:
        self.draw_text(draw, (center_x, y), text, font, fill, anchor="ma")

    # ------------------------------------------------------------
    # Template slides
    # ------------------------------------------------------------
    async def _render_template(
        self,
        page: Image.Image,
        draw: ImageDraw.ImageDraw,
        template: TemplateSlide,
        details: Optional[PresentationDetails],
    ) -> None:
        width, height = page.size
        background = await self._image_loader.load_image(template.image_url)

        if isinstance(background, ImageLoadFailure):
            font = get_font(P.PLACEHOLDER_TEXT_SIZE, REGULAR)
            self.draw_text(draw, (width / 2, height / 2), P.TEMPLATE_FALLBACK_TEXT, font, P.GREY, anchor="mm")
        else:
            # letterboxed on the shorter axis
            layer = fit_image(background, width, height, "contain")
            page.paste(layer, (0, 0), layer)

        if template.is_requirements_slide and details is not None:
            self._draw_requirements(draw, details)

    def _draw_requirements(self, draw: ImageDraw.ImageDraw, details: PresentationDetails) -> None:
        x = P.REQUIREMENTS_X
        y = P.REQUIREMENTS_CLIENT_Y

        self.draw_text(draw, (x, y), details.client_name or P.NOT_AVAILABLE, get_font(P.CLIENT_NAME_SIZE, BOLD), P.BLACK)

        line_font = get_font(P.REQUIREMENT_LINE_SIZE, BOLD)
        y = P.REQUIREMENTS_FIRST_LINE_Y
        for line in requirement_lines(details):
            self.draw_text(draw, (x, y), line, line_font, P.BLACK)
            y += P.REQUIREMENTS_LINE_STEP

        y += P.REQUIREMENTS_REMARKS_GAP
        label = "Remarks :"
        self.draw_text(draw, (x, y), label, line_font, P.BLACK)
        value_x = x + line_font.getlength(label) + P.REMARKS_VALUE_GAP
        self.draw_text(
            draw,
            (value_x, y),
            details.remarks or P.NOT_AVAILABLE,
            get_font(P.REMARKS_VALUE_SIZE, LIGHT),
            P.BLACK,
        )

    # ------------------------------------------------------------
    # Shared frame for item and hamper slides
    # ------------------------------------------------------------
    async def _draw_option_frame(
        self,
        page: Image.Image,
        draw: ImageDraw.ImageDraw,
        option_number: Optional[int],
    ) -> None:
        width, height = page.size
        background, logo = await self._image_loader.load_images([OPTION_BACKGROUND_URL, LOGO_URL])

        if not isinstance(background, ImageLoadFailure):
            layer = fit_image(background, width, height, "fill")
            page.paste(layer, (0, 0), layer)

        if not isinstance(logo, ImageLoadFailure):
            logo_height = max(1, int(round(logo.size[1] * P.LOGO_WIDTH / logo.size[0])))
            paste_image(page, logo, (width - P.PAGE_MARGIN - P.LOGO_WIDTH, P.LOGO_Y, P.LOGO_WIDTH, logo_height))

        if option_number:
            self.draw_text(
                draw,
                (P.OPTION_LABEL_X, P.OPTION_LABEL_Y),
                f"Option {option_number}",
                get_font(P.OPTION_LABEL_SIZE, BOLD),
                P.BLACK,
            )

    def _draw_footer(self, draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
        if not self._footer_text:
            return
        self.draw_text(
            draw,
            (width / 2, height - P.FOOTER_BOTTOM_OFFSET),
            self._footer_text,
            get_font(P.FOOTER_SIZE, REGULAR),
            P.GREY,
            anchor="md",
        )

    # ------------------------------------------------------------
    # Item slides
    # ------------------------------------------------------------
    async def _render_item(
        self,
        page: Image.Image,
        draw: ImageDraw.ImageDraw,
        slide: ItemSlide,
        option_number: Optional[int],
    ) -> None:
        item = slide.content
        width, height = page.size
        center_x, center_y = width / 2, height / 2

        await self._draw_option_frame(page, draw, option_number)

        self.draw_centered_text(draw, center_x, P.ITEM_NAME_Y, item.name, get_font(P.TITLE_SIZE, BOLD), P.BLACK)

        image = await self._image_loader.load_image(item.image_url)
        if isinstance(image, ImageLoadFailure):
            font = get_font(P.PLACEHOLDER_TEXT_SIZE, REGULAR)
            self.draw_text(draw, (center_x, center_y), P.ITEM_IMAGE_FALLBACK_TEXT, font, P.GREY, anchor="mm")
        else:
            box = contain_box(image.size, P.ITEM_IMAGE_MAX_WIDTH, P.ITEM_IMAGE_MAX_HEIGHT, center_x, center_y)
            paste_image(page, image, box)

        price_text = format_price(item.price, slide.price_display_mode, slide.custom_price_text)
        if price_text is not None:
            self.draw_centered_text(
                draw,
                center_x,
                height - P.ITEM_PRICE_BOTTOM_OFFSET,
                price_text,
                get_font(P.PRICE_SIZE, BOLD),
                P.PURPLE,
            )

        self._draw_footer(draw, width, height)

    # ------------------------------------------------------------
    # Hamper slides
    # ------------------------------------------------------------
    async def _render_hamper(
        self,
        page: Image.Image,
        draw: ImageDraw.ImageDraw,
        slide: HamperSlide,
        option_number: Optional[int],
    ) -> None:
        items = slide.content.items
        width, height = page.size
        center_x = width / 2

        await self._draw_option_frame(page, draw, option_number)

        self.draw_centered_text(draw, center_x, P.HAMPER_TITLE_Y, P.HAMPER_TITLE, get_font(P.TITLE_SIZE, BOLD), P.BLACK)

        if self._show_hamper_name_summary and items:
            self._draw_name_summary(draw, [item.name for item in items], center_x)

        if items:
            await self._draw_item_row(page, draw, items, center_x)
        else:
            self.draw_text(
                draw,
                (center_x, P.HAMPER_ROW_Y + P.HAMPER_IMAGE_SIZE / 2),
                P.HAMPER_EMPTY_TEXT,
                get_font(P.PLACEHOLDER_TEXT_SIZE, REGULAR),
                P.GREY,
                anchor="mm",
            )

        total_text = format_price(hamper_total(items), slide.price_display_mode, slide.custom_price_text)
        if total_text is not None:
            self.draw_centered_text(
                draw,
                center_x,
                height - P.HAMPER_TOTAL_LABEL_BOTTOM_OFFSET,
                P.HAMPER_TOTAL_LABEL,
                get_font(P.PRICE_LABEL_SIZE, REGULAR),
                P.GREY,
            )
            self.draw_centered_text(
                draw,
                center_x,
                height - P.HAMPER_TOTAL_BOTTOM_OFFSET,
                total_text,
                get_font(P.PRICE_SIZE, BOLD),
                P.PURPLE,
            )

        self._draw_footer(draw, width, height)

    def _draw_name_summary(self, draw: ImageDraw.ImageDraw, names: List[str], center_x: float) -> None:
        font = get_font(P.HAMPER_SUMMARY_SIZE, REGULAR)
        fragments = build_separated_fragments(names)
        origins = layout_centered_segments(fragments, font.getlength, center_x)
        for fragment, x in zip(fragments, origins):
            self.draw_text(draw, (x, P.HAMPER_SUMMARY_Y), fragment, font, P.BLACK)

    async def _draw_item_row(
        self,
        page: Image.Image,
        draw: ImageDraw.ImageDraw,
        items: List[Item],
        center_x: float,
    ) -> None:
        size = P.HAMPER_IMAGE_SIZE
        top = P.HAMPER_ROW_Y
        origins = compute_row_origins(len(items), size, P.HAMPER_IMAGE_SPACING, center_x)
        images = await self._image_loader.load_images([item.image_url for item in items])

        name_font = get_font(P.HAMPER_ITEM_NAME_SIZE, REGULAR)
        name_width = size + P.HAMPER_IMAGE_SPACING

        for item, image, x in zip(items, images, origins):
            slot_center_x = x + size / 2
            left = int(round(x))

            if isinstance(image, ImageLoadFailure):
                draw_placeholder_tile(draw, (left, top, size, size), P.PLACEHOLDER_FILL, P.PLACEHOLDER_BORDER)
                initial = (item.name.strip()[:1] or "?").upper()
                self.draw_text(
                    draw,
                    (slot_center_x, top + size / 2),
                    initial,
                    get_font(P.HAMPER_INITIAL_SIZE, BOLD),
                    P.GREY,
                    anchor="mm",
                )
            else:
                paste_image(page, image, contain_box(image.size, size, size, slot_center_x, top + size / 2))

            self.draw_centered_text(
                draw,
                slot_center_x,
                top + size + P.HAMPER_NAME_GAP,
                truncate_to_width(item.name, name_font, name_width),
                name_font,
                P.BLACK,
            )


def truncate_to_width(text: str, font: ImageFont.FreeTypeFont, max_width: float, ellipsis: str = "…") -> str:
    if font.getlength(text) <= max_width:
        return text
    while text and font.getlength(text + ellipsis) > max_width:
        text = text[:-1]
    return text.rstrip() + ellipsis
