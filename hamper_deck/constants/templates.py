from hamper_deck.models.presentation import TemplateSlide, TemplateSlideRecord

# ------------------ Static assets ------------------ #

LOGO_URL = "/assets/logo.png"
OPTION_BACKGROUND_URL = "/assets/slides/option-template.png"


def _template(slide_id: str, image_url: str, is_requirements_slide: bool = False):
    return TemplateSlideRecord(
        id=slide_id,
        content=TemplateSlide(
            image_url=image_url,
            is_requirements_slide=is_requirements_slide,
        ),
    )


# ------------------ Fixed deck frame ------------------ #

# Rendered before the user's slides, in this order.
PREFIX_TEMPLATE_SLIDES = (
    _template("template-welcome", "/assets/slides/welcome.jpg"),
    _template("template-whyus", "/assets/slides/whyus.jpg"),
    _template("template-topclients", "/assets/slides/topclients.jpg"),
    _template("template-steps", "/assets/slides/steps.jpg"),
    _template("template-requirements", "/assets/slides/requirements.jpg", True),
)

# Rendered after the user's slides.
SUFFIX_TEMPLATE_SLIDES = (
    _template("template-contactus", "/assets/slides/contactus.jpg"),
)
