# ------------------ Page geometry ------------------ #

# Shared by the on-screen preview and every exported page.
PAGE_WIDTH = 1920
PAGE_HEIGHT = 1080
PDF_RESOLUTION = 144.0

PAGE_MARGIN = 80

# ------------------ Colours ------------------ #

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (128, 128, 128)
PURPLE = (102, 51, 153)
PLACEHOLDER_FILL = (240, 240, 240)
PLACEHOLDER_BORDER = (200, 200, 200)

# ------------------ Font sizes ------------------ #

OPTION_LABEL_SIZE = 56
TITLE_SIZE = 72
PRICE_SIZE = 88
PRICE_LABEL_SIZE = 40
PLACEHOLDER_TEXT_SIZE = 32
HAMPER_ITEM_NAME_SIZE = 28
HAMPER_INITIAL_SIZE = 64
HAMPER_SUMMARY_SIZE = 36
FOOTER_SIZE = 24
CLIENT_NAME_SIZE = 84
REQUIREMENT_LINE_SIZE = 48
REMARKS_VALUE_SIZE = 44

# ------------------ Item slide ------------------ #

# y values are measured from the top edge, *_BOTTOM_OFFSET values from the bottom edge.

OPTION_LABEL_X = PAGE_MARGIN + 40
OPTION_LABEL_Y = PAGE_MARGIN + 40
ITEM_NAME_Y = 180
ITEM_IMAGE_MAX_WIDTH = 800
ITEM_IMAGE_MAX_HEIGHT = 560
ITEM_PRICE_BOTTOM_OFFSET = 240

# ------------------ Hamper slide ------------------ #

HAMPER_TITLE = "Product Hamper"
HAMPER_TITLE_Y = 180
HAMPER_SUMMARY_Y = 290
HAMPER_ROW_Y = 380
HAMPER_IMAGE_SIZE = 220
HAMPER_IMAGE_SPACING = 40
HAMPER_NAME_GAP = 16
HAMPER_TOTAL_LABEL = "Total Value"
HAMPER_TOTAL_LABEL_BOTTOM_OFFSET = 330
HAMPER_TOTAL_BOTTOM_OFFSET = 270
HAMPER_EMPTY_TEXT = "No items in hamper"

# ------------------ Requirements overlay ------------------ #

REQUIREMENTS_X = PAGE_MARGIN + 240
REQUIREMENTS_CLIENT_Y = 180
REQUIREMENTS_FIRST_LINE_Y = 300
REQUIREMENTS_LINE_STEP = 72
REQUIREMENTS_REMARKS_GAP = 20
REMARKS_VALUE_GAP = 24

# ------------------ Branding ------------------ #

LOGO_WIDTH = 190
LOGO_Y = PAGE_MARGIN
FOOTER_BOTTOM_OFFSET = PAGE_MARGIN

# ------------------ Fallback text ------------------ #

TEMPLATE_FALLBACK_TEXT = "Template image could not be loaded"
ITEM_IMAGE_FALLBACK_TEXT = "[Image not available]"
NOT_AVAILABLE = "N/A"
