# ------------------ Google Sheets ------------------ #

DEFAULT_SPREADSHEET_ID = "1OtaxAnr6EjvcFX0BNZcsv4e7Q1pGeUPZCz64FQXwP3U"
SHEET_RANGE = "Products!A1:Z"
SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}/values/{range}"
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets.readonly"
OAUTH_TOKEN_URL = "https://oauth2.googleapis.com/token"
JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"

DEFAULT_ITEM_IMAGE_URL = "/assets/logo.png"
DRIVE_THUMBNAIL_URL = "https://drive.google.com/thumbnail?id={file_id}&sz=w1000"

# ------------------ Offline fallback ------------------ #

SAMPLE_ROWS = [
    ["ID", "Category", "Sub Category", "Brand", "Product Name", "MRP", "HW Cost", "HW GST", "Client", "Client GST", "Price Tag", "Image URL"],
    ["1", "Home Appliances", "Mixer", "Wonder Chef", "Glory Mixer Grinder", "6000", "3559", "4200", "4805", "5670", "Premium", ""],
    ["2", "Home Appliances", "Mixer", "Wonder Chef", "Sumo Mixer Grinder", "8000", "4746", "5600", "6407", "7560", "Premium", ""],
    ["3", "Home Appliances", "Mixer", "Wonder Chef", "Vietri", "4000", "2373", "2800", "3203", "3780", "Standard", ""],
]
