"""Constants for cardbridge.

This module centralizes static lookup tables and default values used throughout the application.
"""

# Basecamp project name (lowercased) -> card table list id.
# Projects missing from this table fall back to the default project/list.
PROJECT_TO_LIST_ID = {
    "case study : deck + website": "9120546407",
    "blogs: website": "9110129241",
    "new website": "9029767677",
    "truva": "9001050258",
    "project attonomous": "8699666732",
    "amp template": "8662227827",
    "apparel - group": "8587548781",
    "jockey & speedo - moengage": "8545140731",
    "levi's - clevertap": "8418705199",
    "akasa airlines": "7891669952",
    "content for attributics": "7577004160",
    "attributics": "6935986330",
    "learning track & certifications": "6859333025",
    "unicef": "7161225064",
}

# Inbound message defaults
DEFAULT_MESSAGE_TEXT = "No message text"
DEFAULT_SENDER_NAME = "Unknown Sender"
DEFAULT_SENDER_EMAIL = "Unknown Email"
DEFAULT_CHAT_SPACE_URL = "N/A"
