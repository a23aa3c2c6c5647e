"""
utils/constants.py

Purpose: Centralized static content

- Fallback message templates per category
- Completion prompts
- Category labels for the dashboard picker
- User-facing response and error strings

(Prevents hardcoding across the codebase)
"""

# ============================================================
# MESSAGE TEMPLATES (used when OpenAI is unavailable)
# ============================================================

# Placeholders: {context}, {name}
MESSAGE_TEMPLATES = {
    "followup": "Hi! Following up on {context}. Let me know if you have any questions or if there's anything I can help with. - {name}",
    "reminder": "Hey! Just a friendly reminder about {context}. Looking forward to connecting! - {name}",
    "greeting": "Hi there! {context} Hope you're doing well! - {name}",
    "thankyou": "Thank you so much! {context} Really appreciate it! - {name}",
    "update": "Quick update: {context} Let me know if you need anything else. - {name}",
    "custom": "{context}",
}

CUSTOM_TEMPLATE_KEY = "custom"


# ============================================================
# COMPLETION PROMPTS
# ============================================================

COMPOSER_SYSTEM_PROMPT = (
    "You are {name} from {business}. Write SMS messages in a friendly, "
    "professional tone that sounds natural and personal. Keep messages concise "
    "(under 160 characters when possible). Sign off with your name."
)

COMPOSER_USER_PROMPT = "Write a {category} message with this context: {context}"


# ============================================================
# CATEGORY LABELS
# ============================================================

MESSAGE_TYPE_LABELS = {
    "followup": "Follow-up",
    "reminder": "Reminder",
    "greeting": "Greeting",
    "thankyou": "Thank You",
    "update": "Update",
    "custom": "Custom",
}


# ============================================================
# RESPONSES & ERRORS
# ============================================================

SEND_SUCCESS_MESSAGE = 'Message sent successfully! "{content}"'

MISSING_INPUT_ERROR = "Phone number and context are required"
SEND_FAILED_ERROR = "Failed to send message"
GATEWAY_REJECTED_ERROR = "Failed to send SMS"
GATEWAY_NETWORK_ERROR = "Network error"
