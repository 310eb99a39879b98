"""Bot wording, kept in one place so handlers and tests agree on it."""

from ..models import Guard
from .validators import TrackingProblem

# Guards
GUARD_REPLIES: dict[Guard, str] = {
    Guard.EMPTY: "I didn't catch that. Could you please reply?",
    Guard.UNSUPPORTED_LANGUAGE: (
        "Sorry, I currently support English only. "
        "Could you please type your message in English?"
    ),
    Guard.EMOJI_ONLY: "I see emojis! Could you please type your message using words?",
    Guard.MULTI_QUESTION: (
        "I want to help with each question separately. "
        "Could you please ask one question at a time?"
    ),
    Guard.RUDE: "I'm here to help. Let's work together to solve your issue.",
}

# Greeting / yes-no
GREETING = "Hi! I can help you track your lost package. Do you have a tracking number? (yes/no)"
ASK_YES_NO = "Please reply with 'yes' or 'no'."
ASK_TRACKING_NUMBER = "Great! Please enter your tracking number (e.g., AB123456789CD)."
ASK_ALTERNATE_ID = (
    "No problem. Please provide your order number or the email used during purchase."
)

# Tracking number
RESTART = "No worries! Let's start over."
URL_NOT_TRACKING = (
    "That looks like a URL, not a tracking number. Please enter just the tracking number."
)
NO_RESULTS = (
    "Hmm... that tracking number looks valid but isn't showing results. "
    "Would you like to talk to a human agent?"
)
INACTIVE = (
    "This tracking number appears to be outdated or inactive. "
    "Would you like to talk to an agent?"
)
DELIVERED = "\U0001F4E6 Good news! Your package was delivered yesterday. Did you receive it? (yes/no)"
TRACKING_PROBLEMS: dict[TrackingProblem, str] = {
    TrackingProblem.TOO_SHORT: (
        "That looks a bit short. Tracking numbers are usually at least 10 characters."
    ),
    TrackingProblem.TOO_LONG: "That seems too long. Can you double-check your tracking number?",
    TrackingProblem.BAD_CHARACTERS: (
        "Tracking numbers only use letters and numbers. Please try again."
    ),
    TrackingProblem.MALFORMED: (
        "Hmm, that doesn't look right. A tracking number looks like AB123456789CD. "
        "Please try again."
    ),
}
TOO_MANY_ERRORS = (
    "I'm having trouble reading the tracking number. "
    "Would you like to talk to a human agent?"
)

# Alternate id
FOUND_AT_SORTING_CENTER = (
    "Thanks! I found your order. Your package is currently at our sorting center "
    "and should be on its way soon."
)
NOT_FOUND = (
    "I couldn't find an order with that information. "
    "Would you like to talk to a human agent? (yes/no)"
)

# Handoff
CONNECTING = "Connecting you to a human agent now..."
EMPLOYEE_WILL_CALL = (
    "A customer service employee will call you shortly. Thank you for your patience."
)
NO_HANDOFF = "Okay, let me know if you need anything else."

# Delivery confirmation
GLAD_DELIVERED = "Glad to hear that! Let me know if you need anything else."
NOT_RECEIVED = "I'm sorry to hear that. I'll connect you to a human agent for further help."
ASK_RECEIVED = "Please reply with 'yes' or 'no' - did you receive your package?"

# Terminal
CLOSING = "Thanks for using the package tracker bot! Refresh to start over."

# Idle monitor
IDLE_REMINDER = "Are you still there? Let me know if you need help."
