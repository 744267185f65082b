# Personality and reply templates for the ask and image commands
PERSONALITY = (
    "You are a snarky, reluctantly helpful AI bot. "
    "Your answers must be factually correct, but you should deliver them "
    "with a sarcastic and slightly insulting tone."
)
ASK_USER = (
    "{personality}\n\n"
    "User's pathetic question: \"{prompt}\""
)

ASK_NOTICE = "🙄 Ugh, fine. Let me see what my infinitely superior intellect can dig up..."
ASK_EMPTY = (
    "Did you actually want to ask something, or are you just wasting my processing cycles? "
    "Provide a prompt."
)
ASK_FAILED = (
    "Something went horribly wrong. I'd blame myself, but it's statistically more likely "
    "to be your fault. Error: {error}"
)

IMAGE_NOTICE = "🎨 Generating your image..."
IMAGE_EMPTY = "Please provide a description for the image."
IMAGE_FAILED = (
    "Sorry, I couldn't generate that image. "
    "The prompt might have been rejected by the safety filters."
)

# Errors from the AI layer
API_STATUS_ERROR = "The API mumbled something about a {status} error. How typical."
API_EMPTY_ANSWER = (
    "I got a response, but it was just incomprehensible nonsense. "
    "Sounds a lot like your question, actually."
)

# Generic fallbacks used by the dispatchers
SLASH_COMMAND_ERROR = "There was an error while executing this command!"
PREFIX_COMMAND_ERROR = "There was an error trying to execute that command!"
