from enum import Enum

# upstream chat completion parameters, fixed for every request
OPENAI_MODEL = 'gpt-3.5-turbo'
OPENAI_TEMPERATURE = 0.7
OPENAI_MAX_TOKENS = 500

# degraded fallback used when the model output is not valid JSON
FALLBACK_SUMMARY_MAX_LENGTH = 200
FALLBACK_ELLIPSIS = '...'
FALLBACK_KEY_POINT = 'Content analysis completed'
FALLBACK_SENTIMENT = 'Neutral'

COPY_ACKNOWLEDGEMENT_SECONDS = 2.0


class ErrorMessage(Enum):
    TEXT_REQUIRED = 'Text is required'
    API_KEY_NOT_CONFIGURED = 'OpenAI API key not configured'
    UPSTREAM_FAILURE = 'Failed to generate summary from OpenAI'
    NO_CONTENT = 'No content received from OpenAI'
    INTERNAL = 'Internal server error'

    # panel
    NO_TRANSCRIPT = 'No transcript available. Please transcribe audio first.'
    GENERATE_FAILED = 'Failed to generate summary'
