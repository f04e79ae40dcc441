import os


# utilities
def tobool(val: str | None):
    if val is None:
        return False
    val = val.lower().strip()
    if val in ['y', 'yes', 'true', '1']:
        return True
    return False


# general
app_port = int(os.environ.get('RECAP_PORT', 8000))
log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()

# openai
openai_api_base_url = os.environ.get('OPENAI_API_BASE_URL', 'https://api.openai.com/v1').rstrip('/')


def get_openai_api_key() -> str | None:
    # not cached, read on every call
    return os.environ.get('OPENAI_API_KEY') or None


# summaries
summary_include_sentiment = tobool(os.environ.get('SUMMARY_INCLUDE_SENTIMENT'))

# panel
summary_api_url = os.environ.get('SUMMARY_API_URL', f'http://localhost:{app_port}/api/summarize')

# monitoring
enable_metrics = tobool(os.environ.get('ENABLE_METRICS', 'true'))
metrics_port = int(os.environ.get('METRICS_PORT', 8001))
