import os

from dotenv import find_dotenv, load_dotenv

FALLBACK_ITERATION_COUNT_LOG2 = 8  # same default cost WordPress ships

def default_iteration_count_log2(default=FALLBACK_ITERATION_COUNT_LOG2):
    # .env is read on first use from the caller's working directory, not at import;
    # variables already in the environment win
    load_dotenv(find_dotenv(usecwd=True))
    try: return int(os.getenv("PHPASS_ITERATION_COUNT_LOG2", default))
    except ValueError: return default
